"""Readers for kernel-provided values under /proc."""

from __future__ import annotations

from pathlib import Path

from shellsplit.core.cmdline import command_line_split
from shellsplit.core.i18n import Translator

KERNEL_UUID_PATH = Path("/proc/sys/kernel/random/uuid")
KERNEL_CMDLINE_PATH = Path("/proc/cmdline")


def random_kernel_uuid(path: Path = KERNEL_UUID_PATH) -> str:
    """Return a fresh random UUID generated by the kernel.

    Each read of the file yields a new value. OSError propagates.
    """
    return path.read_text().strip()


def kernel_command_line(
    path: Path = KERNEL_CMDLINE_PATH, *, translator: Translator | None = None
) -> list[str]:
    """Read and split the kernel boot command line."""
    return command_line_split(path.read_text(), translator=translator)
