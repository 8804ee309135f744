"""Version number packing and host platform detection."""

from __future__ import annotations

import platform
import sys

__all__ = [
    "version_number",
    "yyyymmdd_to_version",
    "yyyymm_to_version",
    "host_os",
    "host_arch",
]


def version_number(major: int, minor: int, patch: int) -> int:
    """Pack a version triple into one comparable integer.

    Each component is truncated: major and minor to three digits,
    patch to five digits.
    """
    return (major % 1000) * 100_000_000 + (minor % 1000) * 100_000 + patch % 100_000


def yyyymmdd_to_version(value: int) -> int:
    """Convert a date-style version ``YYYYMMDD`` into a packed version number."""
    return version_number(value // 10_000, (value // 100) % 100, value % 100)


def yyyymm_to_version(value: int) -> int:
    """Convert a date-style version ``YYYYMM`` into a packed version number."""
    return version_number((value // 100) % 100, value % 100, 0)


def host_os() -> str:
    """Name of the operating system: windows, linux, ios, cygwin or unknown."""
    plat = sys.platform
    if plat.startswith("win"):
        return "windows"
    if plat.startswith("linux"):
        return "linux"
    if plat in ("darwin", "ios"):
        return "ios"
    if plat.startswith("cygwin"):
        return "cygwin"
    return "unknown"


def host_arch() -> str:
    """Name of the processor architecture: x86, riscv, arm or unknown."""
    machine = platform.machine().lower()
    if machine in ("x86_64", "amd64", "x64"):
        return "x86"
    if machine.startswith("riscv"):
        return "riscv"
    if machine.startswith(("arm", "aarch64")):
        return "arm"
    return "unknown"