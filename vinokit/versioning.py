"""Checks on the runtime library's version string."""

from __future__ import annotations

import re

from vinokit.errors import LoadingError

_SEPARATORS = re.compile(r"[.-]")


def parse_version(version: str) -> tuple[int, int]:
    """Return the (year, minor) pair at the start of a version string.

    Raises ValueError if the string does not begin with two integer parts.
    """
    parts = _SEPARATORS.split(version)
    if len(parts) < 2:
        raise ValueError(f"malformed version string: {version!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"malformed version string: {version!r}") from None


def is_pre_2025_1_version(version: str) -> bool:
    """Return True if the version is older than 2025.1."""
    year, minor = parse_version(version)
    return year < 2025 or (year == 2025 and minor < 1)


def check_supported_version(version: str) -> tuple[int, int]:
    """Return the parsed version, or raise LoadingError if it is too old."""
    parsed = parse_version(version)
    if is_pre_2025_1_version(version):
        raise LoadingError(
            LoadingError.Kind.SYSTEM_FAILURE,
            f"OpenVINO version is too old: {version}",
        )
    return parsed