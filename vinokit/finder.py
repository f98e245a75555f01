"""Locate the inference runtime's shared libraries and plugin configuration.

The runtime can be installed from an archive, from a system package or by
building it from source, and each method puts its files somewhere else.
:func:`find` looks first in the directories named by special environment
variables and then in the known installation locations. :func:`find_plugins_xml`
does the same for the ``plugins.xml`` file that maps devices to their
implementation libraries.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_OPENVINO_INSTALL_DIR = "OPENVINO_INSTALL_DIR"
ENV_OPENVINO_BUILD_DIR = "OPENVINO_BUILD_DIR"
ENV_INTEL_OPENVINO_DIR = "INTEL_OPENVINO_DIR"
ENV_OPENVINO_PLUGINS_XML = "OPENVINO_PLUGINS_XML"

PLUGINS_XML = "plugins.xml"
_PLUGIN_DIRECTORY_PREFIX = "openvino-"

_IS_WINDOWS = sys.platform.startswith("win")
_IS_MACOS = sys.platform == "darwin"
_IS_LINUX = sys.platform.startswith("linux")

if _IS_MACOS:
    LIBRARY_PATH_VARIABLE = "DYLD_LIBRARY_PATH"
elif _IS_WINDOWS:
    LIBRARY_PATH_VARIABLE = "PATH"
else:
    LIBRARY_PATH_VARIABLE = "LD_LIBRARY_PATH"

if _IS_WINDOWS:
    DEFAULT_INSTALLATION_DIRECTORIES: tuple[str, ...] = (
        "C:\\Program Files (x86)\\Intel\\openvino_2022",
        "C:\\Program Files (x86)\\Intel\\openvino",
    )
elif _IS_LINUX or _IS_MACOS:
    DEFAULT_INSTALLATION_DIRECTORIES = (
        "/opt/intel/openvino_2022",
        "/opt/intel/openvino",
    )
else:
    DEFAULT_INSTALLATION_DIRECTORIES = ()

if _IS_LINUX:
    SYSTEM_INSTALLATION_DIRECTORIES: tuple[str, ...] = (
        "/lib",  # DEB package, runtime >= 2023.2
        "/usr/lib/x86_64-linux-gnu",  # DEB package, runtime >= 2022.3
        "/lib/x86_64-linux-gnu",  # DEB package (TBB)
        "/usr/lib64",  # RPM package, runtime >= 2022.3
    )
else:
    SYSTEM_INSTALLATION_DIRECTORIES = ()

KNOWN_INSTALLATION_SUBDIRECTORIES = (
    "runtime/lib/intel64/Release",
    "runtime/lib/intel64",
    "runtime/lib/arm64/Release",
    "runtime/lib/arm64",
    "runtime/lib/aarch64/Release",
    "runtime/lib/aarch64",
    "runtime/lib/armv7l",
    "runtime/lib/armv7l/Release",
    "runtime/bin/intel64/Release",
    "runtime/bin/intel64",
    "runtime/bin/arm64/Release",
    "runtime/bin/arm64",
    "runtime/3rdparty/tbb/bin",
    "runtime/3rdparty/tbb/lib",
)

KNOWN_BUILD_SUBDIRECTORIES = (
    "bin/intel64/Debug/lib",
    "bin/intel64/Debug",
    "bin/intel64/Release/lib",
    "bin/arm64/Debug/lib",
    "bin/arm64/Debug",
    "bin/arm64/Release/lib",
    "bin/aarch64/Debug/lib",
    "bin/aarch64/Debug",
    "bin/aarch64/Release/lib",
    "bin/armv7l/Debug/lib",
    "bin/armv7l/Debug",
    "bin/armv7l/Release/lib",
    "temp/tbb/lib",
    "temp/tbb/bin",
)

# Locations beside the running executable used by bundled applications.
_EXECUTABLE_RELATIVE_DIRECTORIES = ("target/release", "resources/backend")


class Linking(enum.Enum):
    """Which kind of library to look for.

    The difference matters on Windows, where linking needs ``*.lib`` files.
    """

    STATIC = "static"
    DYNAMIC = "dynamic"


def library_filename(library_name: str, kind: Linking) -> str:
    """Return the platform's file name for a library, e.g. ``libfoo.so``."""
    prefix = "" if _IS_WINDOWS else "lib"
    if kind is Linking.STATIC:
        suffix = ".lib" if _IS_WINDOWS else ".a"
    elif _IS_WINDOWS:
        suffix = ".dll"
    elif _IS_MACOS:
        suffix = ".dylib"
    else:
        suffix = ".so"
    return f"{prefix}{library_name}{suffix}"


def _is_found(path: Path) -> bool:
    logger.debug("Searching in: %s", path)
    if path.is_file():
        logger.info("Found library at path: %s", path)
        return True
    return False


def _candidates_under(root: Path, subdirectories: Iterable[str], filename: str):
    for subdirectory in subdirectories:
        yield root / subdirectory / filename


def _environment_candidates(filename: str):
    build_dir = os.environ.get(ENV_OPENVINO_BUILD_DIR)
    if build_dir is not None:
        yield from _candidates_under(Path(build_dir), KNOWN_BUILD_SUBDIRECTORIES, filename)

    for variable in (ENV_OPENVINO_INSTALL_DIR, ENV_INTEL_OPENVINO_DIR):
        install_dir = os.environ.get(variable)
        if install_dir is not None:
            yield from _candidates_under(
                Path(install_dir), KNOWN_INSTALLATION_SUBDIRECTORIES, filename
            )

    library_path = os.environ.get(LIBRARY_PATH_VARIABLE)
    if library_path is not None:
        for directory in library_path.split(os.pathsep):
            yield Path(directory) / filename


def _system_candidates(filename: str):
    for install_dir in map(Path, SYSTEM_INSTALLATION_DIRECTORIES):
        if not install_dir.is_dir():
            continue
        yield install_dir / filename
        # Otherwise look for version-suffixed names, e.g. `libfoo.so.3.1.2`.
        versions = get_suffixes(list_directory(install_dir), filename)
        latest = build_latest_version(install_dir, filename, versions)
        if latest is not None:
            yield latest


def _default_candidates(filename: str):
    for default_dir in map(Path, DEFAULT_INSTALLATION_DIRECTORIES):
        if default_dir.is_dir():
            yield from _candidates_under(
                default_dir, KNOWN_INSTALLATION_SUBDIRECTORIES, filename
            )


def _executable_relative(filename: str) -> Path | None:
    executable = sys.executable
    if not executable:
        return None
    exe_dir = Path(executable).parent
    for relative in _EXECUTABLE_RELATIVE_DIRECTORIES:
        candidate = exe_dir / relative / filename
        if candidate.exists():
            return candidate.resolve()
    return None


def find(library_name: str, kind: Linking) -> Path | None:
    """Return the path of a runtime library, or None if it cannot be found.

    The search probes, in order: directories beside the running executable,
    ``OPENVINO_BUILD_DIR`` with known build subdirectories,
    ``OPENVINO_INSTALL_DIR`` and ``INTEL_OPENVINO_DIR`` with known
    installation subdirectories, the OS library search path, the system
    package directories and the documented default extraction directories.

    Raises OSError if a system installation directory cannot be listed.
    """
    filename = library_filename(library_name, kind)
    logger.info("Attempting to find library: %s", filename)

    bundled = _executable_relative(filename)
    if bundled is not None:
        return bundled

    for searches in (_environment_candidates, _system_candidates, _default_candidates):
        for candidate in searches(filename):
            if _is_found(candidate):
                return candidate
    return None


def find_plugins_xml() -> Path | None:
    """Return the path of the ``plugins.xml`` file, or None if it cannot be found.

    ``OPENVINO_PLUGINS_XML`` is returned as is when set. Otherwise the file is
    looked for beside the ``openvino_c`` library and then in the latest
    ``openvino-<version>`` directory beside it.
    """
    configured = os.environ.get(ENV_OPENVINO_PLUGINS_XML)
    if configured is not None:
        return Path(configured)

    library = find("openvino_c", Linking.DYNAMIC)
    if library is None:
        return None
    library_dir = library.parent
    beside = library_dir / PLUGINS_XML
    if _is_found(beside):
        return beside

    try:
        filenames = list_directory(library_dir)
    except OSError:
        return None
    versions = get_suffixes(filenames, _PLUGIN_DIRECTORY_PREFIX)
    latest = build_latest_version(library_dir, _PLUGIN_DIRECTORY_PREFIX, versions)
    if latest is None:
        return None
    candidate = latest / PLUGINS_XML
    if _is_found(candidate):
        return candidate
    return None


def list_directory(directory: str | os.PathLike[str]) -> list[str]:
    """Return the names in a directory that are valid UTF-8.

    Raises OSError if the directory cannot be read.
    """
    names = []
    for name in os.listdir(directory):
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            continue
        names.append(name)
    return names


def get_suffixes(filenames: Iterable[str], prefix: str) -> list[str]:
    """Return what follows ``prefix`` in each file name that starts with it."""
    return [name[len(prefix):] for name in filenames if name.startswith(prefix)]


def build_latest_version(
    directory: str | os.PathLike[str], prefix: str, versions: Iterable[str]
) -> Path | None:
    """Return ``directory/<prefix><latest version>``, or None without versions.

    Versions are compared as plain strings; the greatest one is the latest.
    """
    latest = max(versions, default=None)
    if latest is None:
        return None
    return Path(directory) / f"{prefix}{latest}"