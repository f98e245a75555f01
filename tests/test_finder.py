import os
from pathlib import Path

import pytest

from vinokit import finder
from vinokit.finder import (
    Linking,
    build_latest_version,
    find,
    find_plugins_xml,
    get_suffixes,
    library_filename,
    list_directory,
)

ABSENT = "vinokit_absent_library_xyz"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for variable in (
        finder.ENV_OPENVINO_BUILD_DIR,
        finder.ENV_OPENVINO_INSTALL_DIR,
        finder.ENV_INTEL_OPENVINO_DIR,
        finder.ENV_OPENVINO_PLUGINS_XML,
        finder.LIBRARY_PATH_VARIABLE,
    ):
        monkeypatch.delenv(variable, raising=False)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_find_latest_library():
    path = build_latest_version(
        Path("/usr/lib/x86_64-linux-gnu"),
        "libopenvino.so.",
        ["2022.1.0", "2022.3.0"],
    )
    assert path == Path("/usr/lib/x86_64-linux-gnu/libopenvino.so.2022.3.0")


def test_find_latest_plugin_xml():
    path = build_latest_version(
        Path("/usr/lib/x86_64-linux-gnu"),
        "openvino-",
        ["2022.3.0", "2023.1.0", "2022.1.0"],
    )
    assert path == Path("/usr/lib/x86_64-linux-gnu/openvino-2023.1.0")


def test_build_latest_version_without_versions():
    assert build_latest_version(Path("/tmp"), "openvino-", []) is None


def test_get_suffixes():
    names = ["openvino-2022.3.0", "plugins.xml", "openvino-2023.1.0", "xopenvino-1"]
    assert get_suffixes(names, "openvino-") == ["2022.3.0", "2023.1.0"]


def test_list_directory(tmp_path):
    _touch(tmp_path / "a.txt")
    (tmp_path / "sub").mkdir()
    assert sorted(list_directory(tmp_path)) == ["a.txt", "sub"]


def test_list_directory_missing(tmp_path):
    with pytest.raises(OSError):
        list_directory(tmp_path / "missing")


def test_library_filename_dynamic():
    assert library_filename("openvino_c", Linking.DYNAMIC) in {
        "libopenvino_c.so",
        "libopenvino_c.dylib",
        "openvino_c.dll",
    }


def test_library_filename_static():
    assert library_filename("openvino_c", Linking.STATIC) in {
        "libopenvino_c.a",
        "openvino_c.lib",
    }


def test_find_in_build_dir(tmp_path, monkeypatch):
    name = library_filename(ABSENT, Linking.DYNAMIC)
    expected = _touch(tmp_path / "bin/intel64/Release/lib" / name)
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path))
    assert find(ABSENT, Linking.DYNAMIC) == expected


def test_find_install_dir_prefers_release(tmp_path, monkeypatch):
    name = library_filename(ABSENT, Linking.DYNAMIC)
    _touch(tmp_path / "runtime/lib/intel64" / name)
    expected = _touch(tmp_path / "runtime/lib/intel64/Release" / name)
    monkeypatch.setenv(finder.ENV_OPENVINO_INSTALL_DIR, str(tmp_path))
    assert find(ABSENT, Linking.DYNAMIC) == expected


def test_find_intel_dir(tmp_path, monkeypatch):
    name = library_filename(ABSENT, Linking.STATIC)
    expected = _touch(tmp_path / "runtime/3rdparty/tbb/lib" / name)
    monkeypatch.setenv(finder.ENV_INTEL_OPENVINO_DIR, str(tmp_path))
    assert find(ABSENT, Linking.STATIC) == expected


def test_build_dir_takes_precedence(tmp_path, monkeypatch):
    name = library_filename(ABSENT, Linking.DYNAMIC)
    build = _touch(tmp_path / "build/temp/tbb/lib" / name)
    _touch(tmp_path / "install/runtime/lib/intel64" / name)
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path / "build"))
    monkeypatch.setenv(finder.ENV_OPENVINO_INSTALL_DIR, str(tmp_path / "install"))
    assert find(ABSENT, Linking.DYNAMIC) == build


def test_find_in_library_path(tmp_path, monkeypatch):
    name = library_filename(ABSENT, Linking.DYNAMIC)
    expected = _touch(tmp_path / "second" / name)
    (tmp_path / "first").mkdir()
    value = os.pathsep.join([str(tmp_path / "first"), str(tmp_path / "second")])
    monkeypatch.setenv(finder.LIBRARY_PATH_VARIABLE, value)
    assert find(ABSENT, Linking.DYNAMIC) == expected


def test_find_nothing(tmp_path, monkeypatch):
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path))
    assert find(ABSENT, Linking.DYNAMIC) is None


def test_plugins_xml_from_environment(tmp_path, monkeypatch):
    target = tmp_path / "custom" / "plugins.xml"
    monkeypatch.setenv(finder.ENV_OPENVINO_PLUGINS_XML, str(target))
    assert find_plugins_xml() == target


def test_plugins_xml_beside_library(tmp_path, monkeypatch):
    lib_dir = tmp_path / "bin/intel64/Debug/lib"
    _touch(lib_dir / library_filename("openvino_c", Linking.DYNAMIC))
    expected = _touch(lib_dir / "plugins.xml")
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path))
    assert find_plugins_xml() == expected


def test_plugins_xml_in_latest_version_directory(tmp_path, monkeypatch):
    lib_dir = tmp_path / "bin/intel64/Debug/lib"
    _touch(lib_dir / library_filename("openvino_c", Linking.DYNAMIC))
    _touch(lib_dir / "openvino-2022.3.0" / "plugins.xml")
    expected = _touch(lib_dir / "openvino-2023.1.0" / "plugins.xml")
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path))
    assert find_plugins_xml() == expected


def test_plugins_xml_missing_in_latest_directory(tmp_path, monkeypatch):
    lib_dir = tmp_path / "bin/intel64/Debug/lib"
    _touch(lib_dir / library_filename("openvino_c", Linking.DYNAMIC))
    _touch(lib_dir / "openvino-2022.3.0" / "plugins.xml")
    (lib_dir / "openvino-2023.1.0").mkdir()
    monkeypatch.setenv(finder.ENV_OPENVINO_BUILD_DIR, str(tmp_path))
    assert find_plugins_xml() is None