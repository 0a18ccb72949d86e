from __future__ import annotations

import sys

import pytest

from pylocator.system.platform_info import PlatformFamily


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", PlatformFamily.WINDOWS),
        ("linux", PlatformFamily.LINUX),
        ("linux2", PlatformFamily.LINUX),
        ("darwin", PlatformFamily.MACOS),
        ("cygwin", PlatformFamily.OTHER),
        ("freebsd14", PlatformFamily.OTHER),
    ],
)
def test_from_platform(platform: str, expected: PlatformFamily) -> None:
    assert PlatformFamily.from_platform(platform) is expected


def test_current() -> None:
    assert PlatformFamily.current() is PlatformFamily.from_platform(sys.platform)


def test_path_separator() -> None:
    assert PlatformFamily.WINDOWS.path_separator == ";"
    assert PlatformFamily.LINUX.path_separator == ":"
    assert PlatformFamily.MACOS.path_separator == ":"


def test_join() -> None:
    assert PlatformFamily.WINDOWS.join("C:\\", "Python", "python.exe") == (
        "C:\\Python\\python.exe"
    )
    assert PlatformFamily.LINUX.join("/usr/bin", "python3") == "/usr/bin/python3"


def test_is_unix() -> None:
    assert PlatformFamily.LINUX.is_unix
    assert PlatformFamily.MACOS.is_unix
    assert not PlatformFamily.WINDOWS.is_unix
    assert not PlatformFamily.OTHER.is_unix
