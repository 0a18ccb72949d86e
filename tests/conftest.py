from __future__ import annotations

import ntpath
import posixpath

from pathlib import Path
from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol

import findpython
import pytest

from packaging.version import Version

from pylocator.config.config import Config
from pylocator.locator import PythonLocator
from pylocator.system.filesystem import FileSystem
from pylocator.system.platform_info import PlatformFamily
from pylocator.system.process import ProcessLauncher
from pylocator.system.process import ProcessOutput
from pylocator.system.registry import Registry


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Mapping
    from collections.abc import Sequence

    from pytest_mock import MockerFixture


class FakeFileSystem(FileSystem):
    def __init__(self) -> None:
        self.directories: set[str] = set()
        self.files: set[str] = set()
        self.drives: list[str] = []
        self.queries: list[str] = []

    def add_file(self, path: str) -> None:
        self.files.add(path)
        flavour = ntpath if "\\" in path else posixpath
        self.directories.add(flavour.dirname(path))

    def add_directory(self, path: str) -> None:
        self.directories.add(path)

    def is_dir(self, path: str) -> bool:
        self.queries.append(path)
        return path in self.directories

    def is_file(self, path: str) -> bool:
        self.queries.append(path)
        return path in self.files

    def fixed_drives(self) -> list[str]:
        return list(self.drives)


class FakeLauncher(ProcessLauncher):
    def __init__(self) -> None:
        self.outputs: dict[str, ProcessOutput | BaseException] = {}
        self.calls: list[tuple[tuple[str, ...], float | None]] = []

    def register(
        self,
        executable: str,
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> None:
        self.outputs[executable] = ProcessOutput(
            args=(executable, "--version"),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    def register_error(self, executable: str, error: BaseException) -> None:
        self.outputs[executable] = error

    def run(self, args: Sequence[str], timeout: float | None = None) -> ProcessOutput:
        self.calls.append((tuple(args), timeout))

        output = self.outputs.get(args[0])
        if output is None:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if isinstance(output, BaseException):
            raise output
        return output


class FakeRegistry(Registry):
    def __init__(self, keys: Iterable[str] = ()) -> None:
        self.keys: set[str] = set(keys)

    def key_exists(self, key: str) -> bool:
        return key in self.keys


class FakeRegistryProvider(findpython.BaseProvider):  # type: ignore[misc]
    def __init__(self) -> None:
        self.pythons: list[findpython.PythonVersion] = []

    @classmethod
    def create(cls) -> FakeRegistryProvider:
        return cls()

    def register(
        self,
        executable: str,
        version: str | None = None,
        architecture: str = "64bit",
    ) -> None:
        self.pythons.append(
            findpython.PythonVersion(
                executable=Path(executable),
                _version=None if version is None else Version(version),
                _architecture=architecture,
            )
        )

    def find_pythons(self) -> list[findpython.PythonVersion]:
        return list(self.pythons)


class LocatorFactory(Protocol):
    def __call__(
        self,
        platform: PlatformFamily = ...,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> PythonLocator: ...


@pytest.fixture
def config(mocker: MockerFixture) -> Config:
    c = Config(environ={})

    mocker.patch("pylocator.config.config.Config.create", return_value=c)

    return c


@pytest.fixture
def filesystem() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def registry_provider() -> FakeRegistryProvider:
    return FakeRegistryProvider()


@pytest.fixture
def locator_factory(
    config: Config,
    filesystem: FakeFileSystem,
    launcher: FakeLauncher,
    registry: FakeRegistry,
    registry_provider: FakeRegistryProvider,
) -> LocatorFactory:
    def _factory(
        platform: PlatformFamily = PlatformFamily.LINUX,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> PythonLocator:
        return PythonLocator(
            platform=platform,
            environ={} if environ is None else environ,
            filesystem=filesystem,
            launcher=launcher,
            registry=registry,
            registry_provider=registry_provider,
            config=config,
            **kwargs,
        )

    return _factory
