from __future__ import annotations

import logging
import os
import subprocess

from pathlib import Path
from typing import TYPE_CHECKING

from findpython.providers.winreg import WinregProvider

from pylocator.config.config import Config
from pylocator.locator.exceptions import InvalidDirectoryError
from pylocator.locator.exceptions import PythonLaunchError
from pylocator.locator.exceptions import PythonVerificationTimeoutError
from pylocator.locator.models import DetectionResult
from pylocator.locator.models import DetectionSource
from pylocator.locator.models import VersionCheckResult
from pylocator.locator.version import get_version_parser
from pylocator.locator.version import looks_like_python
from pylocator.system.filesystem import LocalFileSystem
from pylocator.system.platform_info import PlatformFamily
from pylocator.system.process import SubprocessLauncher
from pylocator.system.registry import get_registry


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Iterator
    from collections.abc import Mapping

    from findpython import BaseProvider
    from findpython import PythonVersion

    from pylocator.locator.version import VersionParser
    from pylocator.system.filesystem import FileSystem
    from pylocator.system.process import ProcessLauncher
    from pylocator.system.registry import Registry


logger = logging.getLogger(__name__)


class PythonLocator:
    """
    Finds an installed Python interpreter without running it, and verifies
    candidates by running them.

    Every collaborator is optional; omitted ones default to the real host.
    Passing them explicitly makes detection independent of the process
    environment. An injected ``environ`` also supplies the ``PYLOCATOR_*``
    settings when no ``config`` is given.
    """

    def __init__(
        self,
        platform: PlatformFamily | None = None,
        environ: Mapping[str, str] | None = None,
        filesystem: FileSystem | None = None,
        launcher: ProcessLauncher | None = None,
        registry: Registry | None = None,
        config: Config | None = None,
        version_parser: VersionParser | None = None,
        registry_provider: BaseProvider | None = None,
    ) -> None:
        self._platform = platform or PlatformFamily.current()
        self._environ = os.environ if environ is None else environ
        self._filesystem = filesystem or LocalFileSystem()
        self._launcher = launcher or SubprocessLauncher()
        self._registry = registry
        if config is None:
            config = Config.create() if environ is None else Config(environ=environ)
        self._config = config
        self._version_parser = version_parser
        self._registry_provider = registry_provider

    @property
    def platform(self) -> PlatformFamily:
        return self._platform

    @property
    def registry(self) -> Registry:
        if self._registry is None:
            self._registry = get_registry()

        return self._registry

    @property
    def registry_provider(self) -> BaseProvider | None:
        """
        The PEP 514 registrations of installed interpreters, ``None`` where
        there is no registry.
        """
        if self._registry_provider is None:
            self._registry_provider = WinregProvider.create()

        return self._registry_provider

    @property
    def version_parser(self) -> VersionParser:
        if self._version_parser is None:
            self._version_parser = get_version_parser(self._config.version_parser)

        return self._version_parser

    def detect(self) -> DetectionResult:
        result = self._scan_path()
        if result.found:
            return result

        if self._platform is PlatformFamily.WINDOWS:
            result = self._scan_common_directories()
            if result.found:
                return result

            return self._check_registry()

        if self._platform.is_unix:
            logger.debug("Searching common Unix installation directories")
            return self._scan_directories(
                self._config.unix_directories, DetectionSource.COMMON_DIRECTORY
            )

        return result

    def search_directory(
        self, directory: str, source: DetectionSource = DetectionSource.PATH
    ) -> DetectionResult:
        """
        Look for one of the configured executable names directly inside
        ``directory``. A missing directory is not an error.

        :raises InvalidDirectoryError: if ``directory`` is empty or blank.
        """
        if not directory or not directory.strip():
            raise InvalidDirectoryError(directory)

        if not self._filesystem.is_dir(directory):
            if self._filesystem.is_file(directory):
                logger.warning("Not a directory: %s", directory)
            else:
                logger.warning("Directory does not exist: %s", directory)
            return DetectionResult.not_found()

        return self._first_existing(directory, self._config.executables, source)

    def verify(self, executable: str | Path) -> VersionCheckResult:
        """
        Run ``executable --version`` and check whether its output is that of
        a Python interpreter.

        :raises PythonLaunchError: if the executable cannot be started.
        :raises PythonVerificationTimeoutError: if it does not exit in time.
        """
        executable = str(executable)
        timeout = self._config.verify_timeout

        try:
            output = self._launcher.run([executable, "--version"], timeout=timeout)
        except subprocess.TimeoutExpired:
            assert timeout is not None
            raise PythonVerificationTimeoutError(executable, timeout)
        except OSError as e:
            raise PythonLaunchError(executable, e) from e

        raw_output = output.stdout if output.stdout.strip() else output.stderr
        if not raw_output or not raw_output.strip():
            logger.debug("%s produced no output", executable)
            return VersionCheckResult(looks_like_python=False)

        if not looks_like_python(raw_output):
            logger.debug("Output of %s does not look like Python", executable)
            return VersionCheckResult(looks_like_python=False, raw_output=raw_output)

        return VersionCheckResult(
            looks_like_python=True,
            raw_output=raw_output,
            version=self.version_parser(raw_output),
        )

    def _scan_path(self) -> DetectionResult:
        path = self._environ.get("PATH")
        if path is None and self._platform is PlatformFamily.WINDOWS:
            path = self._environ.get("Path")

        if not path:
            logger.debug("PATH is not set")
            return DetectionResult.not_found()

        # blank entries, e.g. from a trailing separator, are not directories
        separator = self._platform.path_separator
        directories = [entry for entry in path.split(separator) if entry.strip()]
        return self._scan_directories(directories, DetectionSource.PATH)

    def _scan_directories(
        self, directories: Iterable[str], source: DetectionSource
    ) -> DetectionResult:
        for directory in directories:
            logger.debug("Checking %s", directory)
            result = self.search_directory(directory, source)
            if result.found:
                return result

        return DetectionResult.not_found()

    def _scan_common_directories(self) -> DetectionResult:
        drives = self._filesystem.fixed_drives()
        if not drives:
            logger.warning(
                "Could not find any drives to check"
                " for common Python installation directories."
            )
            return DetectionResult.not_found()

        for directory in self._common_directories(drives):
            result = self._first_existing(
                directory,
                self._config.windows_executables,
                DetectionSource.COMMON_DIRECTORY,
            )
            if result.found:
                return result

        return DetectionResult.not_found()

    def _common_directories(self, drives: Iterable[str]) -> Iterator[str]:
        user_profile = self._environ.get("USERPROFILE") or str(Path.home())

        for drive in drives:
            for template in self._config.windows_directories:
                yield template.replace("{drive}", drive).replace(
                    "{user-profile}", user_profile
                )

    def _check_registry(self) -> DetectionResult:
        if self._config.registry_resolve_executable:
            executable = self._resolve_registry_executable()
            if executable is not None:
                return DetectionResult.at(executable, DetectionSource.REGISTRY)

        key = self._config.registry_key
        if not self.registry.key_exists(key):
            return DetectionResult.not_found()

        logger.info("Found registry key %s, no executable path is known for it", key)
        return DetectionResult.at(key, DetectionSource.REGISTRY_KEY)

    def _resolve_registry_executable(self) -> str | None:
        provider = self.registry_provider
        if provider is None:
            return None

        for python in _newest_first(provider.find_pythons()):
            executable = str(python.executable)
            if self._filesystem.is_file(executable):
                return executable

            logger.debug("Registered interpreter %s does not exist", executable)

        return None

    def _first_existing(
        self, directory: str, names: Iterable[str], source: DetectionSource
    ) -> DetectionResult:
        for name in names:
            candidate = self._platform.join(directory, name)
            if self._filesystem.is_file(candidate):
                logger.debug("Found %s", candidate)
                return DetectionResult.at(candidate, source)

        return DetectionResult.not_found()


def _newest_first(pythons: Iterable[PythonVersion]) -> list[PythonVersion]:
    # only what the registry recorded is compared, reading more runs the interpreter
    registered = list(pythons)
    known = [python for python in registered if python._version is not None]
    unknown = [python for python in registered if python._version is None]

    known.sort(
        key=lambda python: (
            python._version,
            (python._architecture or "").startswith("64bit"),
        ),
        reverse=True,
    )

    return [*known, *unknown]
