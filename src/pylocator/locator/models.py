from __future__ import annotations

import dataclasses

from enum import Enum

from packaging.version import InvalidVersion
from packaging.version import Version


class DetectionSource(Enum):
    PATH = "PATH"
    COMMON_DIRECTORY = "common directory"
    REGISTRY = "registry"
    REGISTRY_KEY = "registry key"


@dataclasses.dataclass(frozen=True)
class DetectionResult:
    found: bool
    path: str | None = None
    source: DetectionSource | None = None

    def __post_init__(self) -> None:
        if self.found != (self.path is not None):
            raise ValueError("path must be set if and only if Python was found")
        if self.found != (self.source is not None):
            raise ValueError("source must be set if and only if Python was found")

    @classmethod
    def not_found(cls) -> DetectionResult:
        return cls(found=False)

    @classmethod
    def at(cls, path: str, source: DetectionSource) -> DetectionResult:
        return cls(found=True, path=path, source=source)

    @property
    def is_registry_hint(self) -> bool:
        """
        Whether ``path`` names the registry key marking an installation
        rather than an executable.
        """
        return self.source is DetectionSource.REGISTRY_KEY


@dataclasses.dataclass(frozen=True)
class VersionCheckResult:
    looks_like_python: bool
    raw_output: str | None = None
    version: str | None = None

    def __post_init__(self) -> None:
        if self.version is not None and not (
            self.looks_like_python and self.raw_output
        ):
            raise ValueError(
                "version can only be set for non-empty output that looks like Python"
            )

    @property
    def parsed_version(self) -> Version | None:
        if self.version is None:
            return None

        try:
            return Version(self.version)
        except InvalidVersion:
            return None
