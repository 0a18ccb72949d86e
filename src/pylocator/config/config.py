from __future__ import annotations

import logging
import os

from copy import deepcopy
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from pylocator.locations import CONFIG_DIR
from pylocator.toml import TOMLFile


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping


def boolean_normalizer(val: str) -> bool:
    return val.lower() in ["true", "1"]


def float_normalizer(val: str) -> float:
    return float(val)


def list_normalizer(val: str) -> list[str]:
    return [item for item in val.split(os.pathsep) if item.strip()]


logger = logging.getLogger(__name__)

_default_config: Config | None = None


class Config:
    default_config: ClassVar[dict[str, Any]] = {
        "search": {
            "executables": ["python", "python3"],
            "windows-executables": ["python.exe", "python3.exe"],
            "unix-directories": ["/usr/bin", "/usr/local/bin", "/opt"],
            "windows-directories": [
                "{drive}Python",
                "{user-profile}\\AppData\\Local\\Programs\\Python",
                "{drive}Program Files\\Python",
                "{drive}Program Files (x86)\\Python",
                "{user-profile}\\AppData\\Local\\Microsoft\\WindowsApps",
            ],
        },
        "registry": {
            "key": "SOFTWARE\\Python\\PythonCore",
            "resolve-executable": False,
        },
        "verify": {
            "timeout": 30,
            "version-parser": "last-token",
        },
    }

    def __init__(
        self,
        use_environment: bool = True,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._config = deepcopy(self.default_config)
        self._use_environment = use_environment
        self._environ = environ

    def merge(self, config: Mapping[str, Any]) -> None:
        from pylocator.utils.helpers import merge_dicts

        merge_dicts(self._config, config)

    def all(self) -> dict[str, Any]:
        return {
            section: {key: self.get(f"{section}.{key}") for key in values}
            for section, values in self._config.items()
        }

    @property
    def executables(self) -> list[str]:
        return list(self.get("search.executables"))

    @property
    def windows_executables(self) -> list[str]:
        return list(self.get("search.windows-executables"))

    @property
    def unix_directories(self) -> list[str]:
        return list(self.get("search.unix-directories"))

    @property
    def windows_directories(self) -> list[str]:
        return list(self.get("search.windows-directories"))

    @property
    def registry_key(self) -> str:
        return str(self.get("registry.key"))

    @property
    def registry_resolve_executable(self) -> bool:
        return bool(self.get("registry.resolve-executable"))

    @property
    def verify_timeout(self) -> float | None:
        # 0 disables the timeout
        timeout = self.get("verify.timeout")
        if not timeout:
            return None
        return float(timeout)

    @property
    def version_parser(self) -> str:
        return str(self.get("verify.version-parser"))

    def get(self, setting_name: str, default: Any = None) -> Any:
        """
        Retrieve a setting value.
        """
        keys = setting_name.split(".")

        # Looking in the environment if the setting
        # is set via a PYLOCATOR_* environment variable
        if self._use_environment:
            environ = os.environ if self._environ is None else self._environ
            env = "PYLOCATOR_" + "_".join(k.upper().replace("-", "_") for k in keys)
            env_value = environ.get(env)
            if env_value is not None:
                return self._get_normalizer(setting_name)(env_value)

        value = self._config

        for key in keys:
            if key not in value:
                return default

            value = value[key]

        return value

    @staticmethod
    def _get_normalizer(name: str) -> Callable[[str], Any]:
        if name == "registry.resolve-executable":
            return boolean_normalizer

        if name == "verify.timeout":
            return float_normalizer

        if name.startswith("search."):
            return list_normalizer

        return lambda val: val

    @classmethod
    def create(cls, reload: bool = False) -> Config:
        global _default_config

        if _default_config is None or reload:
            _default_config = cls()

            config_file = TOMLFile(CONFIG_DIR / "config.toml")
            if config_file.exists():
                logger.debug("Loading configuration file %s", config_file.path)
                _default_config.merge(config_file.read_tables())

        return _default_config
