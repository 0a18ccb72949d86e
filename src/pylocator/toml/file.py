from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_file import TOMLFile as BaseTOMLFile

from pylocator.toml.exceptions import TOMLError


if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.toml_document import TOMLDocument


class TOMLFile(BaseTOMLFile):
    """
    A TOML file on disk whose parse errors name the offending file.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self._file_path = path

    @property
    def path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.is_file()

    def read(self) -> TOMLDocument:
        try:
            return super().read()
        except (ValueError, TOMLKitError) as e:
            raise TOMLError(f"Invalid TOML file {self}: {e}")

    def read_tables(self) -> dict[str, dict[str, Any]]:
        """
        Read the file as plain data where every top level entry is a table,
        the shape of a configuration file.
        """
        data = self.read().unwrap()

        for name, value in data.items():
            if not isinstance(value, dict):
                raise TOMLError(f"Invalid TOML file {self}: {name} must be a table")

        return data

    def __str__(self) -> str:
        return self._file_path.as_posix()
