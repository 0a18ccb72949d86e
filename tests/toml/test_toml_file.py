from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pylocator.toml import TOMLError
from pylocator.toml import TOMLFile


if TYPE_CHECKING:
    from pathlib import Path


def test_read(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[verify]\ntimeout = 3\n', encoding="utf-8")
    toml_file = TOMLFile(path)

    assert toml_file.exists()
    assert toml_file.read().unwrap() == {"verify": {"timeout": 3}}
    assert str(toml_file) == path.as_posix()


def test_read_invalid(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("timeout = = 3\n", encoding="utf-8")

    with pytest.raises(TOMLError) as e:
        TOMLFile(path).read()

    assert path.as_posix() in str(e.value)


def test_missing(tmp_path: Path) -> None:
    assert not TOMLFile(tmp_path / "config.toml").exists()


def test_read_tables(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        '[search]\nexecutables = ["python3"]\n\n[verify]\ntimeout = 0\n',
        encoding="utf-8",
    )

    assert TOMLFile(path).read_tables() == {
        "search": {"executables": ["python3"]},
        "verify": {"timeout": 0},
    }


def test_read_tables_rejects_top_level_values(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("timeout = 3\n", encoding="utf-8")

    with pytest.raises(TOMLError) as e:
        TOMLFile(path).read_tables()

    assert "timeout must be a table" in str(e.value)


def test_directory_does_not_exist_as_file(tmp_path: Path) -> None:
    assert not TOMLFile(tmp_path).exists()
