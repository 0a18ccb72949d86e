from __future__ import annotations

import os

from pathlib import Path

from platformdirs import user_config_path


_APP_NAME = "pylocator"

CONFIG_DIR = Path(
    os.getenv("PYLOCATOR_CONFIG_DIR")
    or user_config_path(_APP_NAME, appauthor=False, roaming=True)
)
