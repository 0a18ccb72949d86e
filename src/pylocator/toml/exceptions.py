from __future__ import annotations

from tomlkit.exceptions import TOMLKitError


class TOMLError(TOMLKitError):
    pass
