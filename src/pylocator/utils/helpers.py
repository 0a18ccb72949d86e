from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> None:
    for k in d2:
        if k in d1 and isinstance(d1[k], dict) and isinstance(d2[k], Mapping):
            merge_dicts(d1[k], d2[k])
        else:
            d1[k] = d2[k]
