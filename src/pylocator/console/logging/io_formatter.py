from __future__ import annotations

import logging
import textwrap

from typing import TYPE_CHECKING

from pylocator.console.logging.filters import PYLOCATOR_FILTER


if TYPE_CHECKING:
    from logging import LogRecord


_COLORS = {
    logging.DEBUG: "debug",
    logging.INFO: "fg=blue",
    logging.WARNING: "fg=yellow",
    logging.ERROR: "fg=red",
}


class IOFormatter(logging.Formatter):
    def format(self, record: LogRecord) -> str:
        color = _COLORS.get(record.levelno)
        if color is not None and not record.exc_info:
            record.msg = f"<{color}>{record.msg}</>"

        formatted = super().format(record)
        if PYLOCATOR_FILTER.filter(record):
            return formatted

        return textwrap.indent(formatted, f"[{record.name}] ", lambda line: True)
