from __future__ import annotations

import logging

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from logging import LogRecord

    from cleo.io.io import IO


class IOHandler(logging.Handler):
    """
    Writes log records to a cleo IO. Warnings and above go to its error output.
    """

    def __init__(self, io: IO, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._io = io

    def emit(self, record: LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:
            self.handleError(record)
            return

        if record.levelno >= logging.WARNING:
            self._io.write_error_line(msg)
        else:
            self._io.write_line(msg)
