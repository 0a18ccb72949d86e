from __future__ import annotations

import dataclasses
import logging
import subprocess
import sys

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import Any


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ProcessOutput:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class ProcessLauncher(ABC):
    @abstractmethod
    def run(self, args: Sequence[str], timeout: float | None = None) -> ProcessOutput:
        """
        Run ``args`` to completion and capture both output streams as text.

        :raises OSError: if the process cannot be started.
        :raises subprocess.TimeoutExpired: if ``timeout`` elapses; the child
            has been killed by then.
        """


class SubprocessLauncher(ProcessLauncher):
    def run(self, args: Sequence[str], timeout: float | None = None) -> ProcessOutput:
        kwargs: dict[str, Any] = {}
        if sys.platform == "win32":
            kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW

        logger.debug("Running %s", " ".join(args))

        # run() kills and reaps the child on timeout before re-raising
        completed = subprocess.run(
            list(args),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
            **kwargs,
        )

        return ProcessOutput(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
