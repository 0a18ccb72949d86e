from __future__ import annotations

import dataclasses

from typing import TYPE_CHECKING

from cleo._utils import strip_tags
from cleo.exceptions import CleoError


if TYPE_CHECKING:
    from cleo.io.io import IO


class PyLocatorConsoleError(CleoError):
    pass


@dataclasses.dataclass
class ConsoleMessage:
    """
    A block of console text. Debug messages are only shown in verbose mode.
    """

    text: str
    debug: bool = False

    @property
    def stripped(self) -> str:
        return strip_tags(self.text)

    def render(self, strip: bool = False) -> str:
        return self.stripped if strip else self.text

    @classmethod
    def section(
        cls, title: str, body: str, debug: bool = False, prefix: str = "    | "
    ) -> ConsoleMessage:
        lines = [f"<b>{title}:</>", *(prefix + line for line in body.splitlines())]
        return cls("\n".join(lines), debug=debug)


VERBOSE_HINT = ConsoleMessage(
    "You can also run your <c1>pylocator</> command with <c1>-v</>"
    " to see more information."
)


class PyLocatorRuntimeError(PyLocatorConsoleError):
    """
    An error that ends a command, made of a reason followed by further
    messages, each separated by a blank line.
    """

    def __init__(
        self,
        reason: str,
        messages: list[ConsoleMessage] | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(reason)
        self.exit_code = exit_code
        self._messages = [ConsoleMessage(reason), *(messages or [])]

    @property
    def messages(self) -> list[ConsoleMessage]:
        return self._messages

    def write(self, io: IO) -> None:
        if text := self.get_text(debug=io.is_verbose()):
            io.write_error_line(text)

    def get_text(self, debug: bool = False, strip: bool = False) -> str:
        shown = [m for m in self._messages if m.text and (debug or not m.debug)]

        if not debug and any(m.debug and m.text for m in self._messages):
            shown.append(VERBOSE_HINT)

        return "\n\n".join(m.render(strip) for m in shown)

    def __str__(self) -> str:
        return self._messages[0].stripped.strip()

    @classmethod
    def create(
        cls,
        reason: str,
        exception: Exception | None = None,
        info: list[str] | str | None = None,
    ) -> PyLocatorRuntimeError:
        """
        Build an error from a reason, the exception that caused it (shown in
        verbose mode only) and lines of advice.
        """
        if isinstance(info, str):
            info = [info]

        messages = []
        if exception is not None:
            messages.append(
                ConsoleMessage.section("Exception", str(exception), debug=True)
            )
        if info:
            messages.append(ConsoleMessage("<info>" + "\n".join(info) + "</>"))

        return cls(reason, messages)
