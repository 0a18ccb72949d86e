from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from cleo.helpers import argument

from pylocator.console.commands.command import Command


if TYPE_CHECKING:
    from cleo.io.inputs.argument import Argument


class VerifyCommand(Command):
    name = "verify"

    arguments: ClassVar[list[Argument]] = [
        argument("executable", "Path of the interpreter to run.")
    ]

    description = "Runs an executable with <c1>--version</> to check it is Python."

    def handle(self) -> int:
        executable: str = self.argument("executable")
        return self.verify_executable(executable)
