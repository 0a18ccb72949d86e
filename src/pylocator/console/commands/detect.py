from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from cleo.helpers import option

from pylocator.console.commands.command import Command


if TYPE_CHECKING:
    from cleo.io.inputs.option import Option


class DetectCommand(Command):
    name = "detect"

    options: ClassVar[list[Option]] = [
        option(
            "verify",
            None,
            "Run the detected interpreter to confirm it and report its version.",
            flag=True,
        ),
    ]

    description = "Detects an installed Python interpreter."

    def handle(self) -> int:
        result = self.locator.detect()

        if not result.found:
            self.line("No Python installation found.")
            return 1

        assert result.path is not None
        assert result.source is not None

        self.line(
            f"Found Python: <c1>{result.path}</> (<b>{result.source.value}</>)"
        )

        if result.is_registry_hint:
            self.line_error(
                "<warning>The registry only marks an installation."
                " Set <c1>registry.resolve-executable</c1> to locate"
                " its executable.</warning>"
            )
            if self.option("verify"):
                self.line_error("<warning>Skipping verification.</warning>")
            return 0

        if self.option("verify"):
            return self.verify_executable(result.path)

        return 0
