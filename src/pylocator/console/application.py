from __future__ import annotations

import logging

from importlib import import_module
from typing import TYPE_CHECKING

from cleo.application import Application as BaseApplication
from cleo.events.console_command_event import ConsoleCommandEvent
from cleo.events.console_events import COMMAND
from cleo.events.event_dispatcher import EventDispatcher
from cleo.formatters.style import Style
from cleo.loaders.factory_command_loader import FactoryCommandLoader

from pylocator.__version__ import __version__
from pylocator.console.commands.command import Command
from pylocator.console.exceptions import PyLocatorRuntimeError


if TYPE_CHECKING:
    from collections.abc import Callable

    from cleo.events.event import Event
    from cleo.io.inputs.input import Input
    from cleo.io.io import IO
    from cleo.io.outputs.output import Output


COMMANDS = {
    "detect": "pylocator.console.commands.detect:DetectCommand",
    "verify": "pylocator.console.commands.verify:VerifyCommand",
}

STYLES = {
    "warning": Style("yellow"),
    "debug": Style("default", options=["dark"]),
}


def load_command(target: str) -> Callable[[], Command]:
    def _load() -> Command:
        module_name, _, class_name = target.partition(":")
        command_class = getattr(import_module(module_name), class_name)
        command: Command = command_class()
        return command

    return _load


def log_level(io: IO) -> int:
    if io.is_debug():
        return logging.DEBUG

    if io.is_verbose():
        return logging.INFO

    return logging.WARNING


class Application(BaseApplication):
    def __init__(self) -> None:
        super().__init__("pylocator", __version__)

        dispatcher = EventDispatcher()
        dispatcher.add_listener(COMMAND, self.register_command_loggers)
        self.set_event_dispatcher(dispatcher)

        self.set_command_loader(
            FactoryCommandLoader(
                {name: load_command(target) for name, target in COMMANDS.items()}
            )
        )

    def create_io(
        self,
        input: Input | None = None,
        output: Output | None = None,
        error_output: Output | None = None,
    ) -> IO:
        io = super().create_io(input, output, error_output)

        formatter = io.output.formatter
        for name, style in STYLES.items():
            formatter.set_style(name, style)

        io.error_output.set_formatter(formatter)

        return io

    def _run(self, io: IO) -> int:
        try:
            exit_code: int = super()._run(io)
        except PyLocatorRuntimeError as e:
            io.write_error_line("")
            e.write(io)
            io.write_error_line("")
            return e.exit_code

        return exit_code

    def register_command_loggers(
        self, event: Event, event_name: str, _: EventDispatcher
    ) -> None:
        from pylocator.console.logging.filters import PYLOCATOR_FILTER
        from pylocator.console.logging.io_formatter import IOFormatter
        from pylocator.console.logging.io_handler import IOHandler

        assert isinstance(event, ConsoleCommandEvent)
        command = event.command
        if not isinstance(command, Command):
            return

        io = event.io
        level = log_level(io)

        handler = IOHandler(io, level)
        handler.setFormatter(IOFormatter())
        # third-party records are only shown when very verbose
        if not io.is_very_verbose():
            handler.addFilter(PYLOCATOR_FILTER)

        logging.basicConfig(level=level, handlers=[handler])
        logging.getLogger("pylocator").setLevel(level)


def main() -> int:
    exit_code: int = Application().run()
    return exit_code
