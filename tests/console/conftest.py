from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Protocol

import pytest

from cleo.testers.application_tester import ApplicationTester
from cleo.testers.command_tester import CommandTester

from pylocator.console.application import Application
from pylocator.console.commands.command import Command


if TYPE_CHECKING:
    from pylocator.locator import PythonLocator


class CommandTesterFactory(Protocol):
    def __call__(
        self, command: str, locator: PythonLocator | None = None
    ) -> CommandTester: ...


@pytest.fixture
def app() -> Application:
    return Application()


@pytest.fixture
def app_tester(app: Application) -> ApplicationTester:
    return ApplicationTester(app)


@pytest.fixture
def command_tester_factory(app: Application) -> CommandTesterFactory:
    def _tester(command: str, locator: PythonLocator | None = None) -> CommandTester:
        command_obj = app.find(command)
        tester = CommandTester(command_obj)

        # Setting the formatter from the application
        app_io = app.create_io()
        formatter = app_io.output.formatter
        tester.io.output.set_formatter(formatter)
        tester.io.error_output.set_formatter(formatter)

        if locator is not None:
            assert isinstance(command_obj, Command)
            command_obj.set_locator(locator)

        return tester

    return _tester
