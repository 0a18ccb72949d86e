from __future__ import annotations

from cleo.commands.command import Command as BaseCommand

from pylocator.console.exceptions import PyLocatorRuntimeError
from pylocator.locator import PythonLaunchError
from pylocator.locator import PythonLocator
from pylocator.locator import PythonVerificationTimeoutError
from pylocator.toml import TOMLError


class Command(BaseCommand):
    _locator: PythonLocator | None = None

    @property
    def locator(self) -> PythonLocator:
        if self._locator is None:
            try:
                self._locator = PythonLocator()
            except TOMLError as e:
                raise PyLocatorRuntimeError.create(
                    reason="Unable to read the <c1>pylocator</> configuration.",
                    exception=e,
                    info="Fix the file or remove it to use the default settings.",
                )

        return self._locator

    def set_locator(self, locator: PythonLocator) -> None:
        """Explicitly set the locator used by the command.

        Useful to search a simulated host instead of the running one.
        """

        self._locator = locator

    def verify_executable(self, executable: str) -> int:
        try:
            result = self.locator.verify(executable)
        except PythonLaunchError as e:
            raise PyLocatorRuntimeError.create(
                reason=f"Unable to run <c1>{executable}</>.",
                exception=e,
                info="Make sure the path points to an executable file.",
            )
        except PythonVerificationTimeoutError as e:
            raise PyLocatorRuntimeError.create(
                reason=f"<c1>{executable}</> did not report its version in time.",
                exception=e,
                info="Increase verify.timeout or set it to 0 to wait indefinitely.",
            )

        if self.io.is_verbose() and result.raw_output:
            self.line(f"Output: <comment>{result.raw_output.strip()}</>")

        if not result.looks_like_python:
            self.line_error(
                f"<error><c1>{executable}</c1> does not look like"
                " a Python interpreter.</error>"
            )
            return 1

        self.line(f"Python version: <c1>{result.version or 'unknown'}</>")

        if result.parsed_version is None:
            self.line_error(
                "<warning>The reported version is not a valid Python version.</>"
            )

        return 0
