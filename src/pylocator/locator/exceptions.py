from __future__ import annotations


class LocatorError(Exception):
    pass


class InvalidDirectoryError(LocatorError, ValueError):
    def __init__(self, directory: str | None) -> None:
        self.directory = directory
        super().__init__("Directory path cannot be empty or whitespace.")


class PythonLaunchError(LocatorError):
    def __init__(self, executable: str, e: OSError) -> None:
        self.executable = executable
        self.e = e
        super().__init__(f"Could not launch {executable}: {e}")


class PythonVerificationTimeoutError(LocatorError):
    def __init__(self, executable: str, timeout: float) -> None:
        self.executable = executable
        self.timeout = timeout
        super().__init__(
            f"{executable} --version did not exit within {timeout:g} seconds"
            " and was terminated."
        )
