from __future__ import annotations

from pylocator.locator.exceptions import InvalidDirectoryError
from pylocator.locator.exceptions import LocatorError
from pylocator.locator.exceptions import PythonLaunchError
from pylocator.locator.exceptions import PythonVerificationTimeoutError
from pylocator.locator.locator import PythonLocator
from pylocator.locator.models import DetectionResult
from pylocator.locator.models import DetectionSource
from pylocator.locator.models import VersionCheckResult


__all__ = [
    "DetectionResult",
    "DetectionSource",
    "InvalidDirectoryError",
    "LocatorError",
    "PythonLaunchError",
    "PythonLocator",
    "PythonVerificationTimeoutError",
    "VersionCheckResult",
]
