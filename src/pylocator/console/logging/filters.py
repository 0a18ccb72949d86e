from __future__ import annotations

import logging


PYLOCATOR_FILTER = logging.Filter(name="pylocator")
