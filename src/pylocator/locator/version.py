from __future__ import annotations

import logging
import re

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable

    VersionParser = Callable[[str], "str | None"]


logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(
    r"""
    python          # the interpreter name
    \D*?            # anything that is not a digit, e.g. a space
    (?P<version>
        \d+(?:\.\d+)*   # release segment
        \S*             # pre/post/dev suffixes, e.g. rc1 or +
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)


def looks_like_python(output: str) -> bool:
    return "python" in output.lower()


def parse_last_token(output: str) -> str | None:
    """
    Take the last space separated token of a ``Python X.Y.Z`` banner.

    Output in any other shape degrades to an arbitrary token.
    """
    token = output.split(" ")[-1].strip()
    return token or None


def parse_regex(output: str) -> str | None:
    if match := _VERSION_RE.search(output):
        return match.group("version")

    return parse_last_token(output)


VERSION_PARSERS: dict[str, VersionParser] = {
    "last-token": parse_last_token,
    "regex": parse_regex,
}


def get_version_parser(name: str) -> VersionParser:
    if name not in VERSION_PARSERS:
        logger.warning("Unknown version parser %s, using last-token", name)
        return parse_last_token

    return VERSION_PARSERS[name]
