"""
library wide defaults.

options are plain in-process settings; there is no file or environment
lookup. use `configure()` for a lasting change or the `options()` context
manager for a temporary one.
"""

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator


@dataclass
class Options:
    """defaults consulted by the materializers."""
    # materialize_nested refuses non-common inner views instead of normalizing them
    strict_nested: bool = True
    # placed between elements by materialize_text when no separator is passed
    text_separator: str = ""


_options = Options()


def get_options() -> Options:
    """the options currently in effect"""
    return _options


def _validated(changes: dict) -> dict:
    known = {f.name for f in fields(Options)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValueError(f"unknown option(s): {', '.join(unknown)}")
    return changes


def configure(**changes) -> Options:
    """change one or more options for the rest of the process"""
    global _options
    _options = replace(_options, **_validated(changes))
    return _options


@contextmanager
def options(**changes) -> Iterator[Options]:
    """temporarily override options inside a with block"""
    global _options
    previous = _options
    _options = replace(previous, **_validated(changes))
    try:
        yield _options
    finally:
        _options = previous
