r"""
'     ____    ___    _   __ ____ __  __
'    / __ \  /   |  / | / // __ \\ \/ /
'   / /_/ / / /| | /  |/ // / / / \  /
'  / _, _/ / ___ |/ /|  // /_/ /  / /
' /_/ |_| /_/  |_/_/ |_/ \___\_\ /_/
"""

import logging

# expose the main classes
from .view import View, IView, AdaptorView
from .cursors import Cursor, Sentinel, UNREACHABLE

# expose the factory functions
from .factories import (
    from_sequence,
    from_mapping,
    from_iterable,
    from_range,
    iota,
    repeat,
    generate,
    empty,
    keys,
    values,
    as_view,
    ranqy,
    R
)

# expose the normalizer and materializers
from .adaptors.normalize import common
from .extensions.terminal import materialize, materialize_text, materialize_nested

# expose errors and configuration
from .errors import RanqyError, ConstructionError, ExhaustionError
from .config import Options, configure, get_options, options

# the | combinators live in their own namespace: pipe.map, pipe.filter, ...
from . import pipe

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "View",
    "IView",
    "AdaptorView",
    "Cursor",
    "Sentinel",
    "UNREACHABLE",
    "from_sequence",
    "from_mapping",
    "from_iterable",
    "from_range",
    "iota",
    "repeat",
    "generate",
    "empty",
    "keys",
    "values",
    "as_view",
    "ranqy",
    "R",
    "common",
    "materialize",
    "materialize_text",
    "materialize_nested",
    "RanqyError",
    "ConstructionError",
    "ExhaustionError",
    "Options",
    "configure",
    "get_options",
    "options",
    "pipe"
]
