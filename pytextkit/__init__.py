"""pytextkit - small codepoint-safe text transformations."""

from .abbreviate import abbreviate, truncate
from .case import swap_case
from .initials import initials
from .patterns.base import BreakPattern
from .patterns.factory import compile_break_pattern
from .types import BreakMatch
from .wrap import TextWrapper, wrap
from .wrap_config import WrapConfig

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "abbreviate",
    "truncate",
    "initials",
    "swap_case",
    "wrap",
    "TextWrapper",
    "WrapConfig",
    "BreakMatch",
    "BreakPattern",
    "compile_break_pattern",
]
