r"""
'     ___  ___  __ _  ___  _ __  ___
'    / __|/ _ \/ _` |/ _ \| '_ \/ __|
'    \__ \  __/ (_| | (_) | |_) \__ \
'    |___/\___|\__, |\___/| .__/|___/
'                 |_|     |_|
"""

# expose the main classes
from .enumerable import Enumerable
from .cursor import Cursor, is_restartable

# expose the factory functions
from .factories import (
    from_iterable,
    once,
    from_range,
    repeat,
    empty,
    generate,
    seq,
    S
)

# expose the free operators
from .extensions.filtering import without, without_with_index
from .extensions.ordering import sort, sort_with, natural_compare
from .extensions.partitioning import (
    take_last,
    skip_last,
    take_until,
    take_until_with_index,
    skip_until,
    skip_until_with_index
)
from .extensions.windowing import subset, remove_subset, normalize_window
from .extensions.actions import for_each, for_each_with_index

# expose supporting types and errors
from .types import SortOption
from .errors import SequenceError, SourceNotRestartableError, CursorStateError

# define what `import *` does
__all__ = [
    "Enumerable",
    "Cursor",
    "is_restartable",
    "from_iterable",
    "once",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "seq",
    "S",
    "without",
    "without_with_index",
    "sort",
    "sort_with",
    "natural_compare",
    "take_last",
    "skip_last",
    "take_until",
    "take_until_with_index",
    "skip_until",
    "skip_until_with_index",
    "subset",
    "remove_subset",
    "normalize_window",
    "for_each",
    "for_each_with_index",
    "SortOption",
    "SequenceError",
    "SourceNotRestartableError",
    "CursorStateError"
]
