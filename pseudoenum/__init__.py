r"""
'   ____  ____  ____  __  __  ____   ____  ____  _  _  __  __  __  __
'  (  _ \/ ___)( ___)(  )(  )(  _ \ ( ___)(  \( )(  )(  )(  \/  )
'   )___/\___ \ )__)  )(__)(  )(_) ) )__)  )  (  )(__)(  )    (
'  (__)  (____/(____)(______)(____/ (____)(_)\_)(______)(_/\/\_)
"""

# expose the main classes
from .enumerable import Enumerable, IEnumerable

# expose the operators as free functions over any iterable
from .extensions.core import filter_by, transform
from .extensions.ordering import sort_by, sort_by_descending, natural_comparer, reverse_comparer
from .extensions.casting import cast_to
from .extensions.terminal import for_all

# expose the factory functions
from .factories import (
    from_iterable,
    empty,
    generator,
    pseudoenum,
    P
)

# expose the error taxonomy
from .errors import (
    SequenceError,
    InvalidArgumentError,
    InvalidConfigurationError,
    InvalidCastError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "IEnumerable",
    "filter_by",
    "transform",
    "sort_by",
    "sort_by_descending",
    "natural_comparer",
    "reverse_comparer",
    "cast_to",
    "for_all",
    "from_iterable",
    "empty",
    "generator",
    "pseudoenum",
    "P",
    "SequenceError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "InvalidCastError"
]
