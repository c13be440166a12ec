"""
'    ___  ___  __ _ _   _
'   / __|/ _ \/ _` | | | |
'   \__ \  __/ (_| | |_| |
'   |___/\___|\__, |\__, |
'                |_| |___/
"""

import logging

# expose the main classes
from .sequence import Sequence
from .option import Option
from .sources import RewindableSource

# expose the factory functions
from .factories import (
    over,
    from_range,
    empty,
    S
)

# expose supporting types and errors
from .types import Group
from .errors import SeqyError, InvalidArgumentError, IllegalStateError

# the host application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "Option",
    "RewindableSource",
    "over",
    "from_range",
    "empty",
    "S",
    "Group",
    "SeqyError",
    "InvalidArgumentError",
    "IllegalStateError"
]
