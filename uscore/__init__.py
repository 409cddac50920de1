"""
'   __  __  _____ _____ ____  ____  ______
'  / / / / / ___// ___// __ \/ __ \/ ____/
' / / / /  \__ \/ /   / / / / /_/ / __/
'/ /_/ /  ___/ / /___/ /_/ / _, _/ /___
'\____/  /____/\____/\____/_/ |_/_____/
"""

# expose the main class
from .container import Container

# expose the factory functions
from .factories import (
    create,
    split,
    empty,
    from_range,
    repeat,
    us
)

# expose supporting types and errors
from .types import Match, SourceKind
from .access import resolve
from .errors import (
    UscoreError,
    InvalidInput,
    KeyNotFound,
    EmptyContainer,
    TypeCoercionFailure,
    LengthMismatch,
    AccessError
)

# define what `import *` does
__all__ = [
    "Container",
    "create",
    "split",
    "empty",
    "from_range",
    "repeat",
    "us",
    "Match",
    "SourceKind",
    "resolve",
    "UscoreError",
    "InvalidInput",
    "KeyNotFound",
    "EmptyContainer",
    "TypeCoercionFailure",
    "LengthMismatch",
    "AccessError"
]
