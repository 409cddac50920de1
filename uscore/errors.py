class UscoreError(Exception):
    """base class for every error raised by a container"""
    pass


class InvalidInput(UscoreError, TypeError):
    """a container was constructed from something that is not a sequence, mapping or container"""

    def __init__(self, source: object):
        self.source = source
        super().__init__(f"expected a list, tuple, mapping or container, got {type(source).__name__}")


class KeyNotFound(UscoreError, KeyError):
    """indexed read of a key the container does not hold"""

    def __init__(self, key: object):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key {self.key!r} not found"


class EmptyContainer(UscoreError, ValueError):
    """an operation that needs at least one element was called on an empty container"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() called on an empty container")


class TypeCoercionFailure(UscoreError, TypeError):
    """a value could not be interpreted as a float for an arithmetic reduction"""

    def __init__(self, key: object, value: object):
        self.key = key
        self.value = value
        super().__init__(f"value {value!r} at key {key!r} cannot be coerced to float")


class LengthMismatch(UscoreError, ValueError):
    """combine() was given a different number of values than there are keys"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"combine expects {expected} values, got {actual}")


class AccessError(UscoreError, LookupError):
    """a property path could not be followed on an object"""

    def __init__(self, path: str, segment: str, reason: str):
        self.path = path
        self.segment = segment
        super().__init__(f"cannot resolve '{segment}' in path '{path}': {reason}")
