"""Error taxonomy for descriptor building and strict decoding.

Lenient decoding never raises: shape mismatches pass the value through.
Only strict mode surfaces :class:`TypeMismatch`.
"""

from __future__ import annotations

from typing import Any


class CoercionError(ValueError):
    """Base class for all wirecoerce errors."""


class DescriptorError(CoercionError):
    """A model annotation cannot be expressed as a type descriptor."""


class TypeMismatch(CoercionError):
    """A value does not have the shape its descriptor requires.

    Attributes:
        expected: Descriptor kind name (``"String"``, ``"List"``, ...).
        actual: The offending value, untouched.
        path: Field/index chain from the decode root, e.g. ``scopes[1]``.
    """

    def __init__(self, expected: str, actual: Any, path: str) -> None:
        self.expected = expected
        self.actual = actual
        self.path = path
        where = path or "<root>"
        super().__init__(f"expected {expected} at {where}, got {type(actual).__name__}: {actual!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.expected, self.actual, self.path))
