"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'LawViolation',
    'LawViolationError',
    'MalformedDescriptor',
    'MalformedDescriptorError',
]


# --- Descriptor Errors ---


class MalformedDescriptor(msgspec.Struct, frozen=True, gc=False):
    """Descriptor or monoid built with a non-callable operation - struct variant."""

    owner: str
    operation: str

    def to_exception(self) -> MalformedDescriptorError:
        """Convert to exception for raise-based code."""
        return MalformedDescriptorError(self.owner, self.operation)


class MalformedDescriptorError(TypeError):
    """Descriptor or monoid built with a non-callable operation - exception variant."""

    def __init__(self, owner: str, operation: str) -> None:
        self.owner = owner
        self.operation = operation
        super().__init__(f"{owner}: operation '{operation}' must be callable")

    def to_struct(self) -> MalformedDescriptor:
        """Convert to struct for Result-based code."""
        return MalformedDescriptor(self.owner, self.operation)


# --- Law Errors ---


class LawViolation(msgspec.Struct, frozen=True, gc=False):
    """An algebraic law did not hold - struct variant for Result[None, LawViolation]."""

    law: str
    left: object
    right: object

    def to_exception(self) -> LawViolationError:
        """Convert to exception for raise-based code."""
        return LawViolationError(self.law, self.left, self.right)


class LawViolationError(AssertionError):
    """An algebraic law did not hold - exception variant."""

    def __init__(self, law: str, left: object, right: object) -> None:
        self.law = law
        self.left = left
        self.right = right
        super().__init__(f'{law} violated: {left!r} != {right!r}')

    def to_struct(self) -> LawViolation:
        """Convert to struct for Result-based code."""
        return LawViolation(self.law, self.left, self.right)
