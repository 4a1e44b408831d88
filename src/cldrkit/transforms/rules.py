"""Transform rule interface.

A TransformRule rewrites text in place through a Cursor. Rule chains and
concrete rule catalogs live outside this package; they build on the
contract below.

Contract for every rule:
    - apply_to() may mutate the cursor's text and/or advance its position
    - a rule either applies completely or raises before touching the cursor

Python 3.13+. Zero external dependencies.
"""

from abc import ABC, abstractmethod

from .cursor import Cursor

__all__ = ["NullTransform", "TransformRule"]


class TransformRule(ABC):
    """Base class for rules applied to a Cursor."""

    __slots__ = ()

    @abstractmethod
    def apply_to(self, cursor: Cursor) -> None:
        """Apply the rule at the cursor's position."""


class NullTransform(TransformRule):
    """Identity rule: leaves position and text untouched.

    Serves as an inert placeholder step inside a rule chain.
    """

    __slots__ = ()

    def apply_to(self, cursor: Cursor) -> None:
        pass

    def __repr__(self) -> str:
        return "NullTransform()"
