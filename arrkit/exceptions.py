"""
Errors raised by the collection utilities.
"""

from typing import Any


class ArrError(Exception):
    """Base class for all arrkit errors."""


class ArrIsEmptyError(ArrError):
    """Raised on operations that are meaningless for an empty collection."""


class AliasConflictError(ArrError, ValueError):
    """
    Two children of the same parent resolve to the same alias.

    Attributes:
        alias: The alias both children would be stored under.
        child_id: Id of the child that could not be inserted.
        parent_id: Id of the parent owning the children container.
    """

    def __init__(self, alias: Any, child_id: Any, parent_id: Any) -> None:
        self.alias = alias
        self.child_id = child_id
        self.parent_id = parent_id
        super().__init__(
            f"Non-unique alias {alias!r} for a child. "
            f"Child is {child_id!r}, parent is {parent_id!r}"
        )


__all__ = ["ArrError", "ArrIsEmptyError", "AliasConflictError"]
