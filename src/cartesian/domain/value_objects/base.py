"""Shared behavior for immutable value objects."""

from typing import Any, NoReturn

from cartesian.domain.exceptions import ImmutabilityError, NotFoundError


class ValueObject:
    """Mixin that makes attribute access strict and assignment impossible.

    Subclasses populate their fields once in ``__init__`` through
    ``_assign``; any later assignment or deletion raises ImmutabilityError,
    and reading an attribute that does not exist raises NotFoundError.
    """

    def _assign(self, **values: Any) -> None:
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __getattr__(self, name: str) -> NoReturn:
        raise NotFoundError(f"{type(self).__name__} has no attribute named `{name}`.")

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise ImmutabilityError(
            f"Cannot set `{name}` directly because {type(self).__name__}s are immutable."
        )

    def __delattr__(self, name: str) -> NoReturn:
        raise ImmutabilityError(
            f"Cannot delete `{name}` because {type(self).__name__}s are immutable."
        )
