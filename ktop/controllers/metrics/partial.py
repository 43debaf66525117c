"""Best-effort results that carry an optional warning alongside the value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Partial(Generic[T]):
    """A value that may be degraded, plus the reason it is degraded."""

    value: T
    warning: str | None = None

    @property
    def degraded(self) -> bool:
        return self.warning is not None


def first_warning(*results: Partial) -> str | None:
    """Return the warning of the first degraded result, in argument order."""
    for result in results:
        if result.warning is not None:
            return result.warning
    return None
