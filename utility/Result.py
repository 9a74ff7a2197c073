# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: Result
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A remote call or flow step that produced a value."""
    value: T


@dataclass(frozen=True)
class Failure:
    """
    A remote call or flow step that produced no value.

    reason is the short, user-facing message; detail carries the underlying
    error text for the log.
    """
    reason: str
    detail: Optional[str] = None


Result = Union[Success[T], Failure]
