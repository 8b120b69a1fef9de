from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from catalog.errors import ResolutionError

log = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ResolutionError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def and_then(result: "Result[T]", fn: Callable[[T], "Result[U]"]) -> "Result[U]":
    """Feed an Ok value into the next step; an Err short-circuits unchanged."""
    if isinstance(result, Err):
        return result
    return fn(result.value)


def best_effort(fn: Callable[..., Optional[T]], *args, what: str = "lookup") -> Optional[T]:
    """
    Run an optional step. Any exception is logged at WARNING and becomes None;
    nothing escalates to the caller.
    """
    try:
        return fn(*args)
    except Exception as e:
        log.warning("Could not fetch %s: %s", what, e)
        return None
