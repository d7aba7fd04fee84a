"""
Upstream result model.

Every value fetched from an external source is wrapped in Ok or Err
so that a failed fetch travels through the engine as data.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful upstream fetch."""
    value: T
    raw: Any = None  # Raw upstream payload, kept for diagnostics

    @property
    def is_ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value), raw=self.raw)


@dataclass(frozen=True)
class Err:
    """Failed upstream fetch."""
    reason: str
    source: str = ""

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, fn: Callable) -> "Err":
        return self


UpstreamResult = Union[Ok[T], Err]


def diagnostic_payload(result: "UpstreamResult") -> Any:
    """Raw payload of an Ok, or an error description of an Err."""
    if isinstance(result, Ok):
        return result.raw
    return {"error": result.reason, "source": result.source}
