from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T


@dataclass(frozen=True)
class Fallback(Generic[T]):
    """Generation failed; ``data`` is a deterministic substitute."""

    data: T
    error: str


@dataclass(frozen=True)
class Failed:
    """Generation failed and nothing is substituted."""

    error: str


PlanResult = Union[Ok, Fallback]
RecommendationResult = Union[Ok, Failed]
