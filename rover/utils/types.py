# IN THIS FILE: POSITION, ROVERSTATE, RESULT

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, StrictInt

from rover.utils.enums import Heading
from rover.utils.errors import RoverError

T = TypeVar("T")
U = TypeVar("U")


class Position(BaseModel):
    """
    A cell on the unbounded integer grid.
    Coordinates may be negative; floats and bools are rejected.
    """
    model_config = ConfigDict(frozen=True)

    x: StrictInt
    y: StrictInt


class RoverState(BaseModel):
    """
    Immutable rover position and heading.
    Every command produces a new RoverState; frozen models compare and hash by value.
    """
    model_config = ConfigDict(frozen=True)

    position: Position
    heading: Heading

    @classmethod
    def at(cls, x: int, y: int, heading: Heading) -> "RoverState":
        """Shorthand for RoverState(position=Position(x=x, y=y), heading=heading)"""
        return cls(position=Position(x=x, y=y), heading=heading)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"x": self.x, "y": self.y, "d": self.heading.value}

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading.value}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Explicit success/failure value returned by the safe_* operations.
    Exactly one of value/error is meaningful; check success before using value.
    """
    value: Optional[T] = None
    error: Optional[RoverError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RoverError) -> "Result[T]":
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    def then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain another fallible operation; failures pass through untouched."""
        if not self.success:
            return Result.failure(self.error)
        return fn(self.value)

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
