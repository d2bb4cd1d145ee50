"""Data models for the simplecalc loop.

Operator and ErrorKind enums, the Outcome tagged result, the loop State
machine and SessionStats: the typed structures that flow through
arithmetic → session → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(str, Enum):
    """Supported arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ErrorKind(str, Enum):
    """Named failure of a single calculation."""

    DIVISION_BY_ZERO = "division-by-zero"
    INVALID_OPERATOR = "invalid-operator"


class State(str, Enum):
    """Calculator loop states, in the order one iteration visits them."""

    AWAITING_FIRST = "awaiting-first"
    AWAITING_OPERATOR = "awaiting-operator"
    AWAITING_SECOND = "awaiting-second"
    COMPUTED = "computed"
    AWAITING_CONTINUE = "awaiting-continue"
    EXIT = "exit"


class ParseError(ValueError):
    """Operand text is not a valid real number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"not a valid number: {text!r}")
        self.text = text


@dataclass(frozen=True)
class Outcome:
    """Result of one dispatch: either a value or an error kind, never both."""

    value: Optional[float] = None
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")

    @classmethod
    def success(cls, value: float) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> Outcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SessionStats:
    """Counters for one interactive run. Held in memory only."""

    computations: int = 0
    errors: int = 0
    rejected_operands: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.ok:
            self.computations += 1
        else:
            self.errors += 1

    def summary(self) -> str:
        return (
            f"{self.computations} computed, {self.errors} failed, "
            f"{self.rejected_operands} operands rejected"
        )
