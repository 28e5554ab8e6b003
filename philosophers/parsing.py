"""Command-line argument validation and conversion into simulation settings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers simulation, times in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int | None = None

    @property
    def unlimited_meals(self) -> bool:
        """True when the simulation runs until a philosopher dies."""
        return self.max_meals is None


def atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does, ignoring trailing text."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _is_number(text: str) -> bool:
    return bool(text) and all(char in _DIGITS for char in text)


def validate(args: Iterable[str]) -> tuple[str, ...]:
    """Check that every argument is a plain non-negative integer not above INT_MAX.

    Returns the arguments as a tuple; raises ArgumentError on the first bad one.
    """
    checked = tuple(args)
    for arg in checked:
        if not _is_number(arg) or int(arg) > INT_MAX:
            raise ArgumentError()
    return checked


def parse_arguments(args: Sequence[str]) -> Settings:
    """Turn four or five argument strings into Settings.

    The optional fifth argument sets how many meals each philosopher must eat;
    zero or absence means there is no such limit.
    """
    if len(args) not in (4, 5):
        raise ArgumentError()
    values = [atoi(arg) for arg in validate(args)]
    max_meals = values[4] if len(values) == 5 and values[4] > 0 else None
    return Settings(
        num_philos=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        max_meals=max_meals,
    )