"""Validation of raw input lines.

Every check returns an ``Outcome``: either the accepted value or a
``Rejection`` with the diagnostic shown to the user. Nothing here does I/O,
so the prompt loop stays the only place that decides between retrying and
returning.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from simplecli.utils.constants import CONFIRM_RETRY_HINT, NO_ANSWERS, YES_ANSWERS
from simplecli.utils.formatting import format_choice_list

Number = Union[int, float]


class Rejection(str, Enum):
    """Why a line was not accepted."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    NOT_IN_SET = "not_in_set"


class NumberKind(Enum):
    """Numeric type a prompt expects."""

    INTEGER = "integer"
    FLOAT = "floating-point"

    @classmethod
    def of(cls, kind: Union["NumberKind", type]) -> "NumberKind":
        """Accept a NumberKind or the Python type int / float."""
        if isinstance(kind, cls):
            return kind
        if kind is int:
            return cls.INTEGER
        if kind is float:
            return cls.FLOAT
        raise TypeError(f"Unsupported number kind: {kind!r}")

    def parse(self, text: str) -> Number:
        """Parse text, raising ValueError if it is not a valid number.

        Digit separators such as "1_000" are not accepted.
        """
        if "_" in text:
            raise ValueError(f"digit separators not allowed: {text!r}")
        if self is NumberKind.INTEGER:
            return int(text)
        value = float(text)
        if not math.isfinite(value):
            raise ValueError(f"not a finite number: {text!r}")
        return value


@dataclass(frozen=True)
class Outcome:
    """Result of validating one line."""

    value: Any = None
    rejection: Optional[Rejection] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @classmethod
    def accept(cls, value: Any) -> "Outcome":
        return cls(value=value)

    @classmethod
    def reject(cls, rejection: Rejection, message: str) -> "Outcome":
        return cls(rejection=rejection, message=message)


def check_text(
    line: str, non_empty: bool = True, max_length: Optional[int] = None
) -> Outcome:
    """Validate a free text answer.

    Whitespace-only lines count as empty. The accepted value is the line
    as typed.
    """
    if max_length is not None and len(line) > max_length:
        over = len(line) - max_length
        return Outcome.reject(
            Rejection.TOO_LONG,
            f"Your input is {over} characters over the {max_length} "
            "character limit. Please try again.",
        )
    if non_empty and not line.strip():
        return Outcome.reject(Rejection.EMPTY, "Your input cannot be empty.")
    return Outcome.accept(line)


def parse_number(line: str, kind: NumberKind) -> Outcome:
    try:
        return Outcome.accept(kind.parse(line.strip()))
    except ValueError:
        return Outcome.reject(
            Rejection.NOT_A_NUMBER, f"Please enter a valid {kind.value} value."
        )


def check_range(
    number: Number,
    minimum: Optional[Number] = None,
    maximum: Optional[Number] = None,
) -> Outcome:
    """Check ``minimum <= number <= maximum``; either bound may be None."""
    if minimum is not None and number < minimum:
        return Outcome.reject(
            Rejection.OUT_OF_RANGE,
            f"Your input ({number}) is lower than the minimum allowed value "
            f"of {minimum}.",
        )
    if maximum is not None and number > maximum:
        return Outcome.reject(
            Rejection.OUT_OF_RANGE,
            f"Your input ({number}) is larger than the maximum allowed value "
            f"of {maximum}.",
        )
    return Outcome.accept(number)


def _not_in_set(shown: str, choices: Sequence[Any], show_choices: bool) -> str:
    if show_choices:
        return (
            f"Your input ({shown}) is not an option of the choices: "
            f"{format_choice_list(choices)}"
        )
    return f"Your input ({shown}) is not a valid choice."


def check_number_choice(
    number: Number, choices: Sequence[Number], show_choices: bool = True
) -> Outcome:
    if number in choices:
        return Outcome.accept(number)
    return Outcome.reject(
        Rejection.NOT_IN_SET, _not_in_set(str(number), choices, show_choices)
    )


def match_choice(
    line: str,
    choices: Sequence[str],
    case_sensitive: bool = False,
    show_choices: bool = True,
) -> Outcome:
    """Match a line against string choices.

    The accepted value is the choice as spelled in ``choices``, so callers
    can compare against their own constants. An exact match wins over a
    case-insensitive one.
    """
    answer = line.strip()
    if answer in choices:
        return Outcome.accept(answer)
    if not case_sensitive:
        folded = answer.casefold()
        for choice in choices:
            if choice.casefold() == folded:
                return Outcome.accept(choice)
    message = _not_in_set(answer, choices, show_choices)
    return Outcome.reject(
        Rejection.NOT_IN_SET, f"{message} (Case sensitive: {case_sensitive})"
    )


def check_yes_no(
    line: str,
    default: Optional[bool] = None,
    yes: Sequence[str] = YES_ANSWERS,
    no: Sequence[str] = NO_ANSWERS,
) -> Outcome:
    answer = line.strip().lower()
    if answer in yes:
        return Outcome.accept(True)
    if answer in no:
        return Outcome.accept(False)
    if not answer and default is not None:
        return Outcome.accept(default)
    return Outcome.reject(Rejection.NOT_IN_SET, CONFIRM_RETRY_HINT)
