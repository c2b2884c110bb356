"""Prompt engine: ask, validate, and re-ask until the answer is usable."""

from typing import Callable, Optional, Sequence, Union

from simplecli.core.terminal import Terminal
from simplecli.core.validation import (
    Number,
    NumberKind,
    Outcome,
    check_number_choice,
    check_range,
    check_text,
    check_yes_no,
    match_choice,
    parse_number,
)
from simplecli.utils.debug import debug_prompt
from simplecli.utils.exceptions import (
    ContractViolation,
    EmptyCandidates,
    RetryLimitExceeded,
)
from simplecli.utils.formatting import format_menu

Validator = Callable[[str], Outcome]


class PromptEngine:
    """Reads validated values from a terminal.

    Invalid answers are never returned. Each rejection prints one
    diagnostic line, then the prompt is shown again. ``InputClosed`` from
    the terminal propagates to the caller.

    Args:
        terminal: Where to read and write, defaults to stdin/stdout
        max_retries: Invalid answers tolerated after the first attempt,
            None to keep asking forever
        case_sensitive: Default for ``prompt_one_of``
        show_choices_on_failure: List the valid choices in set diagnostics
    """

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        max_retries: Optional[int] = None,
        case_sensitive: bool = False,
        show_choices_on_failure: bool = True,
    ):
        if max_retries is not None and max_retries < 0:
            raise ValueError("max_retries must be None or >= 0")
        self.terminal = terminal or Terminal()
        self.max_retries = max_retries
        self.case_sensitive = case_sensitive
        self.show_choices_on_failure = show_choices_on_failure

    @classmethod
    def from_config(cls, config, terminal: Optional[Terminal] = None) -> "PromptEngine":
        """Build an engine from a ``Config``."""
        return cls(
            terminal=terminal or Terminal(color=config.color),
            max_retries=config.max_retries,
            case_sensitive=config.case_sensitive,
            show_choices_on_failure=config.show_choices_on_failure,
        )

    def _ask(
        self,
        message: Optional[str],
        validate: Validator,
        retry_message: Optional[str] = None,
    ):
        """Run the retry loop until ``validate`` accepts a line."""
        rejected = 0
        while True:
            shown = message if rejected == 0 or retry_message is None else retry_message
            if shown is not None:
                self.terminal.write(shown)

            outcome = validate(self.terminal.read_line())
            if outcome.ok:
                debug_prompt("accepted", retries=rejected)
                return outcome.value

            rejected += 1
            self.terminal.error(outcome.message)
            debug_prompt(
                "rejected", reason=outcome.rejection.value, attempts=rejected
            )
            if self.max_retries is not None and rejected > self.max_retries:
                debug_prompt("retry limit reached", max_retries=self.max_retries)
                raise RetryLimitExceeded(rejected)

    def prompt_string(
        self,
        message: Optional[str],
        non_empty: bool = True,
        max_length: Optional[int] = None,
        retry_message: Optional[str] = None,
    ) -> str:
        """Ask for a line of text.

        Args:
            message: Prompt shown before each attempt
            non_empty: Reject empty and whitespace-only answers
            max_length: Reject answers longer than this many characters
            retry_message: Shown instead of ``message`` after a rejection

        Returns:
            The line without its terminator
        """
        return self._ask(
            message,
            lambda line: check_text(line, non_empty=non_empty, max_length=max_length),
            retry_message,
        )

    def prompt_number(
        self,
        message: Optional[str],
        kind: Union[NumberKind, type] = NumberKind.INTEGER,
        value_range: Optional[tuple[Optional[Number], Optional[Number]]] = None,
        choices: Optional[Sequence[Number]] = None,
        retry_message: Optional[str] = None,
    ) -> Number:
        """Ask for an integer or float.

        Args:
            message: Prompt shown before each attempt
            kind: NumberKind, or int / float
            value_range: Inclusive (min, max); either end may be None
            choices: If given, the value must be one of these
            retry_message: Shown instead of ``message`` after a rejection

        Returns:
            The parsed number
        """
        kind = NumberKind.of(kind)
        if choices is not None and len(choices) == 0:
            raise EmptyCandidates()
        minimum, maximum = value_range if value_range is not None else (None, None)
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ContractViolation(
                f"value_range minimum {minimum} is larger than maximum {maximum}"
            )

        def validate(line: str) -> Outcome:
            outcome = parse_number(line, kind)
            if not outcome.ok:
                return outcome
            outcome = check_range(outcome.value, minimum, maximum)
            if outcome.ok and choices is not None:
                outcome = check_number_choice(
                    outcome.value, choices, self.show_choices_on_failure
                )
            return outcome

        return self._ask(message, validate, retry_message)

    def prompt_choice(
        self, message: Optional[str], candidates: Sequence[str]
    ) -> tuple[int, str]:
        """Show a numbered menu and return ``(index, candidate)``.

        The user answers with a 1-based number. The whole menu is shown
        again after a rejected answer.

        Raises:
            EmptyCandidates: ``candidates`` is empty (nothing is printed)
        """
        if not candidates:
            raise EmptyCandidates()

        lines = format_menu(candidates)
        if message is not None:
            lines.insert(0, message)
        number = self.prompt_number(
            "\n".join(lines),
            NumberKind.INTEGER,
            value_range=(1, len(candidates)),
        )
        index = number - 1
        return index, candidates[index]

    def prompt_one_of(
        self,
        message: Optional[str],
        choices: Sequence[str],
        case_sensitive: Optional[bool] = None,
        retry_message: Optional[str] = None,
    ) -> str:
        """Ask for one of a fixed set of words.

        Returns the matching entry of ``choices`` as spelled there, even if
        the user typed it in a different case.
        """
        if not choices:
            raise EmptyCandidates()
        if case_sensitive is None:
            case_sensitive = self.case_sensitive
        return self._ask(
            message,
            lambda line: match_choice(
                line,
                choices,
                case_sensitive=case_sensitive,
                show_choices=self.show_choices_on_failure,
            ),
            retry_message,
        )

    def confirm(self, message: Optional[str], default: Optional[bool] = None) -> bool:
        """Ask a yes/no question. An empty answer returns ``default`` if set."""
        return self._ask(message, lambda line: check_yes_no(line, default=default))
