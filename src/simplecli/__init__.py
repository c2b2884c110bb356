"""simplecli - Prompts that validate and retry, and lists that paginate."""

from importlib.metadata import version
from typing import Any, Optional, Sequence, Union

__version__ = version("simplecli")

from simplecli.core import (
    ListPresenter,
    NumberKind,
    Page,
    PromptEngine,
    Terminal,
)
from simplecli.utils.exceptions import (
    ContractViolation,
    EmptyCandidates,
    InputClosed,
    InvalidPageSize,
    RetryLimitExceeded,
    SimpleCliError,
)

__all__ = [
    "ListPresenter",
    "NumberKind",
    "Page",
    "PromptEngine",
    "Terminal",
    "ContractViolation",
    "EmptyCandidates",
    "InputClosed",
    "InvalidPageSize",
    "RetryLimitExceeded",
    "SimpleCliError",
    "display_all",
    "display_paginated",
    "prompt_choice",
    "prompt_number",
    "prompt_string",
    "select_from_list",
]


# Module-level shortcuts over stdin/stdout. Each call builds its own
# engine, so nothing is shared between calls.


def prompt_string(message: Optional[str], non_empty: bool = True, **kwargs) -> str:
    """See ``PromptEngine.prompt_string``."""
    return PromptEngine().prompt_string(message, non_empty=non_empty, **kwargs)


def prompt_number(
    message: Optional[str],
    kind: Union[NumberKind, type] = NumberKind.INTEGER,
    value_range=None,
    **kwargs,
):
    """See ``PromptEngine.prompt_number``."""
    return PromptEngine().prompt_number(
        message, kind=kind, value_range=value_range, **kwargs
    )


def prompt_choice(message: Optional[str], candidates: Sequence[str]) -> tuple[int, str]:
    """See ``PromptEngine.prompt_choice``."""
    return PromptEngine().prompt_choice(message, candidates)


def display_all(items: Sequence[Any], header: Optional[str] = None) -> None:
    """See ``ListPresenter.display_all``."""
    ListPresenter().display_all(items, header=header)


def display_paginated(
    items: Sequence[Any],
    page_size: Optional[int] = None,
    header: Optional[str] = None,
) -> int:
    """See ``ListPresenter.display_paginated``."""
    return ListPresenter().display_paginated(items, page_size, header=header)


def select_from_list(message: Optional[str], items: Sequence[Any]) -> tuple[int, Any]:
    """See ``ListPresenter.select_from_list``."""
    return ListPresenter().select_from_list(message, items)
