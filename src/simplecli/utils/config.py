"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from simplecli.utils.exceptions import ConfigurationError


def get_simplecli_dir() -> Path:
    """Get the simplecli data directory (XDG-compliant)."""
    if env_dir := os.environ.get("SIMPLECLI_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "simplecli"


class Config:
    """Optional defaults for prompts and pagination.

    Nothing in the core reads this implicitly. Callers opt in with
    ``PromptEngine.from_config`` / ``ListPresenter.from_config``.
    """

    # Settings whose value may be None (no limit) or an int
    OPTIONAL_INTS = ("max_retries",)

    def __init__(self, config_dir: Optional[Path] = None, load: bool = True):
        """Load config from directory. With load=False only defaults are set."""
        self.config_dir = config_dir or get_simplecli_dir()
        self._config_file = self.config_dir / "config.json"
        self._load(read_sources=load)

    def _load(self, read_sources: bool = True):
        """Load config from file."""
        from simplecli.utils.constants import DEFAULT_PAGE_SIZE

        # Set defaults
        self.debug = False
        self.max_retries: Optional[int] = None  # None retries forever
        self.page_size = DEFAULT_PAGE_SIZE
        self.color = True
        self.case_sensitive = False
        self.show_choices_on_failure = True

        if not read_sources:
            return

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                data = {}
            self.debug = data.get("debug", False)
            self.max_retries = data.get("max_retries")
            self.page_size = data.get("page_size", DEFAULT_PAGE_SIZE)
            self.color = data.get("color", True)
            self.case_sensitive = data.get("case_sensitive", False)
            self.show_choices_on_failure = data.get("show_choices_on_failure", True)

        # Shell env vars override the file
        self._apply_env_overrides()
        self._validate()

    def _apply_env_overrides(self):
        """Apply SIMPLECLI_* environment variables on top of file values."""
        prefix = "SIMPLECLI_"
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            attr_name = key[len(prefix) :].lower()
            if attr_name == "dir" or not hasattr(self, attr_name):
                continue
            setattr(self, attr_name, self._convert(attr_name, value))

    def _convert(self, attr_name: str, value: str) -> Any:
        """Convert an env string based on the current attribute type."""
        current = getattr(self, attr_name)
        if attr_name in self.OPTIONAL_INTS:
            if value.strip().lower() in ("", "none"):
                return None
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(
                    f"{attr_name} must be an integer or 'none', got {value!r}"
                ) from None
        if isinstance(current, bool):
            return value.lower() in ("true", "1", "yes")
        if isinstance(current, int):
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(
                    f"{attr_name} must be an integer, got {value!r}"
                ) from None
        return value

    def _validate(self):
        """Reject values the engine cannot work with."""
        if self.max_retries is not None and (
            isinstance(self.max_retries, bool)
            or not isinstance(self.max_retries, int)
            or self.max_retries < 0
        ):
            raise ConfigurationError(
                f"max_retries must be a non-negative integer, got {self.max_retries!r}"
            )
        if (
            isinstance(self.page_size, bool)
            or not isinstance(self.page_size, int)
            or self.page_size <= 0
        ):
            raise ConfigurationError(
                f"page_size must be a positive integer, got {self.page_size!r}"
            )

    def as_dict(self) -> dict[str, Any]:
        """Current settings as a JSON-serialisable dict."""
        return {
            "debug": self.debug,
            "max_retries": self.max_retries,
            "page_size": self.page_size,
            "color": self.color,
            "case_sensitive": self.case_sensitive,
            "show_choices_on_failure": self.show_choices_on_failure,
        }

    def save(self):
        """Save config to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self.as_dict(), indent=2))

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    @property
    def log_path(self) -> Path:
        """Path to the debug log."""
        return self.config_dir / "debug.log"
