"""Debug logging utility."""

import sys
from datetime import datetime
from typing import Optional

from simplecli.utils.config import Config
from simplecli.utils.exceptions import ConfigurationError

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        try:
            _config = Config()
        except ConfigurationError as exc:
            _config = Config(load=False)
            log_error("config", "Invalid configuration, debug logging disabled", exc)
    return _config


def reload_config():
    """Reload config (call after debug mode or SIMPLECLI_DIR changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _format_line(category: str, message: str) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    return f"[simplecli:{category}] {timestamp} {message}"


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Never writes to stdout, which belongs to prompts and list output.

    Args:
        category: Category like 'prompt' or 'pager'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = _format_line(category, message)
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug_prompt(message: str, **kwargs):
    """Log prompt-related debug message."""
    debug("prompt", message, **kwargs)


def debug_pager(message: str, **kwargs):
    """Log pagination-related debug message."""
    debug("pager", message, **kwargs)


def log_error(category: str, message: str, exc: Optional[Exception] = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'prompt', 'config'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    line = _format_line(category, f"ERROR: {message}")

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
