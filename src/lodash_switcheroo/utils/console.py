"""
Central Logging and Console Utilities.

All user facing output goes through the standard `logging` library, rendered
by `rich`. The active Rich Console sits behind a proxy so that the destination
(stdout, stderr, or an in-memory recording console) can be swapped at runtime
via `set_console` without re-importing the module-level `console` object.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "lodash_switcheroo"

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)

logger = logging.getLogger(LOGGER_NAME)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  Printing is forwarded to the backend console. Swapping the backend also
  re-attaches the package logger's `RichHandler` to the new destination.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Resets the proxy to a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    """
    Points the package logger at the current backend console.

    Only handlers on the ``lodash_switcheroo`` logger are touched, so host
    applications keep control over the root logger.
    """
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    logger.setLevel(logging.INFO)
    logger.addHandler(rich_handler)
    logger.propagate = False

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """Forwards `export_text` (useful for log capturing)."""
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def set_quiet(quiet: bool) -> None:
  """Raises the package log level to ERROR when ``quiet`` is set."""
  logger.setLevel(logging.ERROR if quiet else logging.INFO)


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """Logs a success message."""
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Markup is disabled because warnings quote user source text verbatim.
  """
  logger.warning(f"⚠️  {msg}", extra={"markup": False})


def log_error(msg: str) -> None:
  """Logs an error message."""
  logger.error(f"❌ {msg}", extra={"markup": True})
