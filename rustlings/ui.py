"""Terminal styling and the warning and success messages."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    forced = os.environ.get("CLICOLOR_FORCE")
    if forced is not None and forced not in ("", "0"):
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _styled(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold when colours are enabled."""
    return _styled(text, _BOLD)


def blue(text: object) -> str:
    """Render text in blue when colours are enabled."""
    return _styled(text, _BLUE)


def red(text: object) -> str:
    """Render text in red when colours are enabled."""
    return _styled(text, _RED)


def green(text: object) -> str:
    """Render text in green when colours are enabled."""
    return _styled(text, _GREEN)


def warn(message: str) -> None:
    """Print a red warning line."""
    icon = "!" if no_emoji() else "⚠️ "
    print(f"{red(icon)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    icon = "✓" if no_emoji() else "✅"
    print(f"{green(icon)} {green(message)}")