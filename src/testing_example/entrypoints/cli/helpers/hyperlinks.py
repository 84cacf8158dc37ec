"""OSC-8 hyperlink utilities for the CLI help text.

`supports_osc8` guesses whether a stream renders terminal hyperlinks;
`hyperlink` wraps a URL accordingly. Pure formatting only.
"""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values known to render OSC-8 links.
OSC8_TERMINALS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether `stream` supports OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for non-TTY streams; otherwise True when the terminal is
        on a conservative allowlist (``TERM_PROGRAM``, Windows Terminal, VTE,
        alacritty, konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str) -> str:
    """Return `url` as an OSC-8 hyperlink, or unchanged when unsupported.

    Uses BEL (``\\x07``) as the terminator for broad terminal support.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
