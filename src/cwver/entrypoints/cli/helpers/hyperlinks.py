"""OSC-8 hyperlink utilities for the CWVER CLI.

Used to render the "See Also" references of the help text as clickable links
on terminals that understand OSC-8, and as plain URLs everywhere else.
"""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values of terminals known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole", "foot")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether `stream` is a terminal that renders OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``False`` for anything that is not a TTY (pipes, files,
        ``CliRunner``); otherwise ``True`` if the environment identifies a
        terminal from the allowlist (including Windows Terminal and VTE based
        terminals).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None) -> str:
    """Render `url` as a clickable link, or as plain text when unsupported.

    Args:
        url: Link target.
        label: Visible text; defaults to the URL itself. Ignored when links
            are not supported, so the URL is never hidden from the reader.

    Returns:
        str: The BEL-terminated OSC-8 sequence, or the bare URL.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"
