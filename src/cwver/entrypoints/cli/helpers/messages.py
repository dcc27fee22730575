"""Terminal message helpers for the CWVER CLI.

Small helpers for rendering user-visible lines with sensible Unicode→ASCII
fallbacks. Errors write to stderr so stdout only carries results.
"""

import click


def _supports_character(character: str, stream_name: str = "stderr") -> bool:
    """Return True if *character* can be encoded on the given standard stream.

    Decides whether to emit Unicode glyphs or fall back to ASCII so terminals
    without UTF-8 don't raise `UnicodeEncodeError`.

    Args:
        character: The Unicode character(s) to probe (e.g., "❌", "➔").
        stream_name: ``"stdout"`` or ``"stderr"``.

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream(stream_name)  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(unicode_glyph: str, fallback: str, stream_name: str) -> str:
    if _supports_character(unicode_glyph, stream_name):
        return unicode_glyph
    return fallback


def arrow_glyph() -> str:
    """Arrow between the two ends of a regression range ("➔" or "->")."""
    return _glyph("➔", "->", "stdout")


def bullet_glyph() -> str:
    """Bullet in front of each bisect starting point ("•" or "*")."""
    return _glyph("•", "*", "stdout")


def error_glyph() -> str:
    """Error marker with graceful fallbacks.

    Returns:
        str: "❌" or "[X]" depending on stderr support.
    """
    return _glyph("❌", "[X]", "stderr")


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Args:
        msg: The message to display.

    Example:
        ``❌  failed to parse 21w1.0``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)
