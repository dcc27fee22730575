"""CLI helpers for CWVER.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, and glyphs and message emitters with emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .messages import arrow_glyph, bullet_glyph, error

__all__ = ["arrow_glyph", "bullet_glyph", "error", "hyperlink"]
