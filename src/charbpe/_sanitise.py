"""
Utilities for turning vocabulary symbols into displayable strings.
"""

import unicodedata


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_symbol(symbol: str) -> str:
    """
    Render a symbol for logs and vocabulary dumps.

    Control characters are escaped and a bare space is shown as ``"␣"`` so that
    whitespace tokens stay visible.
    """
    if symbol == " ":
        return "␣"
    return _escape_ctrl_chars(symbol)
