"""Terminal message helpers for the UNDERBAR CLI.

Glyphs fall back to ASCII when stderr cannot encode them, so terminals
without UTF-8 don't raise `UnicodeEncodeError`.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def error_glyph() -> str:
    """Error marker: "❌" when stderr supports it, otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback
