"""HTML entity encoding for substituted dictionary values."""

from html.entities import codepoint2name

_ALWAYS_ESCAPED = frozenset('&<>"\'`')


def _reference(ch: str) -> str:
    code = ord(ch)
    name = codepoint2name.get(code)
    if name is not None:
        return f"&{name};"
    return f"&#x{code:X};"


def encode(text: str) -> str:
    """
    Escape markup-significant ASCII and every non-ASCII character.

    Named references are used where HTML defines one (``é`` -> ``&eacute;``),
    hexadecimal ones otherwise (``'`` -> ``&#x27;``).
    """
    return "".join(
        _reference(ch) if ch in _ALWAYS_ESCAPED or ord(ch) > 0x7F else ch
        for ch in text
    )
