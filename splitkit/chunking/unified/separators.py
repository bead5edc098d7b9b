"""
Separator hierarchy used by the recursive strategy.

Ordered from the most to the least semantically meaningful boundary. The
empty string means "split at every code point"; it is always usable, so a
descent through this list always terminates.
"""

PARAGRAPH_SEPARATOR = "\n\n"
LINE_SEPARATOR = "\n"
WORD_SEPARATOR = " "
CHARACTER_SEPARATOR = ""

DEFAULT_SEPARATORS: tuple[str, ...] = (
    PARAGRAPH_SEPARATOR,
    LINE_SEPARATOR,
    WORD_SEPARATOR,
    CHARACTER_SEPARATOR,
)
