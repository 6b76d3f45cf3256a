from typing import Any


def to_text(value: Any) -> str:
    """Textual form of a value; integral floats drop their ``.0``."""
    text = str(value)
    if isinstance(value, float) and text.endswith(".0"):
        return text[:-2]
    return text
