# movies_api/utils/helpers.py

from typing import Optional


def normalize_text(text: Optional[str]) -> Optional[str]:
    """
    Normalizes a string for case-insensitive comparison by converting it to
    lowercase. Whitespace is significant. Returns None if the input is None.

    Args:
        text: The input string or None.

    Returns:
        The normalized string or None.
    """
    if text is None:
        return None
    return text.lower()
