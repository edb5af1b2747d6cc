"""Common utility functions."""


def truncate_preview(text: str, max_length: int = 60) -> str:
    """
    Shorten text for a one-line preview.

    Args:
        text: Text to shorten.
        max_length: Longest text returned unchanged.

    Returns:
        The text itself, or its head followed by "..." within max_length chars.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_number(value: float) -> str:
    """Render a coordinate without a trailing '.0' for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_error(error: BaseException) -> str:
    """
    Format an exception for display.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error string.
    """
    error_type = type(error).__name__
    return f"{error_type}: {str(error)}"
