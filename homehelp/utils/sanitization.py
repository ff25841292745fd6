import html


def validate_and_sanitize_input(value: str, max_length: int = 500) -> str:
    """
    Validate and sanitize user input.

    Args:
        value: Input string to validate
        max_length: Maximum allowed length

    Returns:
        Stripped, HTML-escaped string ("" for empty input)

    Raises:
        ValueError: If input is too long
    """
    if not value:
        return ""

    value = str(value).strip()

    if len(value) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    return html.escape(value, quote=True)
