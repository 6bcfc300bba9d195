"""Option string parsing for the CLI."""

from src.errors import InvalidOptionsError


def parse_options(option_string: str) -> dict[str, str]:
    """
    Turn a flat option string into a key -> value mapping.

    Each `--name` starts an option; the word right after it is the value.
    Further words before the next `--name` are dropped, and an option with
    no following word gets "". Unknown names are accepted as-is.

    Example:
        >>> parse_options("--amount 100 --description lunch --dry")
        {'amount': '100', 'description': 'lunch', 'dry': ''}

    Raises:
        InvalidOptionsError: If the string is empty or only whitespace
    """
    if not option_string or not option_string.strip():
        raise InvalidOptionsError()

    options: dict[str, str] = {}
    for segment in option_string.split("--")[1:]:
        words = segment.split()
        if not words:
            continue
        options[words[0]] = words[1] if len(words) > 1 else ""
    return options
