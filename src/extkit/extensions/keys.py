"""Extension name normalization."""

import re

_SEPARATORS = re.compile(r"[\s_\-]+")


def name_to_key(name: str) -> str:
    """Normalize an extension name into its lookup key.

    Lowercases the name and collapses every run of whitespace, underscores
    and hyphens into a single hyphen, so "My Tool", "my-tool" and "MY_TOOL"
    all map to "my-tool".

    Args:
        name: Extension name as written by the user

    Returns:
        Normalized key
    """
    return _SEPARATORS.sub("-", name.strip().lower()).strip("-")
