from typing import Any


def is_missing(value: Any) -> bool:
    """None and blank strings count as absent; every other value is present."""
    return value is None or (isinstance(value, str) and value.strip() == "")
