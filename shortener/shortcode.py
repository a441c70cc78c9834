"""Short code encoding utilities."""

import string

# Base62 characters, order matters: 0-9, a-z, A-Z
BASE62_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase
BASE = len(BASE62_CHARS)

_CHAR_INDEX = {char: index for index, char in enumerate(BASE62_CHARS)}


def encode(num: int) -> str:
    """Convert a non-negative integer to its base62 short code.

    Args:
        num: Identifier to encode

    Returns:
        Base62 string, most significant digit first

    Raises:
        ValueError: If num is negative
    """
    if num < 0:
        raise ValueError(f"Cannot encode negative identifier: {num}")

    if num == 0:
        return BASE62_CHARS[0]

    result = []
    while num > 0:
        num, remainder = divmod(num, BASE)
        result.append(BASE62_CHARS[remainder])

    return ''.join(reversed(result))


def decode(code: str) -> int:
    """Convert a base62 short code back to its integer.

    Args:
        code: Base62 string

    Returns:
        Integer value

    Raises:
        ValueError: If code is empty or has characters outside the alphabet
    """
    if not code:
        raise ValueError("Cannot decode an empty short code")

    result = 0
    for char in code:
        index = _CHAR_INDEX.get(char)
        if index is None:
            raise ValueError(f"Invalid base62 character {char!r} in {code!r}")
        result = result * BASE + index

    return result


def is_valid_format(code: str) -> bool:
    """Check if code could have been produced by encode()."""
    return bool(code) and all(c in _CHAR_INDEX for c in code)
