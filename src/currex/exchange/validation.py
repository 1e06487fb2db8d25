"""Input rules for currency codes and exchange rates."""

CODE_LENGTH = 3


def canonical_code(code: str) -> str:
    """Return the stored form of a currency code."""
    return code.upper()


def is_storable(code: str) -> bool:
    """True iff the string can be bound as a SQL text parameter."""
    try:
        code.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_valid_code(code: str) -> bool:
    """True iff the code is exactly three characters long.

    Any characters are accepted; only the length is checked, both as given
    and in canonical form (uppercasing can change length, e.g. "ß" -> "SS").
    Strings with lone surrogates cannot be stored and are rejected.
    """
    if not isinstance(code, str) or not is_storable(code):
        return False
    return len(code) == CODE_LENGTH and len(canonical_code(code)) == CODE_LENGTH


def is_valid_rate(rate: float) -> bool:
    """True iff the rate is a strictly positive number."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return False
    return rate > 0.0
