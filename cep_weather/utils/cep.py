import re

_NON_DIGIT = re.compile(r"\D")
_CEP_PATTERN = re.compile(r"\d{5}-?\d{3}")


def normalize_code(raw_code: str) -> str:
    """Strip every non-digit character, e.g. ``"12345-678"`` -> ``"12345678"``."""
    return _NON_DIGIT.sub("", raw_code or "")


def is_well_formed(raw_code: str) -> bool:
    """
    Soft check of the input form: ``12345-678`` or ``12345678``.

    Lookups do not depend on it; callers use it to warn about unusual input.
    """
    return bool(_CEP_PATTERN.fullmatch((raw_code or "").strip()))


def format_code(code: str) -> str:
    """Render an eight digit code as ``12345-678``; anything else is returned normalized."""
    digits = normalize_code(code)
    if len(digits) != 8:
        return digits
    return f"{digits[:5]}-{digits[5:]}"
