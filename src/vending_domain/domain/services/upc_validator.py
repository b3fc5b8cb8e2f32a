"""UPC-A check digit computation and validation."""

from src.common.exceptions.custom_exceptions import InvalidIdentifierError

UPC_LENGTH = 12
_ASCII_DIGITS = frozenset("0123456789")


def compute_check_digit(first_eleven: str) -> int:
    """
    Computes the UPC-A check digit for the first 11 digits of a code.

    Digits on even positions weigh 3 and digits on odd positions weigh 1. The
    check digit is the distance from the weighted sum to its nearest multiple
    of ten, rounding up when the remainder is above five and down otherwise.
    """
    if len(first_eleven) != UPC_LENGTH - 1 or not _is_ascii_digits(first_eleven):
        raise InvalidIdentifierError(first_eleven, f"expected {UPC_LENGTH - 1} digits to compute a check digit")

    total = sum(int(digit) * (3 if position % 2 == 0 else 1) for position, digit in enumerate(first_eleven))
    remainder = total % 10
    if remainder > 5:
        nearest_multiple = total + (10 - remainder)
    else:
        nearest_multiple = total - remainder
    return abs(nearest_multiple - total)


def validate_upc(code: str) -> str:
    """Returns ``code`` unchanged when it is a valid UPC-A, raises InvalidIdentifierError otherwise."""
    if not isinstance(code, str) or len(code) != UPC_LENGTH:
        raise InvalidIdentifierError(str(code), f"a UPC must have exactly {UPC_LENGTH} characters")
    if not _is_ascii_digits(code):
        raise InvalidIdentifierError(code, "a UPC may only contain the digits 0-9")
    expected = compute_check_digit(code[:-1])
    if int(code[-1]) != expected:
        raise InvalidIdentifierError(code, f"check digit {code[-1]} does not match expected {expected}")
    return code


def is_valid_upc(code: str) -> bool:
    try:
        validate_upc(code)
    except InvalidIdentifierError:
        return False
    return True


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return bool(value) and all(char in _ASCII_DIGITS for char in value)
