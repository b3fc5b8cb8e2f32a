"""Argument guards shared by the domain entities."""

from numbers import Real

from src.common.exceptions.custom_exceptions import InvalidArgumentError, InvariantViolationError


def require_text(value: str | None, field_name: str) -> str:
    """Returns ``value`` if it is a non-empty string, raises InvalidArgumentError otherwise."""
    if value is None:
        raise InvalidArgumentError(f"{field_name} cannot be None.")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field_name} must be a string, got {type(value).__name__}.")
    if not value:
        raise InvalidArgumentError(f"{field_name} cannot be empty.")
    return value


def require_positive_price(price: float, field_name: str = "Price") -> float:
    """Returns ``price`` as a float if it is a real number above zero."""
    if isinstance(price, bool) or not isinstance(price, Real):
        raise InvalidArgumentError(f"{field_name} must be a number, got {type(price).__name__}.")
    if not price > 0:
        raise InvariantViolationError(f"{field_name} must be greater than zero, got {price}.")
    return float(price)


def require_positive_int(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field_name} must be an integer, got {type(value).__name__}.")
    if value <= 0:
        raise InvalidArgumentError(f"{field_name} must be greater than zero, got {value}.")
    return value


def require_non_negative_amount(value: float, field_name: str) -> float:
    """Returns ``value`` as a float if it is a real number of zero or more."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{field_name} must be a number, got {type(value).__name__}.")
    if not value >= 0:
        raise InvalidArgumentError(f"{field_name} cannot be negative, got {value}.")
    return float(value)
