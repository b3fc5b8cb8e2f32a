"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InvalidArgumentError(ApplicationError, ValueError):
    """Raised when an argument is missing, empty, of the wrong type or out of range."""

    def __init__(self, message: str = "Invalid argument", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class InvariantViolationError(ApplicationError, ValueError):
    """Raised when an operation would leave an entity in an inconsistent state."""

    def __init__(self, message: str = "Invariant violated", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class InvalidIdentifierError(InvariantViolationError):
    """Raised for a malformed UPC or one whose check digit does not match."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Invalid identifier '{identifier}': {reason}")
        self.identifier = identifier
        self.reason = reason


class NotFoundError(ApplicationError, LookupError):
    """Raised when a looked-up entity is not present."""

    def __init__(self, message: str = "Not found", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class SlotNotFoundError(NotFoundError):
    """Raised when a slot id does not exist in a machine grid."""

    def __init__(self, slot_id: str, machine_id: str | None = None) -> None:
        message = f"Slot '{slot_id}' not found"
        if machine_id:
            message += f" in machine '{machine_id}'"
        super().__init__(message)
        self.slot_id = slot_id
        self.machine_id = machine_id


class EmptyContainerError(ApplicationError):
    """Raised when an operation needs contents that are not there."""


class EmptySlotError(EmptyContainerError):
    """Raised when reading from or removing out of an empty slot."""

    def __init__(self, slot_id: str) -> None:
        super().__init__(f"Slot '{slot_id}' is empty")
        self.slot_id = slot_id


class EmptyBundleError(EmptyContainerError):
    """Raised when a bundle with no members is queried or updated."""

    def __init__(self, bundle_identifier: str) -> None:
        super().__init__(f"Bundle '{bundle_identifier}' has no items")
        self.bundle_identifier = bundle_identifier


class InsufficientFundsError(ApplicationError):
    """Raised when a payment instrument cannot cover a price."""

    def __init__(self, balance: float, amount: float) -> None:
        super().__init__(f"Insufficient funds: balance {balance:.2f} is below {amount:.2f}")
        self.balance = balance
        self.amount = amount


class PaymentError(ApplicationError):
    """Exception raised when a payment instrument rejects or fails a debit."""

    def __init__(
        self,
        message: str = "Payment failed",
        original_exception: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.status_code = status_code
        self.message = f"Payment Error: {message}"
        if status_code:
            self.message += f" (Status Code: {status_code})"
