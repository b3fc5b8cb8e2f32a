# src/payment_domain/domain/interfaces/payment_handle.py
"""Payment handle interface consumed by machine purchases."""
from abc import ABC, abstractmethod


class IPaymentHandle(ABC):

    @abstractmethod
    def current_balance(self) -> float:
        """Returns the amount currently available on the instrument."""
        pass

    @abstractmethod
    def debit(self, credential: str, amount: float) -> None:
        """Takes ``amount`` from the instrument, raising an ApplicationError if it is refused."""
        pass
