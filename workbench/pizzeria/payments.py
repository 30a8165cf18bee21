"""Ways a customer can pay: cash, credit card and bank transfer."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

_ACCOUNT_NUMBER = re.compile(r"[0-9]{10,20}")


class Payment(ABC):
    """A payment of an amount that may be processed or refunded."""

    def __init__(self, payment_id: int, amount: float) -> None:
        self.payment_id = payment_id
        self.amount = amount

    @abstractmethod
    def process_payment(self) -> None:
        """Carry out the payment and report the outcome."""

    @abstractmethod
    def refund_payment(self) -> None:
        """Return the payment and report the outcome."""

    @abstractmethod
    def was_successful(self) -> bool:
        """Return True when the payment can go through."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.payment_id!r}, {self.amount!r})"


class CashPayment(Payment):
    """Payment in cash; succeeds when enough cash was handed over."""

    def __init__(self, payment_id: int, amount: float, cash_received: float) -> None:
        super().__init__(payment_id, amount)
        self.cash_received = cash_received

    def process_payment(self) -> None:
        if self.was_successful():
            change = self.cash_received - self.amount
            print(f"Платеж успешно обработан. Сдача: {change:g} рублей.")
        else:
            print("Недостаточно наличных для оплаты.")

    def refund_payment(self) -> None:
        print(f"Возврат платежа в размере {self.amount:g} рублей успешно произведен.")

    def was_successful(self) -> bool:
        return self.cash_received >= self.amount


class CreditCardPayment(Payment):
    """Payment by card, drawn from the card's balance."""

    def __init__(
        self,
        payment_id: int,
        amount: float,
        card_number: str,
        expiry_date: str,
        balance: float,
    ) -> None:
        super().__init__(payment_id, amount)
        self.card_number = card_number
        self.expiry_date = expiry_date
        self.balance = balance

    def _card_is_valid(self) -> bool:
        return len(self.card_number) == 16 and len(self.expiry_date) == 5

    def process_payment(self) -> None:
        if self.was_successful():
            print(f"Платеж на сумму {self.amount:g} рублей успешно обработан.")
            self.balance -= self.amount
        else:
            print("Платеж отклонен.")

    def refund_payment(self) -> None:
        if self._card_is_valid():
            print(f"Возврат платежа на сумму {self.amount:g} рублей успешно произведен.")
            self.balance += self.amount
        else:
            print("Возврат отклонен из-за ошибки валидации карты.")

    def was_successful(self) -> bool:
        return self._card_is_valid() and self.balance >= self.amount


class BankTransferPayment(Payment):
    """Payment by transfer to a bank account of 10 to 20 digits."""

    def __init__(self, payment_id: int, amount: float, bank_account_number: str) -> None:
        super().__init__(payment_id, amount)
        self.bank_account_number = bank_account_number

    def process_payment(self) -> None:
        if self.was_successful():
            print(
                f"Платеж на сумму {self.amount:g} рублей успешно переведен "
                f"на счет {self.bank_account_number}."
            )
        else:
            print("Ошибка: недействительный банковский номер счета.")

    def refund_payment(self) -> None:
        if self.was_successful():
            print(
                f"Возврат платежа на сумму {self.amount:g} рублей успешно произведен "
                f"на счет {self.bank_account_number}."
            )
        else:
            print("Ошибка: недействительный банковский номер счета.")

    def was_successful(self) -> bool:
        return _ACCOUNT_NUMBER.fullmatch(self.bank_account_number) is not None