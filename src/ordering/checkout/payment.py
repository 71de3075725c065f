"""Payment descriptor and its format check.

Only the shape of the card data is checked; there is no gateway behind it.
"""

import re

from pydantic import BaseModel

from shared.errors import InvalidPayment

EXPIRY_PATTERN = re.compile(r"^\d{2}/\d{2}$")


class PaymentDescriptor(BaseModel):
    card_number: str
    expiry: str
    cvv: str = ""


def validate_payment(payment: PaymentDescriptor, min_card_number_length: int = 13) -> None:
    if len(payment.card_number) < min_card_number_length:
        raise InvalidPayment("card_number", "Invalid credit card number")
    if not EXPIRY_PATTERN.match(payment.expiry):
        raise InvalidPayment("expiry", "Invalid expiry date format (MM/YY)")
