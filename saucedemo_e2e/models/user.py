# models/user.py
from dataclasses import dataclass
from typing import Tuple

from saucedemo_e2e.models.shop import CheckoutInfo

EXPECTED_RESULTS = ('success', 'failure')


@dataclass(frozen=True)
class UserCredentials:
    username: str
    password: str
    user_type: str
    expected_result: str
    description: str = ''

    @property
    def should_succeed(self) -> bool:
        return self.expected_result == 'success'


@dataclass(frozen=True)
class CheckoutCase:
    info: CheckoutInfo
    expected_error: str = ''


@dataclass(frozen=True)
class ShoppingScenario:
    name: str
    products: Tuple[str, ...]
    expected_subtotal: float
    checkout_info: CheckoutInfo
