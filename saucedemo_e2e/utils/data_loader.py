# utils/data_loader.py
import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from saucedemo_e2e.core.exceptions import DataLoadFailed
from saucedemo_e2e.models.shop import CheckoutInfo
from saucedemo_e2e.models.user import EXPECTED_RESULTS, CheckoutCase, ShoppingScenario, UserCredentials

USERS_FILE = 'users.csv'
CHECKOUT_FILE = 'checkout_data.json'
USER_COLUMNS = ('username', 'password', 'userType', 'expectedResult', 'description')


def _checkout_info(record: Dict[str, Any]) -> CheckoutInfo:
    return CheckoutInfo(
        first_name=str(record.get('firstName', '')),
        last_name=str(record.get('lastName', '')),
        postal_code=str(record.get('postalCode', '')),
    )


class TestDataLoader:
    """Reads the CSV/JSON fixtures under the data directory into records."""

    __test__ = False  # not a pytest test class

    def __init__(self, data_dir: Union[str, Path] = 'test-data'):
        self.data_dir = Path(data_dir)
        self.logger = logging.getLogger(__name__)

    def read_csv_file(self, filename: str) -> List[Dict[str, str]]:
        path = self.data_dir / filename
        try:
            with path.open(newline='', encoding='utf-8-sig') as handle:
                reader = csv.DictReader(handle)
                rows = []
                for row in reader:
                    if not any((value or '').strip() for value in row.values()):
                        continue
                    if None in row:
                        raise DataLoadFailed(filename, f"row {reader.line_num} has extra columns")
                    rows.append({key.strip(): (value or '').strip() for key, value in row.items()})
        except OSError as e:
            raise DataLoadFailed(filename, str(e)) from e
        except csv.Error as e:
            raise DataLoadFailed(filename, str(e)) from e
        self.logger.info(f"Loaded {len(rows)} rows from {path}")
        return rows

    def read_json_file(self, filename: str) -> Any:
        path = self.data_dir / filename
        try:
            with path.open(encoding='utf-8') as handle:
                return json.load(handle)
        except OSError as e:
            raise DataLoadFailed(filename, str(e)) from e
        except json.JSONDecodeError as e:
            raise DataLoadFailed(filename, f"invalid JSON: {e}") from e

    # Users

    def get_user_test_data(self) -> List[UserCredentials]:
        rows = self.read_csv_file(USERS_FILE)
        if rows:
            missing = [c for c in USER_COLUMNS if c not in rows[0]]
            if missing:
                raise DataLoadFailed(USERS_FILE, f"missing columns {missing}")
        users = []
        for row in rows:
            if row['expectedResult'] not in EXPECTED_RESULTS:
                raise DataLoadFailed(USERS_FILE, f"unknown expectedResult {row['expectedResult']!r}")
            users.append(UserCredentials(
                username=row['username'],
                password=row['password'],
                user_type=row['userType'],
                expected_result=row['expectedResult'],
                description=row['description'],
            ))
        return users

    def get_user_by_username(self, username: str) -> Optional[UserCredentials]:
        for user in self.get_user_test_data():
            if user.username == username:
                return user
        return None

    def get_standard_user(self) -> UserCredentials:
        user = self.get_user_by_username('standard_user')
        if user is None:
            raise DataLoadFailed(USERS_FILE, 'standard_user not found')
        return user

    def get_users_by_expected_result(self, expected_result: str) -> List[UserCredentials]:
        return [u for u in self.get_user_test_data() if u.expected_result == expected_result]

    # Checkout

    def _checkout_section(self, key: str) -> Any:
        data = self.read_json_file(CHECKOUT_FILE)
        if not isinstance(data, dict) or key not in data:
            raise DataLoadFailed(CHECKOUT_FILE, f"missing section {key!r}")
        return data[key]

    def get_valid_checkout_data(self) -> List[CheckoutInfo]:
        section = self._checkout_section('checkoutInfo')
        return [_checkout_info(r) for r in section.get('valid', [])]

    def get_invalid_checkout_data(self) -> List[CheckoutCase]:
        section = self._checkout_section('checkoutInfo')
        return [
            CheckoutCase(info=_checkout_info(r), expected_error=r.get('expectedError', ''))
            for r in section.get('invalid', [])
        ]

    def get_shopping_scenarios(self) -> List[ShoppingScenario]:
        scenarios = []
        for record in self._checkout_section('shoppingScenarios'):
            try:
                scenarios.append(ShoppingScenario(
                    name=record['name'],
                    products=tuple(record['products']),
                    expected_subtotal=float(record['expectedSubtotal']),
                    checkout_info=_checkout_info(record['checkoutInfo']),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise DataLoadFailed(CHECKOUT_FILE, f"bad scenario {record!r}: {e}") from e
        return scenarios
