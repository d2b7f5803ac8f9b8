# utils/parsing.py
import re

_NON_AMOUNT = re.compile(r'[^0-9.]')


def parse_price(text: str) -> float:
    """'$29.99' -> 29.99. Raises ValueError on anything else."""
    cleaned = text.strip().lstrip('$').replace(',', '')
    return float(cleaned)


def parse_amount(text: str) -> float:
    """Label text such as 'Item total: $39.98' -> 39.98."""
    cleaned = _NON_AMOUNT.sub('', text)
    # a label may end in a period; keep only the numeric body
    cleaned = cleaned.strip('.')
    return float(cleaned)


def parse_quantity(text: str) -> int:
    return int(text.strip())
