"""
Reward points for a receipt.

Each rule is independent and additive:

1. Retailer name: +1 for every ASCII letter or digit.
2. Total: +50 if it is a round dollar amount, +25 if it is a multiple of 0.25.
3. Items: +5 for every two items, and for every item whose trimmed description
   length is a multiple of 3, the price times 0.2 rounded up.
4. Purchase date and time: +6 if the day is odd, +10 if the purchase falls
   after 14:01 and before 16:00.
"""
import math
import string
from fractions import Fraction
from typing import Dict

from src.model.ReceiptModel import Receipt

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# Fraction keeps the arithmetic exact for totals of any size
DESCRIPTION_MULTIPLIER = Fraction(1, 5)
QUARTER = Fraction(1, 4)


def retailer_points(receipt: Receipt) -> int:
    return sum(1 for char in receipt.retailer if char in ALPHANUMERIC)


def round_dollar_points(receipt: Receipt) -> int:
    return ROUND_DOLLAR_POINTS if Fraction(receipt.total) % 1 == 0 else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    return QUARTER_MULTIPLE_POINTS if Fraction(receipt.total) % QUARTER == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % 3 == 0:
            points += math.ceil(Fraction(item.price) * DESCRIPTION_MULTIPLIER)
    return points


def odd_day_points(receipt: Receipt) -> int:
    if receipt.purchase_date is None:
        return 0
    return ODD_DAY_POINTS if receipt.purchase_date.day % 2 == 1 else 0


def is_purchase_after_two_before_four(receipt: Receipt) -> bool:
    # 14:00 and 14:01 do not count
    purchase_time = receipt.purchase_time
    if purchase_time is None:
        return False
    hour, minute = purchase_time.hour, purchase_time.minute
    return (hour > 14 or (hour == 14 and minute > 1)) and hour < 16


def afternoon_points(receipt: Receipt) -> int:
    return AFTERNOON_POINTS if is_purchase_after_two_before_four(receipt) else 0


RULES = (
    ("retailer", retailer_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("descriptions", description_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
)


def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    return {name: rule(receipt) for name, rule in RULES}


def score(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
