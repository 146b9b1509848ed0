# app/rules/ruleset.py
import re
from typing import Callable, List, Optional, Tuple

from ..models import Amount, LineItem, PurchaseRecord
from .validator import parse_amount

# -----------------------------
# Tunables
# -----------------------------
WEIGHTS = {
    "round_dollar_total": 50,
    "quarter_multiple_total": 25,
    "item_pair": 5,
    "odd_purchase_day": 6,
    "afternoon_purchase": 10,
}

DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = (1, 5)   # 0.2 as num/den
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16   # exclusive

_INT_RE = re.compile(r"[+-]?[0-9]+")

RuleHit = Tuple[bool, int, str]
Rule = Callable[[PurchaseRecord], RuleHit]

# -----------------------------
# Helpers
# -----------------------------
def _parse_int(text: str) -> Optional[int]:
    if not _INT_RE.fullmatch(text or ""):
        return None
    try:
        return int(text)
    except ValueError:
        # past the interpreter's int conversion digit limit
        return None

def _total(record: PurchaseRecord) -> Optional[Amount]:
    if record.total_amount is not None:
        return record.total_amount
    return parse_amount(record.total)

def _price(item: LineItem) -> Optional[Amount]:
    if item.amount is not None:
        return item.amount
    return parse_amount(item.price)

def alphanumeric_count(text: str) -> int:
    return sum(1 for ch in text if ch.isascii() and ch.isalnum())

# -----------------------------
# Rules: each returns (hit, points, reason)
# -----------------------------
def rule_retailer_alphanumeric(record: PurchaseRecord) -> RuleHit:
    n = alphanumeric_count(record.retailer)
    return n > 0, n, "retailer_alphanumeric"

def rule_round_dollar_total(record: PurchaseRecord) -> RuleHit:
    total = _total(record)
    hit = total is not None and total.is_whole()
    return hit, WEIGHTS["round_dollar_total"], "round_dollar_total"

def rule_quarter_multiple_total(record: PurchaseRecord) -> RuleHit:
    total = _total(record)
    hit = total is not None and total.is_multiple_of(25, scale=2)
    return hit, WEIGHTS["quarter_multiple_total"], "quarter_multiple_total"

def rule_item_pairs(record: PurchaseRecord) -> RuleHit:
    pairs = len(record.items) // 2
    return pairs > 0, pairs * WEIGHTS["item_pair"], "item_pairs"

def rule_description_length(record: PurchaseRecord) -> RuleHit:
    points = 0
    for item in record.items:
        length = len(item.short_description.strip())
        if length == 0 or length % DESCRIPTION_LENGTH_FACTOR:
            continue
        price = _price(item)
        if price is not None:
            points += price.ceil_times(*DESCRIPTION_PRICE_MULTIPLIER)
    return points > 0, points, "description_length"

def rule_odd_purchase_day(record: PurchaseRecord) -> RuleHit:
    parts = record.purchase_date.split("-")
    day = _parse_int(parts[2]) if len(parts) >= 3 else None
    hit = day is not None and day % 2 == 1
    return hit, WEIGHTS["odd_purchase_day"], "odd_purchase_day"

def rule_afternoon_purchase(record: PurchaseRecord) -> RuleHit:
    hour = _parse_int(record.purchase_time.split(":")[0])
    hit = hour is not None and AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR
    return hit, WEIGHTS["afternoon_purchase"], "afternoon_purchase"

DEFAULT_RULES: List[Rule] = [
    rule_retailer_alphanumeric,
    rule_round_dollar_total,
    rule_quarter_multiple_total,
    rule_item_pairs,
    rule_description_length,
    rule_odd_purchase_day,
    rule_afternoon_purchase,
]
