from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, List

# plain decimal notation, ASCII digits only: "12", "12.5", ".5", "12."
_DECIMAL_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?")

# longer amounts are rejected; points are serialized as JSON integers
MAX_AMOUNT_DIGITS = 1000

# ----------------------------
# Money
# ----------------------------
@dataclass(frozen=True)
class Amount:
    """Exact non-negative fixed-point value, units / 10**scale.

    Parsing drops trailing fractional zeros, so equal values compare equal.
    """
    units: int
    scale: int = 0

    @classmethod
    def parse(cls, text: Any) -> Optional["Amount"]:
        if not isinstance(text, str):
            return None
        m = _DECIMAL_RE.fullmatch(text)
        if not m:
            return None
        whole, frac = m.group(1), (m.group(2) or "").rstrip("0")
        digits = whole + frac
        if not (whole or m.group(2)) or len(digits) > MAX_AMOUNT_DIGITS:
            return None
        return cls(units=int(digits or "0"), scale=len(frac))

    @property
    def denominator(self) -> int:
        return 10 ** self.scale

    def is_whole(self) -> bool:
        return self.units % self.denominator == 0

    def is_multiple_of(self, units: int, scale: int = 0) -> bool:
        # self / (units / 10**scale) is an integer
        return (self.units * 10 ** scale) % (units * self.denominator) == 0

    def ceil_times(self, num: int, den: int) -> int:
        """ceil(self * num / den) in integer arithmetic."""
        return -(-(self.units * num) // (den * self.denominator))

    def cents(self) -> int:
        """Value in cents, rounded half up."""
        return (self.units * 200 + self.denominator) // (2 * self.denominator)

    def __str__(self) -> str:
        c = self.cents()
        return f"{c // 100}.{c % 100:02d}"

# ----------------------------
# Line items
# ----------------------------
@dataclass(frozen=True)
class LineItem:
    short_description: str
    price: str                        # text as submitted; "x.xx" once validated
    amount: Optional[Amount] = None   # parsed price, set by the validator

# ----------------------------
# Purchase record (one receipt)
# ----------------------------
def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""

def _amount_text(value: Any) -> Any:
    # non-string amounts are kept so they fail parsing with the field's reason
    return "" if value is None else value

@dataclass(frozen=True)
class PurchaseRecord:
    retailer: str
    total: str
    purchase_date: str
    purchase_time: str
    items: Tuple[LineItem, ...] = ()
    total_amount: Optional[Amount] = None  # parsed total, set by the validator

    @classmethod
    def from_payload(cls, payload: dict) -> "PurchaseRecord":
        """
        Build an unvalidated record from the JSON field names.
        Missing, null or non-string text fields become "", a non-list `items`
        becomes empty and a non-object item becomes a blank item.
        """
        raw_items = payload.get("items")
        if not isinstance(raw_items, (list, tuple)):
            raw_items = []
        items = tuple(
            LineItem(
                short_description=_text(it.get("shortDescription")),
                price=_amount_text(it.get("price")),
            ) if isinstance(it, dict) else LineItem("", "")
            for it in raw_items
        )
        return cls(
            retailer=_text(payload.get("retailer")),
            total=_amount_text(payload.get("total")),
            purchase_date=_text(payload.get("purchaseDate")),
            purchase_time=_text(payload.get("purchaseTime")),
            items=items,
        )

# ----------------------------
# Scoring output
# ----------------------------
@dataclass
class ScoreResult:
    points: int
    reasons: List[str] = field(default_factory=list)
