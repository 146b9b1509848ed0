# app/rules/validator.py
from dataclasses import replace
from typing import Any, Optional, Union

from ..errors import ValidationError
from ..models import Amount, LineItem, PurchaseRecord

RETAILER_REQUIRED = "Retailer name is required"
TOTAL_REQUIRED = "Total amount is required"
TOTAL_INVALID = "Invalid total amount"
DATE_REQUIRED = "Purchase date is required"
TIME_REQUIRED = "Purchase time is required"
ITEMS_REQUIRED = "Receipt should have at least one item"
ITEM_DESCRIPTION_REQUIRED = "Item short description is required"
ITEM_PRICE_INVALID = "Invalid item price"

def parse_amount(text: Any) -> Optional[Amount]:
    """Parse a non-negative decimal string; None if it isn't one."""
    return Amount.parse(text)

def normalize_price(text: str) -> str:
    """
    Format a price with exactly two fractional digits: "6.5" -> "6.50".
    Idempotent. Raises ValidationError for text that isn't a valid price.
    """
    amount = parse_amount(text)
    if amount is None:
        raise ValidationError(ITEM_PRICE_INVALID)
    return str(amount)

def _validate_item(item: LineItem) -> LineItem:
    if not item.short_description:
        raise ValidationError(ITEM_DESCRIPTION_REQUIRED)
    amount = parse_amount(item.price)
    if amount is None:
        raise ValidationError(ITEM_PRICE_INVALID)
    # scoring uses the exact amount; only the text form is normalized
    return replace(item, price=str(amount), amount=amount)

def validate(record: Union[PurchaseRecord, dict]) -> PurchaseRecord:
    """
    Run the receipt checks in order and stop at the first failure.
    Returns a new record with parsed amounts and normalized prices,
    or raises ValidationError carrying the reason.
    """
    if isinstance(record, dict):
        record = PurchaseRecord.from_payload(record)

    if not record.retailer:
        raise ValidationError(RETAILER_REQUIRED)

    if record.total is None or record.total == "":
        raise ValidationError(TOTAL_REQUIRED)
    total_amount = parse_amount(record.total)
    if total_amount is None:
        raise ValidationError(TOTAL_INVALID)

    if not record.purchase_date:
        raise ValidationError(DATE_REQUIRED)
    if not record.purchase_time:
        raise ValidationError(TIME_REQUIRED)

    if not record.items:
        raise ValidationError(ITEMS_REQUIRED)
    items = tuple(_validate_item(it) for it in record.items)

    return replace(record, items=items, total_amount=total_amount)
