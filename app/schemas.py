
from pydantic import BaseModel
from typing import Optional, List

from .models import PurchaseRecord

# Wire models keep the camelCase JSON names. Missing or null fields fall
# through as empty values so the validator reports its own reason.
class ItemInput(BaseModel):
    shortDescription: Optional[str] = None
    price: Optional[str] = None

class ReceiptInput(BaseModel):
    retailer: Optional[str] = None
    total: Optional[str] = None
    items: Optional[List[ItemInput]] = None
    purchaseDate: Optional[str] = None
    purchaseTime: Optional[str] = None

    def to_record(self) -> PurchaseRecord:
        return PurchaseRecord.from_payload(self.model_dump())

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

class ErrorResponse(BaseModel):
    error: str
