# app/routes/receipts.py
from fastapi import APIRouter, Depends, Request

from ..schemas import ReceiptInput, ProcessResponse, PointsResponse, ErrorResponse
from ..services.scoring import process_submission
from ..vault.repository import ReceiptStore
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store

@router.post("/process", response_model=ProcessResponse,
             responses={400: {"model": ErrorResponse}})
def process_receipt(payload: ReceiptInput, store: ReceiptStore = Depends(get_store)):
    points = process_submission(payload.to_record())
    receipt_id = store.add(points)
    logger.info("receipt %s stored with %s points", receipt_id, points)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse,
            responses={404: {"model": ErrorResponse}})
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return PointsResponse(points=store.get(receipt_id))
