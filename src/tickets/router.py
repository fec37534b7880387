from fastapi import APIRouter, Depends, HTTPException, status, Path

from src.tickets.dependencies import get_verification_service
from src.tickets.schemas import StatisticsSnapshot, TicketVerificationRequest, VerificationResult
from src.tickets.service import TicketVerificationService

router = APIRouter()

# Verification Endpoints
@router.get("/verify/{pnr_number}", response_model=VerificationResult)
async def verify_ticket(
    pnr_number: str = Path(..., min_length=1, max_length=50, description="PNR number to verify"),
    service: TicketVerificationService = Depends(get_verification_service)
):
    """Verify a bus, train or plane ticket by its PNR number"""

    if not pnr_number.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="PNR number is required"
        )

    return await service.verify_ticket(pnr_number)

@router.post("/verify", response_model=VerificationResult)
async def verify_ticket_by_request(
    request: TicketVerificationRequest,
    service: TicketVerificationService = Depends(get_verification_service)
):
    """Verify a ticket from a request body"""
    return await service.verify_ticket(request.pnr_number)

# Statistics Endpoints
@router.get("/statistics", response_model=StatisticsSnapshot)
async def get_ticket_statistics(
    service: TicketVerificationService = Depends(get_verification_service)
):
    """Get upcoming/past ticket counts for every transport mode"""
    return await service.get_statistics()
