from typing import Dict

from fastapi import Depends

from src.database import SessionLocal
from src.tickets.adapters import TicketStoreAdapter, build_sqlalchemy_adapters
from src.tickets.schemas import TransportMode
from src.tickets.service import TicketVerificationService

def get_ticket_adapters() -> Dict[TransportMode, TicketStoreAdapter]:
    """Ticket stores for every transport mode"""
    return build_sqlalchemy_adapters(SessionLocal)

def get_verification_service(
    adapters: Dict[TransportMode, TicketStoreAdapter] = Depends(get_ticket_adapters)
) -> TicketVerificationService:
    return TicketVerificationService(adapters)
