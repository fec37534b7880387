import logging
from datetime import datetime, tzinfo
from typing import Callable, Mapping, Optional

from src.tickets.adapters import TicketStoreAdapter
from src.tickets.lookup import MultiSourceLookup
from src.tickets.schemas import LookupStatus, StatisticsSnapshot, TransportMode, VerificationResult
from src.tickets.stats_service import TicketStatisticsAggregator
from src.tickets.validation import TicketValidator, VALID_MESSAGE, INVALID_MESSAGE

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Ticket not found"
SYSTEM_ERROR_MESSAGE = "Verification failed due to system error"
AMBIGUOUS_MESSAGE = "Ticket reference matches multiple ticket types"

class TicketVerificationService:
    """Verify tickets by PNR and report ticket statistics across bus, train and plane"""

    def __init__(
        self,
        adapters: Mapping[TransportMode, TicketStoreAdapter],
        clock: Callable[[], datetime] = datetime.now,
        zone: Optional[tzinfo] = None
    ):
        self.clock = clock
        self.zone = zone
        self.lookup = MultiSourceLookup(adapters)
        self.aggregator = TicketStatisticsAggregator(adapters, zone)

    async def verify_ticket(self, pnr_number: str, now: Optional[datetime] = None) -> VerificationResult:
        """Locate a ticket by PNR and validate it"""
        now = now or self.clock()
        pnr_number = (pnr_number or "").strip()
        logger.info("Starting ticket verification for PNR %s", pnr_number)

        outcome = await self.lookup.locate(pnr_number)

        if outcome.status == LookupStatus.FAILED:
            return VerificationResult(
                is_valid=False,
                message=SYSTEM_ERROR_MESSAGE,
                pnr_number=pnr_number,
                error=outcome.error,
                verified_at=now
            )

        if outcome.status == LookupStatus.AMBIGUOUS:
            return VerificationResult(
                is_valid=False,
                message=AMBIGUOUS_MESSAGE,
                pnr_number=pnr_number,
                error=f"Found in: {', '.join(mode.value for mode in outcome.matched_types)}",
                verified_at=now
            )

        if outcome.status == LookupStatus.NOT_FOUND:
            return VerificationResult(
                is_valid=False,
                message=NOT_FOUND_MESSAGE,
                pnr_number=pnr_number,
                verified_at=now
            )

        validation = TicketValidator.validate(outcome.ticket, outcome.ticket_type, now, self.zone)
        if not validation.is_valid:
            logger.info("PNR %s failed validation: %s", pnr_number, "; ".join(validation.errors))

        return VerificationResult(
            is_valid=validation.is_valid,
            message=VALID_MESSAGE if validation.is_valid else INVALID_MESSAGE,
            pnr_number=pnr_number,
            ticket_type=outcome.ticket_type,
            ticket=outcome.ticket if validation.is_valid else None,
            validation_errors=validation.errors,
            verified_at=now
        )

    async def get_statistics(self, now: Optional[datetime] = None) -> StatisticsSnapshot:
        """Count upcoming and past tickets for every transport mode"""
        now = now or self.clock()
        snapshot = await self.aggregator.summarize(now)
        logger.debug("Ticket statistics: %s", snapshot.total)
        return snapshot
