import logging
from typing import Mapping

from pydantic import TypeAdapter, ValidationError

from src.tickets.adapters import TicketStoreAdapter, TicketNotFoundError
from src.tickets.fanout import SettledOutcome, gather_settled
from src.tickets.schemas import LookupOutcome, LookupStatus, TicketRecord, TransportMode

logger = logging.getLogger(__name__)

ticket_record_adapter = TypeAdapter(TicketRecord)

def reconcile_lookup(outcomes: Mapping[TransportMode, SettledOutcome]) -> LookupOutcome:
    """Merge per-source lookup outcomes into a single verdict.

    A single match wins regardless of failures elsewhere. With no match, any
    failure other than a clean not-found turns the verdict into FAILED.
    More than one match is reported as AMBIGUOUS rather than picking one.
    A source answering with something that is not a ticket record counts
    as a failure of that source.
    """
    matches = []
    failures = []

    # Iterate in enum order so the result does not depend on mapping order
    for mode in TransportMode:
        outcome = outcomes.get(mode)
        if outcome is None:
            continue
        if outcome.succeeded:
            if outcome.value is None:
                continue
            try:
                matches.append((mode, ticket_record_adapter.validate_python(outcome.value)))
            except ValidationError as e:
                failures.append((mode, e))
        elif not isinstance(outcome.error, TicketNotFoundError):
            failures.append((mode, outcome.error))

    failed_types = [mode for mode, _ in failures]

    if len(matches) == 1:
        mode, ticket = matches[0]
        return LookupOutcome(
            status=LookupStatus.FOUND,
            ticket_type=mode,
            ticket=ticket,
            matched_types=[mode],
            failed_types=failed_types
        )

    if len(matches) > 1:
        return LookupOutcome(
            status=LookupStatus.AMBIGUOUS,
            matched_types=[mode for mode, _ in matches],
            failed_types=failed_types
        )

    if failures:
        return LookupOutcome(
            status=LookupStatus.FAILED,
            failed_types=failed_types,
            error="; ".join(str(error) for _, error in failures)
        )

    return LookupOutcome(status=LookupStatus.NOT_FOUND)

class MultiSourceLookup:
    """Find a ticket by PNR across every transport mode's record source"""

    def __init__(self, adapters: Mapping[TransportMode, TicketStoreAdapter]):
        self.adapters = dict(adapters)

    async def locate(self, pnr_number: str) -> LookupOutcome:
        """Query all sources concurrently and reconcile their answers"""
        pnr_number = (pnr_number or "").strip()
        if not pnr_number:
            return LookupOutcome(status=LookupStatus.NOT_FOUND)

        outcomes = await gather_settled({
            mode: (lambda adapter=adapter: adapter.find_by_reference(pnr_number))
            for mode, adapter in self.adapters.items()
        })

        for mode, outcome in outcomes.items():
            if not outcome.succeeded and not isinstance(outcome.error, TicketNotFoundError):
                logger.error("Lookup of PNR %s failed in %s tickets: %s", pnr_number, mode.value, outcome.error)

        result = reconcile_lookup(outcomes)

        if result.status == LookupStatus.AMBIGUOUS:
            logger.error(
                "PNR %s matches tickets of several types: %s",
                pnr_number, ", ".join(mode.value for mode in result.matched_types)
            )
        else:
            logger.debug("Lookup of PNR %s resolved to %s", pnr_number, result.status.value)

        return result
