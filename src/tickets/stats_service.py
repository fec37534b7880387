import logging
from datetime import datetime, tzinfo
from typing import Iterable, Mapping, Optional

from src.tickets.adapters import TicketStoreAdapter
from src.tickets.fanout import gather_settled
from src.tickets.schemas import StatisticsSnapshot, TicketProjection, TicketStats, TransportMode
from src.tickets.validation import as_naive, departure_datetime, ticket_timezone

logger = logging.getLogger(__name__)

def partition_departures(
    tickets: Iterable[TicketProjection],
    now: datetime,
    zone: Optional[tzinfo] = None
) -> TicketStats:
    """Count tickets departing strictly after `now` as upcoming, the rest as past"""
    reference = as_naive(now, zone or ticket_timezone())
    total = upcoming = past = 0

    for ticket in tickets:
        total += 1
        departure = departure_datetime(ticket.departure_date, ticket.departure_time)
        if departure is not None and departure > reference:
            upcoming += 1
        else:
            past += 1

    return TicketStats(total=total, upcoming=upcoming, past=past)

class TicketStatisticsAggregator:
    """Per-mode and overall upcoming/past ticket counts"""

    def __init__(
        self,
        adapters: Mapping[TransportMode, TicketStoreAdapter],
        zone: Optional[tzinfo] = None
    ):
        self.adapters = dict(adapters)
        self.zone = zone

    async def summarize(self, now: datetime) -> StatisticsSnapshot:
        outcomes = await gather_settled({
            mode: adapter.list_projection for mode, adapter in self.adapters.items()
        })

        per_mode = {}
        for mode in TransportMode:
            outcome = outcomes.get(mode)
            if outcome is None:
                per_mode[mode] = TicketStats()
            elif not outcome.succeeded:
                logger.error("Could not load %s tickets for statistics: %s", mode.value, outcome.error)
                per_mode[mode] = TicketStats()
            else:
                per_mode[mode] = partition_departures(outcome.value or [], now, self.zone)

        total = TicketStats(
            total=sum(stats.total for stats in per_mode.values()),
            upcoming=sum(stats.upcoming for stats in per_mode.values()),
            past=sum(stats.past for stats in per_mode.values())
        )

        return StatisticsSnapshot(
            bus=per_mode[TransportMode.BUS],
            train=per_mode[TransportMode.TRAIN],
            plane=per_mode[TransportMode.PLANE],
            total=total,
            generated_at=now
        )
