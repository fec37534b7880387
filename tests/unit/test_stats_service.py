"""Tests for TicketStatisticsAggregator"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.tickets.schemas import TicketProjection, TicketStats, TransportMode
from src.tickets.stats_service import TicketStatisticsAggregator, partition_departures
from tests.factories import NOW, make_projection
from tests.mocks import FakeTicketStore, make_stores, store_error


def test_partition_counts_upcoming_and_past():
    projections = [
        make_projection(NOW + timedelta(days=1), 1),
        make_projection(NOW - timedelta(days=1), 2),
        make_projection(NOW + timedelta(minutes=5), 3),
    ]

    stats = partition_departures(projections, NOW)

    assert stats == TicketStats(total=3, upcoming=2, past=1)


def test_partition_departure_at_now_is_past():
    stats = partition_departures([make_projection(NOW)], NOW)

    assert stats == TicketStats(total=1, upcoming=0, past=1)


def test_partition_missing_departure_counts_as_past():
    """Test rows without a usable departure still count toward the total"""
    stats = partition_departures([TicketProjection(id=1, departure_date=NOW.date())], NOW)

    assert stats == TicketStats(total=1, upcoming=0, past=1)


def test_partition_reads_aware_clock_in_given_zone():
    """Test 15:00 departures are upcoming at 12:00 UTC but past in Bangkok (19:00)"""
    aware_now = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
    projections = [make_projection(datetime(2026, 1, 15, 15, 0))]

    assert partition_departures(projections, aware_now, ZoneInfo("UTC")).upcoming == 1
    assert partition_departures(projections, aware_now, ZoneInfo("Asia/Bangkok")).past == 1


@pytest.mark.asyncio
async def test_summarize_per_mode_and_total():
    """Test 2 bus (1 upcoming, 1 past), 0 train and 1 upcoming plane ticket"""
    # Arrange
    stores = make_stores(
        bus=FakeTicketStore(TransportMode.BUS, projections=[
            make_projection(NOW + timedelta(days=2), 1),
            make_projection(NOW - timedelta(days=2), 2),
        ]),
        plane=FakeTicketStore(TransportMode.PLANE, projections=[
            make_projection(NOW + timedelta(hours=3), 1),
        ]),
    )

    # Act
    snapshot = await TicketStatisticsAggregator(stores).summarize(NOW)

    # Assert
    assert snapshot.bus == TicketStats(total=2, upcoming=1, past=1)
    assert snapshot.train == TicketStats(total=0, upcoming=0, past=0)
    assert snapshot.plane == TicketStats(total=1, upcoming=1, past=0)
    assert snapshot.total == TicketStats(total=3, upcoming=2, past=1)
    assert snapshot.generated_at == NOW


@pytest.mark.asyncio
async def test_summarize_failed_store_degrades_to_zero():
    """Test one failing store does not stop the others being counted"""
    stores = make_stores(
        bus=FakeTicketStore(TransportMode.BUS, error=store_error(TransportMode.BUS)),
        train=FakeTicketStore(TransportMode.TRAIN, projections=[make_projection(NOW + timedelta(days=1))]),
    )

    snapshot = await TicketStatisticsAggregator(stores).summarize(NOW)

    assert snapshot.bus == TicketStats()
    assert snapshot.train == TicketStats(total=1, upcoming=1, past=0)
    assert snapshot.total.total == 1


@pytest.mark.asyncio
async def test_summarize_queries_each_store_once():
    stores = make_stores()

    await TicketStatisticsAggregator(stores).summarize(NOW)

    assert all(store.projection_calls == 1 for store in stores.values())
