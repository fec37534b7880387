"""Factories for ticket records used across the test suite."""

from datetime import date, datetime, time
from decimal import Decimal

from src.tickets.schemas import BusTicketRecord, PlaneTicketRecord, TicketProjection, TrainTicketRecord

# Fixed reference clock for deterministic tests
NOW = datetime(2026, 1, 15, 12, 0)

FUTURE_DATE = date(2026, 2, 1)
PAST_DATE = date(2026, 1, 1)


def _common_fields(pnr_number: str) -> dict:
    return {
        "id": 1,
        "pnr_number": pnr_number,
        "passenger_name": "Jane Traveller",
        "departure_date": FUTURE_DATE,
        "departure_time": time(10, 30),
        "seat_number": "12A",
        "ticket_price": Decimal("450.00"),
    }


def make_bus_ticket(**overrides) -> BusTicketRecord:
    fields = _common_fields("BUS123")
    fields.update(
        bus_operator="Green Bus",
        source_location="Bangkok",
        destination_location="Chiang Mai",
    )
    fields.update(overrides)
    return BusTicketRecord(**fields)


def make_train_ticket(**overrides) -> TrainTicketRecord:
    fields = _common_fields("TRN123")
    fields.update(
        train_number="9",
        train_name="Special Express",
        source_station="Krung Thep Aphiwat",
        destination_station="Chiang Mai",
        coach_number="5",
        ticket_class="Second Class",
    )
    fields.update(overrides)
    return TrainTicketRecord(**fields)


def make_plane_ticket(**overrides) -> PlaneTicketRecord:
    fields = _common_fields("PLN123")
    fields.update(
        flight_number="TG102",
        airline_name="Thai Airways",
        source_airport="BKK",
        destination_airport="CNX",
        ticket_class="Economy",
        baggage_allowance="20kg",
        gate_number="C4",
    )
    fields.update(overrides)
    return PlaneTicketRecord(**fields)


def make_projection(departure: datetime, ticket_id: int = 1) -> TicketProjection:
    return TicketProjection(id=ticket_id, departure_date=departure.date(), departure_time=departure.time())
