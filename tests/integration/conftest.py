"""Fixtures backed by a throwaway SQLite database."""

from datetime import time
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base
from src.models import BusTicket, PlaneTicket
from tests.factories import FUTURE_DATE, PAST_DATE


@pytest.fixture
def engine(tmp_path):
    """File-based SQLite so worker threads each get their own connection"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'tickets.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def seeded_session_factory(session_factory):
    """Database with 2 bus tickets (1 upcoming, 1 past), no train tickets and 1 upcoming plane ticket"""
    db = session_factory()
    db.add_all([
        BusTicket(
            pnr_number="BUS1", passenger_name="Somchai Wong",
            departure_date=FUTURE_DATE, departure_time=time(8, 30),
            seat_number="12A", ticket_price=Decimal("450.00"),
            bus_operator="Green Bus", source_location="Bangkok", destination_location="Chiang Mai",
        ),
        BusTicket(
            pnr_number="BUS2", passenger_name="Malee Srisuk",
            departure_date=PAST_DATE, departure_time=time(21, 0),
            seat_number="3C", ticket_price=Decimal("320.00"),
            bus_operator="Nakhonchai Air", source_location="Bangkok", destination_location="Khon Kaen",
        ),
        PlaneTicket(
            pnr_number="PLN1", passenger_name="Niran Thongchai",
            departure_date=FUTURE_DATE, departure_time=time(10, 15),
            seat_number="14C", ticket_price=Decimal("2890.00"),
            flight_number="TG102", airline_name="Thai Airways",
            source_airport="BKK", destination_airport="CNX",
            ticket_class="Economy", baggage_allowance="20kg", gate_number="C4",
        ),
    ])
    db.commit()
    db.close()
    return session_factory
