from sqlalchemy import Column, BigInteger, Integer, String, DateTime, Date, Time, Numeric
from sqlalchemy.sql import func
from src.database import Base

# ================================
# Shared Ticket Columns
# ================================
class TicketColumnsMixin:
    """Columns present on every ticket table"""

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    pnr_number = Column(String(50), unique=True, nullable=False, index=True)
    passenger_name = Column(String(255))
    departure_date = Column(Date)
    departure_time = Column(Time)
    seat_number = Column(String(20))
    ticket_price = Column(Numeric(10, 2))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

# ================================
# Bus Tickets
# ================================
class BusTicket(TicketColumnsMixin, Base):
    __tablename__ = "bus_tickets"

    bus_operator = Column(String(255))
    source_location = Column(String(255))
    destination_location = Column(String(255))

# ================================
# Train Tickets
# ================================
class TrainTicket(TicketColumnsMixin, Base):
    __tablename__ = "train_tickets"

    train_number = Column(String(20))
    train_name = Column(String(255))
    source_station = Column(String(255))
    destination_station = Column(String(255))
    coach_number = Column(String(20))
    ticket_class = Column(String(50))

# ================================
# Plane Tickets
# ================================
class PlaneTicket(TicketColumnsMixin, Base):
    __tablename__ = "plane_tickets"

    flight_number = Column(String(20))
    airline_name = Column(String(255))
    source_airport = Column(String(255))
    destination_airport = Column(String(255))
    ticket_class = Column(String(50))
    baggage_allowance = Column(String(50))
    gate_number = Column(String(20))
