from pydantic import BaseModel, Field, field_validator
from typing import Annotated, List, Optional, Literal, Union
from datetime import datetime, date, time
from decimal import Decimal
from enum import Enum

class TransportMode(str, Enum):
    """Transport mode enumeration, one record source per mode"""
    BUS = "bus"
    TRAIN = "train"
    PLANE = "plane"

class LookupStatus(str, Enum):
    """Reconciled outcome of a multi-source reference lookup"""
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    AMBIGUOUS = "ambiguous"

# Ticket Records
class TicketRecordBase(BaseModel):
    """Fields shared by every ticket variant.

    Everything is optional so incomplete stored rows can still be loaded
    and reported on by the validator instead of failing at parse time.
    """
    id: Optional[int] = None
    pnr_number: Optional[str] = None
    passenger_name: Optional[str] = None
    departure_date: Optional[date] = None
    departure_time: Optional[time] = None
    seat_number: Optional[str] = None
    ticket_price: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class BusTicketRecord(TicketRecordBase):
    """Bus ticket"""
    transport_mode: Literal["bus"] = "bus"
    bus_operator: Optional[str] = None
    source_location: Optional[str] = None
    destination_location: Optional[str] = None

class TrainTicketRecord(TicketRecordBase):
    """Train ticket"""
    transport_mode: Literal["train"] = "train"
    train_number: Optional[str] = None
    train_name: Optional[str] = None
    source_station: Optional[str] = None
    destination_station: Optional[str] = None
    coach_number: Optional[str] = None
    ticket_class: Optional[str] = None

class PlaneTicketRecord(TicketRecordBase):
    """Plane ticket"""
    transport_mode: Literal["plane"] = "plane"
    flight_number: Optional[str] = None
    airline_name: Optional[str] = None
    source_airport: Optional[str] = None
    destination_airport: Optional[str] = None
    ticket_class: Optional[str] = None
    baggage_allowance: Optional[str] = None
    gate_number: Optional[str] = None

TicketRecord = Annotated[
    Union[BusTicketRecord, TrainTicketRecord, PlaneTicketRecord],
    Field(discriminator="transport_mode")
]

class TicketProjection(BaseModel):
    """Bulk projection used for statistics"""
    id: Optional[int] = None
    departure_date: Optional[date] = None
    departure_time: Optional[time] = None

    class Config:
        from_attributes = True

# Lookup & Validation
class LookupOutcome(BaseModel):
    """Result of fanning a reference lookup out to every record source"""
    status: LookupStatus
    ticket_type: Optional[TransportMode] = None
    ticket: Optional[TicketRecord] = None
    matched_types: List[TransportMode] = []
    failed_types: List[TransportMode] = []
    error: Optional[str] = None

class TicketValidationOutcome(BaseModel):
    """Business-rule verdict for a single ticket"""
    is_valid: bool
    errors: List[str] = []

# Verification API Models
class TicketVerificationRequest(BaseModel):
    """Request to verify a ticket by PNR number"""
    pnr_number: str = Field(..., min_length=1, max_length=50)

    @field_validator('pnr_number')
    @classmethod
    def validate_pnr_number(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('PNR number is required')
        return v

class VerificationResult(BaseModel):
    """Structured verdict returned by ticket verification"""
    is_valid: bool
    message: str
    pnr_number: str
    ticket_type: Optional[TransportMode] = None
    ticket: Optional[TicketRecord] = None  # Only echoed back for valid tickets
    validation_errors: List[str] = []
    error: Optional[str] = None
    verified_at: datetime

# Statistics
class TicketStats(BaseModel):
    """Ticket counts for one transport mode"""
    total: int = 0
    upcoming: int = 0
    past: int = 0

class StatisticsSnapshot(BaseModel):
    """Per-mode and aggregate ticket counts"""
    bus: TicketStats = Field(default_factory=TicketStats)
    train: TicketStats = Field(default_factory=TicketStats)
    plane: TicketStats = Field(default_factory=TicketStats)
    total: TicketStats = Field(default_factory=TicketStats)
    generated_at: datetime
