from typing import Any, Dict, List, Optional, Tuple, Union
from datetime import datetime, date, time, tzinfo
from decimal import Decimal
from zoneinfo import ZoneInfo

from src.config import settings
from src.tickets.schemas import TransportMode, TicketValidationOutcome

VALID_MESSAGE = "Ticket is valid and ready for travel"
INVALID_MESSAGE = "Ticket validation failed"
PAST_DEPARTURE_ERROR = "Departure date/time cannot be in the past"
INVALID_TYPE_ERROR = "Invalid ticket type"
INVALID_PRICE_ERROR = "Valid ticket price is required"

# (field, message) pairs, checked in order
COMMON_REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("pnr_number", "PNR number is required"),
    ("passenger_name", "Passenger name is required"),
    ("departure_date", "Departure date is required"),
    ("departure_time", "Departure time is required"),
    ("seat_number", "Seat number is required"),
]

MODE_REQUIRED_FIELDS: Dict[TransportMode, List[Tuple[str, str]]] = {
    TransportMode.BUS: [
        ("bus_operator", "Bus operator is required"),
        ("source_location", "Source location is required"),
        ("destination_location", "Destination location is required"),
    ],
    TransportMode.TRAIN: [
        ("train_number", "Train number is required"),
        ("train_name", "Train name is required"),
        ("source_station", "Source station is required"),
        ("destination_station", "Destination station is required"),
        ("coach_number", "Coach number is required"),
        ("ticket_class", "Ticket class is required"),
    ],
    TransportMode.PLANE: [
        ("flight_number", "Flight number is required"),
        ("airline_name", "Airline name is required"),
        ("source_airport", "Source airport is required"),
        ("destination_airport", "Destination airport is required"),
        ("ticket_class", "Ticket class is required"),
        ("baggage_allowance", "Baggage allowance is required"),
    ],
}

def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False

def ticket_timezone() -> tzinfo:
    """Zone that stored departure dates and times are expressed in"""
    return ZoneInfo(settings.TIMEZONE)

def as_naive(moment: datetime, zone: tzinfo) -> datetime:
    """Express an aware moment as naive wall-clock time in `zone`"""
    if moment.tzinfo:
        return moment.astimezone(zone).replace(tzinfo=None)
    return moment

def departure_datetime(departure_date: Optional[date], departure_time: Optional[time]) -> Optional[datetime]:
    """Combine departure date and time, or None when either is missing"""
    if departure_date is None or departure_time is None:
        return None
    return datetime.combine(departure_date, departure_time)

def resolve_transport_mode(ticket_type: Union[TransportMode, str, None]) -> Optional[TransportMode]:
    if isinstance(ticket_type, TransportMode):
        return ticket_type
    try:
        return TransportMode(ticket_type)
    except ValueError:
        return None

class TicketValidator:
    """Business-rule validation for bus, train and plane tickets.

    Every rule runs and violations accumulate in a fixed order: common
    fields, departure time, then the fields of the ticket's transport mode.
    The reference time is always passed in, never read from the system.
    An aware reference time is compared in `zone`, which defaults to the
    configured ticket timezone.
    """

    @staticmethod
    def validate(
        ticket: Any,
        ticket_type: Union[TransportMode, str, None],
        now: datetime,
        zone: Optional[tzinfo] = None
    ) -> TicketValidationOutcome:
        errors: List[str] = []

        # Common validations
        for field, message in COMMON_REQUIRED_FIELDS:
            if is_blank(getattr(ticket, field, None)):
                errors.append(message)

        if not TicketValidator._has_valid_price(getattr(ticket, "ticket_price", None)):
            errors.append(INVALID_PRICE_ERROR)

        # Date validation, skipped when date or time is missing
        departure = departure_datetime(
            getattr(ticket, "departure_date", None),
            getattr(ticket, "departure_time", None)
        )
        if departure is not None and departure <= as_naive(now, zone or ticket_timezone()):
            errors.append(PAST_DEPARTURE_ERROR)

        # Type-specific validations
        mode = resolve_transport_mode(ticket_type)
        if mode is None:
            errors.append(INVALID_TYPE_ERROR)
        else:
            for field, message in MODE_REQUIRED_FIELDS[mode]:
                if is_blank(getattr(ticket, field, None)):
                    errors.append(message)

        return TicketValidationOutcome(is_valid=not errors, errors=errors)

    @staticmethod
    def _has_valid_price(price: Any) -> bool:
        if price is None or isinstance(price, bool):
            return False
        try:
            return Decimal(str(price)) > 0
        except ArithmeticError:
            return False
