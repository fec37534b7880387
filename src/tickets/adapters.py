import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from src.models import BusTicket, TrainTicket, PlaneTicket
from src.tickets.schemas import (
    TransportMode, TicketRecord, TicketRecordBase, TicketProjection,
    BusTicketRecord, TrainTicketRecord, PlaneTicketRecord
)

logger = logging.getLogger(__name__)

class TicketStoreError(Exception):
    """Record source could not be read (connectivity, permissions, timeouts)"""

    def __init__(self, transport_mode: TransportMode, detail: str):
        self.transport_mode = transport_mode
        self.detail = detail
        super().__init__(f"{transport_mode.value} ticket store error: {detail}")

class TicketNotFoundError(Exception):
    """No record with the requested reference exists in this source"""

    def __init__(self, transport_mode: TransportMode, pnr_number: str):
        self.transport_mode = transport_mode
        self.pnr_number = pnr_number
        super().__init__(f"No {transport_mode.value} ticket with PNR {pnr_number}")

class TicketStoreAdapter(ABC):
    """Read access to the tickets of a single transport mode"""

    transport_mode: TransportMode

    @abstractmethod
    async def find_by_reference(self, pnr_number: str) -> TicketRecord:
        """Return the ticket with this PNR.

        Raises TicketNotFoundError when there is no such ticket and
        TicketStoreError when the source could not be queried.
        """

    @abstractmethod
    async def list_projection(self) -> List[TicketProjection]:
        """Return id and departure date/time of every ticket (possibly empty)"""

class SQLAlchemyTicketAdapter(TicketStoreAdapter):
    """Ticket store backed by one SQLAlchemy table.

    Queries run in a worker thread with a session of their own, so
    concurrent calls never share session state.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        transport_mode: TransportMode,
        model,
        record_schema: Type[TicketRecordBase]
    ):
        self.session_factory = session_factory
        self.transport_mode = transport_mode
        self.model = model
        self.record_schema = record_schema

    async def find_by_reference(self, pnr_number: str) -> TicketRecord:
        return await asyncio.to_thread(self._find_by_reference, pnr_number)

    async def list_projection(self) -> List[TicketProjection]:
        return await asyncio.to_thread(self._list_projection)

    def _find_by_reference(self, pnr_number: str) -> TicketRecord:
        db = self.session_factory()
        try:
            row = db.query(self.model).filter(
                self.model.pnr_number == pnr_number
            ).one_or_none()

            if row is None:
                raise TicketNotFoundError(self.transport_mode, pnr_number)

            return self.record_schema.model_validate(row)
        except SQLAlchemyError as e:
            raise TicketStoreError(self.transport_mode, str(e)) from e
        finally:
            db.close()

    def _list_projection(self) -> List[TicketProjection]:
        db = self.session_factory()
        try:
            rows = db.query(
                self.model.id,
                self.model.departure_date,
                self.model.departure_time
            ).all()

            return [
                TicketProjection(id=row.id, departure_date=row.departure_date, departure_time=row.departure_time)
                for row in rows
            ]
        except SQLAlchemyError as e:
            raise TicketStoreError(self.transport_mode, str(e)) from e
        finally:
            db.close()

# Table and schema per transport mode
TICKET_SOURCES = {
    TransportMode.BUS: (BusTicket, BusTicketRecord),
    TransportMode.TRAIN: (TrainTicket, TrainTicketRecord),
    TransportMode.PLANE: (PlaneTicket, PlaneTicketRecord),
}

def build_sqlalchemy_adapters(session_factory: sessionmaker) -> Dict[TransportMode, TicketStoreAdapter]:
    """Create one SQLAlchemy adapter per transport mode"""
    adapters = {}
    for mode, (model, record_schema) in TICKET_SOURCES.items():
        adapters[mode] = SQLAlchemyTicketAdapter(session_factory, mode, model, record_schema)

    logger.debug("Built ticket adapters for %s", ", ".join(mode.value for mode in adapters))
    return adapters
