"""
Ticket Verification Module

This module verifies bus, train and plane tickets and reports ticket
statistics for the dashboard. It includes:

- PNR lookup fanned out concurrently to the three ticket sources
- Business-rule validation shared by all modes plus per-mode rules
- Upcoming/past ticket statistics per transport mode

Key Components:
- adapters.py: Ticket store contract and the SQLAlchemy implementation
- fanout.py: Concurrent fan-out that collects every source's outcome
- lookup.py: Multi-source PNR lookup and outcome reconciliation
- validation.py: Ticket validation rules
- stats_service.py: Ticket statistics aggregation
- service.py: Verification service composing lookup and validation
- router.py: FastAPI endpoints for verification and statistics
- schemas.py: Pydantic models for tickets, verdicts and statistics
"""

from .router import router
from .service import TicketVerificationService
from .lookup import MultiSourceLookup, reconcile_lookup
from .validation import TicketValidator
from .stats_service import TicketStatisticsAggregator
from .adapters import (
    TicketStoreAdapter, SQLAlchemyTicketAdapter, TicketStoreError,
    TicketNotFoundError, build_sqlalchemy_adapters
)
from .schemas import (
    TransportMode, BusTicketRecord, TrainTicketRecord, PlaneTicketRecord,
    TicketProjection, LookupOutcome, LookupStatus, TicketValidationOutcome,
    VerificationResult, TicketStats, StatisticsSnapshot
)

__all__ = [
    "router",
    "TicketVerificationService",
    "MultiSourceLookup",
    "reconcile_lookup",
    "TicketValidator",
    "TicketStatisticsAggregator",
    "TicketStoreAdapter",
    "SQLAlchemyTicketAdapter",
    "TicketStoreError",
    "TicketNotFoundError",
    "build_sqlalchemy_adapters",
    "TransportMode",
    "BusTicketRecord",
    "TrainTicketRecord",
    "PlaneTicketRecord",
    "TicketProjection",
    "LookupOutcome",
    "LookupStatus",
    "TicketValidationOutcome",
    "VerificationResult",
    "TicketStats",
    "StatisticsSnapshot"
]
