"""Domain layer for fleetledger application."""

import importlib

# Services are imported lazily: the database layer imports domain.entities,
# and the services import the database layer.
_SERVICES = {
    "TransactionService": "fleetledger.domain.transaction",
    "TransactionValidator": "fleetledger.domain.validation",
    "ProfitabilityService": "fleetledger.domain.profitability",
    "DashboardService": "fleetledger.domain.dashboard",
    "VehicleService": "fleetledger.domain.vehicle",
    "EmployeeService": "fleetledger.domain.employee",
    "DocumentService": "fleetledger.domain.document",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
