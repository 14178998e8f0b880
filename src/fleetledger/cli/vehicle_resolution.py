"""CLI helpers for vehicle resolution."""

from __future__ import annotations

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.domain.errors import NotFoundError
from fleetledger.domain.vehicle import VehicleService
from fleetledger.utils.vehicle_resolver import resolve_vehicle


def resolve_vehicle_or_exit(
    ctx: click.Context, vehicle_service: VehicleService, vehicle: str
) -> str:
    """Resolve vehicle ID or number, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_vehicle(vehicle_service, vehicle)
    except NotFoundError as exc:
        handle_domain_error(ctx, exc)
