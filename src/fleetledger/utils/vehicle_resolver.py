"""Utility for resolving vehicle numbers to IDs."""

from fleetledger.domain import errors
from fleetledger.domain.errors import NotFoundError
from fleetledger.domain.vehicle import VehicleService


def resolve_vehicle(vehicle_service: VehicleService, vehicle: str) -> str:
    """Resolve a vehicle ID or vehicle number to a vehicle ID.

    Args:
        vehicle_service: VehicleService instance
        vehicle: Vehicle ID or vehicle number

    Returns:
        Vehicle ID

    Raises:
        NotFoundError: If no vehicle matches
    """
    # IDs take precedence over numbers
    vehicle_obj = vehicle_service.get_vehicle(vehicle)
    if vehicle_obj is not None:
        return vehicle_obj.id

    vehicle_obj = vehicle_service.get_vehicle_by_number(vehicle)
    if vehicle_obj is not None:
        return vehicle_obj.id

    raise NotFoundError(errors.vehicle_not_found(vehicle))
