"""Vehicle domain service."""

from typing import Optional

from fleetledger.database.base import Database
from fleetledger.domain import errors
from fleetledger.domain.entities import Vehicle as VehicleEntity
from fleetledger.domain.errors import NotFoundError, ValidationError
from fleetledger.logging_setup import get_logger

logger = get_logger(__name__)


class VehicleService:
    """Service for managing vehicles."""

    def __init__(self, db: Database):
        """Initialize vehicle service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_vehicle(
        self,
        vehicle_number: str,
        make: Optional[str] = None,
        model: Optional[str] = None,
        vehicle_id: Optional[str] = None,
    ) -> str:
        """Create a new vehicle.

        Args:
            vehicle_number: Fleet or plate number, unique across vehicles
            make: Optional manufacturer
            model: Optional model name
            vehicle_id: Optional explicit ID (generated when omitted)

        Returns:
            Vehicle ID

        Raises:
            ValidationError: If the number is blank or already in use
        """
        vehicle_number = (vehicle_number or "").strip()
        if not vehicle_number:
            raise ValidationError("Vehicle number cannot be empty")
        if self.db.get_vehicle_by_number(vehicle_number) is not None:
            raise ValidationError(errors.duplicate_vehicle_number(vehicle_number))
        if vehicle_id and self.db.vehicle_exists(vehicle_id):
            raise ValidationError(f"Vehicle with ID '{vehicle_id}' already exists")

        vehicle_id = self.db.create_vehicle(
            vehicle_number=vehicle_number, make=make, model=model, vehicle_id=vehicle_id or None
        )
        logger.info("Created vehicle %s (%s)", vehicle_number, vehicle_id)
        return vehicle_id

    def get_vehicle(self, vehicle_id: str) -> Optional[VehicleEntity]:
        """Get vehicle by ID.

        Returns:
            Vehicle entity or None if not found
        """
        return self.db.get_vehicle(vehicle_id)

    def get_vehicle_by_number(self, vehicle_number: str) -> Optional[VehicleEntity]:
        return self.db.get_vehicle_by_number(vehicle_number)

    def list_vehicles(self) -> list[VehicleEntity]:
        """List all vehicles, ordered by vehicle number."""
        return self.db.list_vehicles()

    def delete_vehicle(self, vehicle_id: str) -> int:
        """Delete a vehicle together with all of its transactions.

        Returns:
            Number of transactions removed with the vehicle

        Raises:
            NotFoundError: If the vehicle doesn't exist
        """
        if not self.db.vehicle_exists(vehicle_id):
            raise NotFoundError(errors.vehicle_not_found(vehicle_id))

        removed = self.db.delete_vehicle(vehicle_id)
        logger.info("Deleted vehicle %s and %d transactions", vehicle_id, removed)
        return removed
