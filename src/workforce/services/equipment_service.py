"""Equipment service."""

import uuid

from loguru import logger

from workforce.domain.entities import Equipment, User
from workforce.domain.exceptions import ConflictError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import EquipmentRepository, UserRepository
from workforce.models.equipment import (
    CreateEquipmentRequest,
    EquipmentResponse,
    UpdateEquipmentRequest,
)
from workforce.services.base import BaseService


class EquipmentService(BaseService):
    """
    Manage equipment and its assignment to users.

    Serial numbers are unique when present.
    """

    entity_name = "equipment"

    def __init__(
        self,
        equipment: EquipmentRepository,
        users: UserRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.equipment = equipment
        self.users = users

    async def _load(self, equipment_id: str | uuid.UUID) -> Equipment:
        return await self._load_reference(self.equipment, equipment_id, "equipment")

    async def _load_user(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    async def _ensure_serial_free(
        self, serial_number: str, equipment_id: uuid.UUID | None = None
    ) -> None:
        with self._store("look up equipment"):
            existing = await self.equipment.find_by_serial_number(serial_number)
        if existing is not None and existing.id != equipment_id:
            raise ConflictError(
                f"equipment with serial number '{serial_number}' already exists"
            )

    @staticmethod
    def _payload(equipment: Equipment) -> dict:
        return {
            "equipment_id": str(equipment.id),
            "name": equipment.name,
            "serial_number": equipment.serial_number,
        }

    async def create(self, request: CreateEquipmentRequest) -> EquipmentResponse:
        holder = (
            await self._load_user(request.assigned_to_user)
            if request.assigned_to_user
            else None
        )
        creator = (
            await self._load_user(request.created_by, "creator")
            if request.created_by
            else None
        )
        if request.serial_number:
            await self._ensure_serial_free(request.serial_number)

        now = self._now()
        equipment = Equipment(
            id=uuid.uuid4(),
            name=request.name,
            serial_number=request.serial_number,
            assigned_to_user=holder.id if holder else None,
            status=request.status,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create equipment"):
            await self.equipment.create(equipment)

        logger.info(f"Created equipment {equipment.id} ({equipment.name})")
        await self._publish("EquipmentCreated", self._payload(equipment))
        equipment.user = holder
        return EquipmentResponse.model_validate(equipment)

    async def get(self, equipment_id: str | uuid.UUID) -> EquipmentResponse:
        return EquipmentResponse.model_validate(await self._load(equipment_id))

    async def get_by_serial_number(self, serial_number: str) -> EquipmentResponse:
        with self._store("look up equipment"):
            equipment = await self.equipment.find_by_serial_number(serial_number)
        return EquipmentResponse.model_validate(self._require(equipment, "equipment"))

    async def list_all(self) -> list[EquipmentResponse]:
        with self._store("list equipment"):
            items = await self.equipment.find_all()
        return [EquipmentResponse.model_validate(item) for item in items]

    async def list_for_user(self, user_id: str | uuid.UUID) -> list[EquipmentResponse]:
        parsed = self._parse_id(user_id, "user id")
        with self._store("list equipment"):
            items = await self.equipment.find_by_user_id(parsed)
        return [EquipmentResponse.model_validate(item) for item in items]

    async def update(
        self, equipment_id: str | uuid.UUID, request: UpdateEquipmentRequest
    ) -> EquipmentResponse:
        """
        Apply the supplied fields.

        An explicit ``null`` clears the serial number or unassigns the holder.
        """
        equipment = await self._load(equipment_id)
        changes = self._changes(
            request, nullable=("serial_number", "assigned_to_user")
        )

        if "assigned_to_user" in changes:
            holder = (
                await self._load_user(changes["assigned_to_user"])
                if changes["assigned_to_user"]
                else None
            )
            changes["assigned_to_user"] = holder.id if holder else None
            equipment.user = holder

        serial_number = changes.get("serial_number")
        if serial_number and serial_number != equipment.serial_number:
            await self._ensure_serial_free(serial_number, equipment.id)

        for name, value in changes.items():
            setattr(equipment, name, value)
        equipment.updated_at = self._now()

        with self._store("update equipment"):
            await self.equipment.update(equipment)

        logger.info(f"Updated equipment {equipment.id}")
        await self._publish("EquipmentUpdated", self._payload(equipment))
        return EquipmentResponse.model_validate(equipment)

    async def delete(self, equipment_id: str | uuid.UUID) -> None:
        equipment = await self._load(equipment_id)

        with self._store("delete equipment"):
            await self.equipment.delete(equipment.id)

        logger.info(f"Deleted equipment {equipment.id}")
        await self._publish("EquipmentDeleted", {"equipment_id": str(equipment.id)})
