"""In-memory equipment repository for development and tests."""

import copy
import dataclasses
import uuid

from workforce.domain.entities import Equipment
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.equipment_repository import (
    EquipmentRepository,
)


class MemoryEquipmentRepository(MemoryTable, EquipmentRepository):
    """Equipment storage; serial numbers are unique when present."""

    table_name = "equipment"
    unique_fields = ("serial_number",)

    def _detach(self, entity: Equipment) -> Equipment:
        return dataclasses.replace(copy.deepcopy(entity), user=None)

    def _with_user(self, equipment: Equipment | None) -> Equipment | None:
        if equipment is not None:
            equipment.user = self._load_user(equipment.assigned_to_user)
        return equipment

    async def create(self, equipment: Equipment) -> None:
        self._insert(equipment)

    async def find_by_id(self, equipment_id: uuid.UUID) -> Equipment | None:
        return self._with_user(self._first(lambda row: row.id == equipment_id))

    async def find_by_serial_number(self, serial_number: str) -> Equipment | None:
        return self._with_user(
            self._first(lambda row: row.serial_number == serial_number)
        )

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Equipment]:
        return self._select(lambda row: row.assigned_to_user == user_id)

    async def find_all(self) -> list[Equipment]:
        return [self._with_user(row) for row in self._select()]

    async def update(self, equipment: Equipment) -> None:
        self._replace(equipment)

    async def delete(self, equipment_id: uuid.UUID) -> None:
        self._remove(equipment_id)
