"""Relational equipment repository."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import Equipment
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_equipment,
    equipment_from_row,
    equipment_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import EquipmentRow
from workforce.infrastructure.repositories.equipment_repository import (
    EquipmentRepository,
)


class PostgresEquipmentRepository(PostgresRepository, EquipmentRepository):
    """Equipment storage; the serial number column is unique but nullable."""

    async def _fetch(self, statement, with_user: bool = True) -> list[Equipment]:
        if with_user:
            statement = statement.options(selectinload(EquipmentRow.user))
        async with self.database.session() as session:
            rows = await session.scalars(statement.order_by(EquipmentRow.created_at))
            return [equipment_from_row(row, with_user=with_user) for row in rows]

    async def create(self, equipment: Equipment) -> None:
        async with self.database.session() as session:
            session.add(equipment_to_row(equipment))

    async def find_by_id(self, equipment_id: uuid.UUID) -> Equipment | None:
        found = await self._fetch(
            select(EquipmentRow).where(EquipmentRow.id == equipment_id)
        )
        return found[0] if found else None

    async def find_by_serial_number(self, serial_number: str) -> Equipment | None:
        found = await self._fetch(
            select(EquipmentRow).where(EquipmentRow.serial_number == serial_number)
        )
        return found[0] if found else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Equipment]:
        return await self._fetch(
            select(EquipmentRow).where(EquipmentRow.assigned_to_user == user_id),
            with_user=False,
        )

    async def find_all(self) -> list[Equipment]:
        return await self._fetch(select(EquipmentRow))

    async def update(self, equipment: Equipment) -> None:
        async with self.database.session() as session:
            row = await session.get(EquipmentRow, equipment.id)
            if row is None:
                raise StoreError(f"equipment row {equipment.id} does not exist")
            apply_equipment(row, equipment)

    async def delete(self, equipment_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(
                delete(EquipmentRow).where(EquipmentRow.id == equipment_id)
            )
