"""
Units service - business units (sites/branches) of customer groups
"""

import logging
from typing import Dict, Any, List

from services.base_service import BaseService, ServiceResult
from services.mappers import (
    UNIT_WRITABLE_FIELDS,
    map_unit_detail,
    unit_update_assignments,
    unit_write_values,
)

logger = logging.getLogger(__name__)

UNIT_DETAIL_QUERY = """
    SELECT
        u.*,
        g.groupe_name,
        p."Person_id",
        p.first_name,
        p.last_name,
        p.job_title,
        p.email,
        p.phone_number,
        p.role,
        p.zone_name AS person_zone_name
    FROM unit u
    LEFT JOIN groupe g ON u.groupe_id = g.groupe_id
    LEFT JOIN "Person" p ON u.com_person_id = p."Person_id"
    WHERE u.unit_id = $1
"""

_COLUMNS = ", ".join(UNIT_WRITABLE_FIELDS)
_PLACEHOLDERS = ", ".join(f"${i}" for i in range(1, len(UNIT_WRITABLE_FIELDS) + 1))

INSERT_UNIT_QUERY = f"""
    INSERT INTO unit ({_COLUMNS})
    VALUES ({_PLACEHOLDERS})
    RETURNING unit_id
"""

def build_update_unit_query(columns: List[str]) -> str:
    """UPDATE setting the given columns; the unit id is bound last"""
    assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=1))
    return f"""
        UPDATE unit
        SET {assignments}
        WHERE unit_id = ${len(columns) + 1}
        RETURNING unit_id
    """

class UnitsService(BaseService):
    """Service for unit operations"""

    def __init__(self):
        super().__init__("units")

    async def get_unit(self, unit_id: int) -> ServiceResult:
        """
        Get a unit with its group name and responsible person

        Args:
            unit_id: Identifier of the unit

        Returns:
            ServiceResult with the unit detail
        """
        try:
            async with self.pool().acquire() as conn:
                row = await conn.fetchrow(UNIT_DETAIL_QUERY, unit_id)
        except Exception as e:
            return self.failure("Read", e)

        if row is None:
            logger.warning(f"Unit not found: {unit_id}")
            return ServiceResult.not_found("Unit not found")

        return ServiceResult.ok([map_unit_detail(row)])

    async def create_unit(self, payload: Dict[str, Any]) -> ServiceResult:
        """
        Insert a unit and read it back in detail form

        Args:
            payload: Unit fields keyed by column name

        Returns:
            ServiceResult with the created unit detail
        """
        logger.info(f"Creating unit '{payload.get('unit_name')}' in group {payload.get('groupe_id')}")
        values = unit_write_values(payload)
        try:
            async with self.pool().acquire() as conn:
                async with conn.transaction():
                    unit_id = await conn.fetchval(INSERT_UNIT_QUERY, *values)
                    row = await conn.fetchrow(UNIT_DETAIL_QUERY, unit_id)
        except Exception as e:
            return self.failure("Create", e)

        return ServiceResult.ok([map_unit_detail(row)])

    async def update_unit(self, unit_id: int, payload: Dict[str, Any]) -> ServiceResult:
        """
        Update the attributes present in the request, leaving the rest stored as is

        Args:
            unit_id: Identifier of the unit
            payload: Only the unit fields the client sent, keyed by column name

        Returns:
            ServiceResult with the updated unit detail
        """
        assignments = unit_update_assignments(payload)
        columns = [column for column, _ in assignments]
        values = [value for _, value in assignments]
        logger.info(f"Updating unit {unit_id}: {columns}")
        try:
            async with self.pool().acquire() as conn:
                async with conn.transaction():
                    updated_id = await conn.fetchval(build_update_unit_query(columns), *values, unit_id)
                    if updated_id is None:
                        logger.warning(f"Unit not found for update: {unit_id}")
                        return ServiceResult.not_found("Unit not found")
                    row = await conn.fetchrow(UNIT_DETAIL_QUERY, updated_id)
        except Exception as e:
            return self.failure("Update", e)

        return ServiceResult.ok([map_unit_detail(row)])


_units_service = None

def get_units_service() -> UnitsService:
    """Get the shared units service instance"""
    global _units_service
    if _units_service is None:
        _units_service = UnitsService()
    return _units_service
