"""
Groups service - customer groups and their nested units
"""

import logging
from typing import Optional

from services.base_service import BaseService, ServiceResult
from services.aggregation import aggregate_groups
from services.mappers import map_group, map_unit_full, map_unit_summary

logger = logging.getLogger(__name__)

GROUPS_WITH_UNITS_QUERY = """
    SELECT
        g.groupe_id,
        g.groupe_name,
        g."Description",
        u.unit_id,
        u.unit_name,
        u.city,
        u.country,
        u.zone_name,
        p."Person_id",
        p.first_name,
        p.last_name,
        p.job_title,
        p.email,
        p.phone_number,
        p.role,
        p.zone_name AS person_zone_name
    FROM groupe g
    LEFT JOIN unit u ON g.groupe_id = u.groupe_id
    LEFT JOIN "Person" p ON u.com_person_id = p."Person_id"
    ORDER BY g.groupe_name, u.unit_name
"""

GROUP_UNITS_QUERY = """
    SELECT
        u.*,
        p."Person_id",
        p.first_name,
        p.last_name,
        p.job_title,
        p.email,
        p.phone_number,
        p.role,
        p.zone_name AS person_zone_name
    FROM unit u
    LEFT JOIN "Person" p ON u.com_person_id = p."Person_id"
    WHERE u.groupe_id = $1
    ORDER BY u.unit_name
"""

class GroupsService(BaseService):
    """Service for customer group operations"""

    def __init__(self):
        super().__init__("groups")

    async def list_groups_with_units(self) -> ServiceResult:
        """
        Get every group with its units (summary view) and responsible persons

        Returns:
            ServiceResult with groups ordered by name
        """
        try:
            async with self.pool().acquire() as conn:
                rows = await conn.fetch(GROUPS_WITH_UNITS_QUERY)
        except Exception as e:
            return self.failure("List", e)

        return ServiceResult.ok(aggregate_groups(rows, unit_mapper=map_unit_summary))

    async def get_group_complete(self, group_id: int) -> ServiceResult:
        """
        Get one group with its units (full view) and responsible persons

        Args:
            group_id: Identifier of the group

        Returns:
            ServiceResult with a single nested group
        """
        try:
            async with self.pool().acquire() as conn:
                group_row = await conn.fetchrow(
                    'SELECT groupe_id, groupe_name, "Description" FROM groupe WHERE groupe_id = $1',
                    group_id
                )
                if group_row is None:
                    logger.warning(f"Group not found: {group_id}")
                    return ServiceResult.not_found("Group not found")

                unit_rows = await conn.fetch(GROUP_UNITS_QUERY, group_id)
        except Exception as e:
            return self.failure("Read", e)

        units = [map_unit_full(row) for row in unit_rows]
        return ServiceResult.ok([map_group(group_row, units=units)])

    async def create_group(self, groupe_name: str, description: Optional[str] = None) -> ServiceResult:
        """
        Create a new group

        Args:
            groupe_name: Name of the group
            description: Optional free-text description

        Returns:
            ServiceResult with the created group
        """
        logger.info(f"Creating group: {groupe_name}")
        try:
            async with self.pool().acquire() as conn:
                row = await conn.fetchrow("""
                    INSERT INTO groupe (groupe_name, "Description")
                    VALUES ($1, $2)
                    RETURNING groupe_id, groupe_name, "Description"
                """, groupe_name, description or None)
        except Exception as e:
            return self.failure("Create", e)

        return ServiceResult.ok([map_group(row)])

    async def update_group(self, group_id: int, groupe_name: str, description: Optional[str] = None) -> ServiceResult:
        """
        Replace a group's name and description

        Args:
            group_id: Identifier of the group
            groupe_name: New name
            description: New description (cleared when empty)

        Returns:
            ServiceResult with the updated group
        """
        logger.info(f"Updating group {group_id}")
        try:
            async with self.pool().acquire() as conn:
                row = await conn.fetchrow("""
                    UPDATE groupe
                    SET groupe_name = $1, "Description" = $2
                    WHERE groupe_id = $3
                    RETURNING groupe_id, groupe_name, "Description"
                """, groupe_name, description or None, group_id)
        except Exception as e:
            return self.failure("Update", e)

        if row is None:
            logger.warning(f"Group not found for update: {group_id}")
            return ServiceResult.not_found("Group not found")

        return ServiceResult.ok([map_group(row)])

    async def delete_group(self, group_id: int) -> ServiceResult:
        """
        Delete a group and all of its units in one transaction

        Units go first so the foreign key never points at a deleted group.
        The group row is locked before anything is removed; when it does not
        exist nothing is deleted.

        Args:
            group_id: Identifier of the group

        Returns:
            ServiceResult with the group row as it was before deletion
        """
        logger.info(f"Deleting group {group_id} and its units")
        try:
            async with self.pool().acquire() as conn:
                async with conn.transaction():
                    existing = await conn.fetchrow(
                        'SELECT groupe_id FROM groupe WHERE groupe_id = $1 FOR UPDATE',
                        group_id
                    )
                    if existing is None:
                        logger.warning(f"Group not found for delete: {group_id}")
                        return ServiceResult.not_found("Group not found")

                    status = await conn.execute("DELETE FROM unit WHERE groupe_id = $1", group_id)
                    logger.info(f"Removed units of group {group_id}: {status}")

                    row = await conn.fetchrow(
                        'DELETE FROM groupe WHERE groupe_id = $1 RETURNING groupe_id, groupe_name, "Description"',
                        group_id
                    )
        except Exception as e:
            return self.failure("Delete", e)

        return ServiceResult.ok([map_group(row)])


_groups_service = None

def get_groups_service() -> GroupsService:
    """Get the shared groups service instance"""
    global _groups_service
    if _groups_service is None:
        _groups_service = GroupsService()
    return _groups_service
