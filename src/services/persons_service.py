"""
Persons service - read-only access to contact persons
"""

import logging

from services.base_service import BaseService, ServiceResult
from services.mappers import map_person

logger = logging.getLogger(__name__)

PERSON_COLUMNS = """
    "Person_id",
    first_name,
    last_name,
    job_title,
    email,
    phone_number,
    role,
    zone_name
"""


def email_domain_pattern(domain: str) -> str:
    """LIKE pattern matching emails that end with @domain, wildcards escaped"""
    escaped = domain.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%@{escaped}"


class PersonsService(BaseService):
    """Service for contact person lookups"""

    def __init__(self):
        super().__init__("persons")

    async def get_person(self, person_id: int) -> ServiceResult:
        try:
            async with self.pool().acquire() as conn:
                row = await conn.fetchrow(
                    f'SELECT {PERSON_COLUMNS} FROM "Person" WHERE "Person_id" = $1',
                    person_id
                )
        except Exception as e:
            return self.failure("Read", e)

        if row is None:
            logger.warning(f"Person not found: {person_id}")
            return ServiceResult.not_found("Person not found")

        return ServiceResult.ok([map_person(row)])

    async def get_persons_by_domain(self, domain: str) -> ServiceResult:
        """
        Get persons whose email belongs to a domain

        Args:
            domain: Email domain without the @ (e.g. example.com)

        Returns:
            ServiceResult with persons ordered by first then last name
        """
        try:
            async with self.pool().acquire() as conn:
                rows = await conn.fetch(f"""
                    SELECT {PERSON_COLUMNS}
                    FROM "Person"
                    WHERE email LIKE $1 ESCAPE '\\'
                    ORDER BY first_name, last_name
                """, email_domain_pattern(domain))
        except Exception as e:
            return self.failure("Search", e)

        return ServiceResult.ok([map_person(row) for row in rows])


_persons_service = None

def get_persons_service() -> PersonsService:
    """Get the shared persons service instance"""
    global _persons_service
    if _persons_service is None:
        _persons_service = PersonsService()
    return _persons_service
