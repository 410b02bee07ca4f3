"""
Contact person API routes
"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from services.persons_service import get_persons_service
from utils.error_handling import GENERIC_SERVER_ERROR
from utils.helpers import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

# Registered before "/{person_id}" so "by-domain" is never parsed as an id
@router.get("/by-domain")
async def get_persons_by_domain(domain: Optional[str] = Query(None)):
    """Get persons whose email ends with @domain"""
    if not domain or not domain.strip():
        raise HTTPException(status_code=400, detail="Domain parameter is required")

    persons_service = get_persons_service()

    try:
        result = await persons_service.get_persons_by_domain(domain.strip())
        raise_for_service_error(result)
        return result.data

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get persons for domain {domain}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.get("/{person_id}")
async def get_person(person_id: int):
    """Get person by ID"""
    persons_service = get_persons_service()

    try:
        result = await persons_service.get_person(person_id)
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get person {person_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)
