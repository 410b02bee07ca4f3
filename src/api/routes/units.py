"""
Unit API routes
"""

import logging
from fastapi import APIRouter, HTTPException

from models.unit import UnitWriteRequest
from services.units_service import get_units_service
from utils.error_handling import GENERIC_SERVER_ERROR
from utils.helpers import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("", status_code=201)
async def create_unit(request: UnitWriteRequest):
    """Create a new unit inside an existing group"""
    if not request.groupe_id or not request.unit_name:
        raise HTTPException(status_code=400, detail="Group ID and unit name are required")

    units_service = get_units_service()

    try:
        result = await units_service.create_unit(request.model_dump())
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create unit: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.get("/{unit_id}")
async def get_unit(unit_id: int):
    """Get unit details with group name and responsible person"""
    units_service = get_units_service()

    try:
        result = await units_service.get_unit(unit_id)
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get unit {unit_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.put("/{unit_id}")
async def update_unit(unit_id: int, request: UnitWriteRequest):
    """Update the unit attributes present in the body"""
    if not request.unit_name:
        raise HTTPException(status_code=400, detail="Unit name is required")

    units_service = get_units_service()

    try:
        result = await units_service.update_unit(unit_id, request.model_dump(exclude_unset=True))
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update unit {unit_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)
