"""
Customer group API routes
"""

import logging
from fastapi import APIRouter, HTTPException

from models.group import GroupWriteRequest
from services.groups_service import get_groups_service
from utils.error_handling import GENERIC_SERVER_ERROR
from utils.helpers import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("")
async def list_groups():
    """Get all groups with their units and responsible persons"""
    groups_service = get_groups_service()

    try:
        result = await groups_service.list_groups_with_units()
        raise_for_service_error(result)
        return result.data

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to list groups: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.post("", status_code=201)
async def create_group(request: GroupWriteRequest):
    """Create a new group"""
    if not request.groupe_name:
        raise HTTPException(status_code=400, detail="Group name is required")

    groups_service = get_groups_service()

    try:
        result = await groups_service.create_group(request.groupe_name, request.Description)
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create group: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.get("/{group_id}/complete")
async def get_group_complete(group_id: int):
    """Get a group with every unit attribute and the units' responsible persons"""
    groups_service = get_groups_service()

    try:
        result = await groups_service.get_group_complete(group_id)
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get complete group {group_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.put("/{group_id}")
async def update_group(group_id: int, request: GroupWriteRequest):
    """Update group name and description"""
    if not request.groupe_name:
        raise HTTPException(status_code=400, detail="Group name is required")

    groups_service = get_groups_service()

    try:
        result = await groups_service.update_group(group_id, request.groupe_name, request.Description)
        raise_for_service_error(result)
        return result.data[0]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update group {group_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)

@router.delete("/{group_id}")
async def delete_group(group_id: int):
    """Delete a group together with all of its units"""
    groups_service = get_groups_service()

    try:
        result = await groups_service.delete_group(group_id)
        raise_for_service_error(result)
        return {
            "message": "Group and associated units deleted successfully",
            "deletedGroup": result.data[0]
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete group {group_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)
