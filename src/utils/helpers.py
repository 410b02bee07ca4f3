"""
Utility functions and helpers
"""

import logging
from fastapi import HTTPException

from services.base_service import ServiceResult, RESOURCE_NOT_FOUND
from utils.error_handling import GENERIC_SERVER_ERROR

logger = logging.getLogger(__name__)

def raise_for_service_error(result: ServiceResult) -> None:
    """Translate a failed service result into the matching HTTP error"""
    if result.success:
        return

    if result.error_type == RESOURCE_NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.error)

    # Store failures are logged by the service; the caller only gets a generic message
    raise HTTPException(status_code=500, detail=GENERIC_SERVER_ERROR)
