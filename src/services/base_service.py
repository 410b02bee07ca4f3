"""
Base service layer shared by the entity services
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from database.connection import get_db_pool

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
DATABASE_ERROR = "DATABASE_ERROR"

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, data: List[Dict[str, Any]]) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult":
        return cls(success=False, error=message, error_type=RESOURCE_NOT_FOUND)

    @classmethod
    def database_error(cls, message: str) -> "ServiceResult":
        return cls(success=False, error=message, error_type=DATABASE_ERROR)

class BaseService:
    """Base service holding the resource name used in log messages"""

    def __init__(self, resource_name: str):
        self.resource_name = resource_name

    def pool(self):
        return get_db_pool()

    def failure(self, operation: str, exc: Exception) -> ServiceResult:
        """Log a store failure and hide its details from the caller"""
        logger.error(f"{operation} operation failed for {self.resource_name}: {exc}", exc_info=True)
        return ServiceResult.database_error(f"{operation} failed for {self.resource_name}")
