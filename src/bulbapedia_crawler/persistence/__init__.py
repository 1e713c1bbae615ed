# ABOUTME: Database operations for the optional details cache
# ABOUTME: Stores extracted detail records so repeated lookups skip the wiki

"""
Persistence Layer: Save and retrieve extracted detail records

This layer handles:
- SQLModel table for detail snapshots
- JSON column type for pydantic models
- Database connection and transaction management

Data Flow: extraction/ records -> Database -> core/ service
"""

from .json_types import PydanticJson
from .manager import DatabaseManager
from .models import DetailsSnapshot

__all__ = [
    "DatabaseManager",
    "DetailsSnapshot",
    "PydanticJson",
]
