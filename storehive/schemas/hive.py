"""Hive transfer objects."""

from datetime import datetime

from pydantic import Field

from storehive.schemas.common import ApiModel


class HiveListItem(ApiModel):
    """Hive as shown in the hive list."""

    id: int
    name: str
    code: str
    is_deleted: bool
    hive_section_count: int = Field(default=0, description="Number of sections in the hive")


class Hive(ApiModel):
    """Hive details."""

    id: int
    name: str
    code: str
    address: str
    is_deleted: bool
    last_updated: datetime


class UpdateHiveRequest(ApiModel):
    """Request for creating and updating a hive."""

    name: str
    code: str
    address: str
