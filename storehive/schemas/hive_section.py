"""Hive section transfer objects."""

from datetime import datetime

from storehive.schemas.common import ApiModel


class HiveSectionListItem(ApiModel):
    """Hive section as shown in section lists."""

    id: int
    name: str
    code: str
    is_deleted: bool


class HiveSection(ApiModel):
    """Hive section details."""

    id: int
    name: str
    code: str
    hive_id: int
    is_deleted: bool
    last_updated: datetime


class UpdateHiveSectionRequest(ApiModel):
    """Request for creating and updating a hive section."""

    name: str
    code: str
    hive_id: int
