"""elastic-builder data models."""

from pydantic import BaseModel, ConfigDict, Field


class ShardsInfo(BaseModel):
    """How many shards took part in a request and how they fared."""

    total: int = 0
    successful: int = 0
    failed: int = 0


class CountResult(BaseModel):
    """Response from the count API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    count: int
    shards: ShardsInfo | None = Field(default=None, alias="_shards")
