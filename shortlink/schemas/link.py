from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

# Request DTOs
class LinkCreateRequest(BaseModel):
    # Validated by the service so a bad or missing target is a 400, not a 422
    target: Optional[str] = None
    custom_alias: Optional[str] = Field(None, alias="customAlias")

    model_config = ConfigDict(populate_by_name=True)

# Response DTOs
class LinkInfoResponse(BaseModel):
    alias: str
    target: str
    short_url: str = Field(..., alias="shortUrl")
    clicks: int = 0
    created_at: datetime = Field(..., alias="createdAt")

    # Allows instantiation using the Python field names alongside the JSON aliases
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
