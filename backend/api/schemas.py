"""Response models shared by several routers."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base for response models built from domain objects."""

    model_config = ConfigDict(from_attributes=True)


class NamedRefResponse(ApiModel):
    id: str
    name: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
