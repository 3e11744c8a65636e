"""User Schemas — public user shape: {_id, username}."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        validation_alias=AliasChoices("_id", "id"), serialization_alias="_id",
    )
    username: str
