from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    """Username and password pair used to register or log in."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class UserCreate(UserCredentials):
    """Schema for creating a user."""

    is_admin: bool = False


class UserResponse(BaseModel):
    """User response schema. The password never leaves the store."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    is_admin: bool
