"""Pydantic DTOs for login, session and profile endpoints."""

from pydantic import BaseModel, Field

from prms.domain.entities import UserProfile, UserRole


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., max_length=200)


class SessionResponse(BaseModel):
    """Current authentication state."""

    is_authenticated: bool
    role: UserRole | None
    username: str | None
    theme: str


class ProfileSchema(BaseModel):
    """The signed-in user's profile card (request and response)."""

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    phone: str = Field("", max_length=50)
    photo: str = Field("", description="Data URI or URL")

    model_config = {"from_attributes": True}

    def to_entity(self) -> UserProfile:
        return UserProfile(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            photo=self.photo,
        )


class ThemeUpdate(BaseModel):
    dark: bool
