from typing import Optional

from pydantic import BaseModel

from ...domain.models.user import UserInput


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request

    Fields are deliberately optional: presence is checked by the user store,
    not here, so a missing field fails the same way as any other save error.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def to_input(self) -> UserInput:
        return UserInput(
            name=self.name,
            email=self.email,
            plain_password=self.password,
        )


class ErrorResponse(BaseModel):
    """DTO for the uniform failure body"""
    error: str
