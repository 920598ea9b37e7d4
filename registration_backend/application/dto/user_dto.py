from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for the stored user, hashed password included"""
    id: str
    name: str
    email: str
    password: str
    version: int = 0

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            password=user.password,
            version=user.version,
        )
