from .registration_dto import UserRegistrationRequest, ErrorResponse
from .user_dto import UserResponse

__all__ = [
    "UserRegistrationRequest",
    "ErrorResponse",
    "UserResponse",
]
