from .register_user import RegisterUserUseCase

__all__ = ["RegisterUserUseCase"]
