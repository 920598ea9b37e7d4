from .registration import RegisterUserUseCase

__all__ = [
    "RegisterUserUseCase",
]
