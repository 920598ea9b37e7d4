from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class User:
    """Pure domain model for a stored user - password always holds the digest"""
    id: Optional[str]
    name: str
    email: str
    password: str
    version: int = 0


@dataclass
class UserInput:
    """Registration candidate as received; any field may be missing"""
    name: Optional[str] = None
    email: Optional[str] = None
    plain_password: Optional[Any] = None
