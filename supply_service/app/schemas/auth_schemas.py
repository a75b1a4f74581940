from typing import Optional

from shared.core.schemas import ApiModel
from shared.utils.enums import UserRole


# Passwords are compared verbatim, so this body is not whitespace-cleaned.
class LoginRequest(ApiModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(ApiModel):
    id: str
    username: str
    role: UserRole
