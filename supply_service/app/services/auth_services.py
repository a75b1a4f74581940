import logging
from sqlalchemy.orm import Session

from shared.core.exceptions import Unauthorized, ValidationError
from shared.models.users import Users, bcrypt_context
from ..schemas import auth_schemas

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def login(db: Session, request: auth_schemas.LoginRequest) -> auth_schemas.LoginResponse:
    """Check credentials and return the caller's identity.

    No token or session is issued. Unknown users and wrong passwords fail with
    the same message, and both pay for one bcrypt verification.
    """
    username = (request.username or "").strip()
    if not username or not request.password:
        raise ValidationError("username and password are required")

    user = db.query(Users).filter(Users.username == username).first()

    if not user:
        bcrypt_context.dummy_verify()
        logger.warning("Login rejected for unknown user '%s'", username)
        raise Unauthorized(INVALID_CREDENTIALS)

    if not user.verify_password(request.password):
        logger.warning("Login rejected for '%s': wrong password", username)
        raise Unauthorized(INVALID_CREDENTIALS)

    logger.info("User '%s' logged in as %s", user.username, user.role.value)
    return auth_schemas.LoginResponse(
        id=user.id,
        username=user.username,
        role=user.role,
    )
