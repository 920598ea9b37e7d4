# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

# Local application imports
from ..application.dto.registration_dto import UserRegistrationRequest, ErrorResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.registration.register_user import RegisterUserUseCase
from ..di.container import get_container
from ..domain.exceptions import RegistrationError, SAVE_FAILED_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registration"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Greeting, doubles as a liveness check"""
    return "Hello, World!"


@router.post(
    "/register",
    response_model=UserResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def register_user(request: Request):
    """
    Register a new user

    The body is read by hand rather than bound to a model so that malformed
    or incomplete input fails the same way as every other error: logged in
    full here, answered with one fixed message and a 500.

    Args:
        request: Raw HTTP request carrying {name, email, password}

    Returns:
        UserResponse with the stored user, or the generic error body
    """
    try:
        payload = await request.json()
        registration = UserRegistrationRequest.model_validate(payload)

        container = get_container()
        register_use_case = container.get(RegisterUserUseCase)
        return await register_use_case.execute(registration)
    except RegistrationError as exception:
        logger.error(
            f"Failed to register user: {exception.message} details={exception.details}",
            exc_info=True,
        )
        error_message = exception.user_message
    except Exception as exception:
        logger.error(f"Failed to register user: {exception}", exc_info=True)
        error_message = SAVE_FAILED_MESSAGE

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=error_message).model_dump(),
    )
