import logging
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.requests import Request
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# ---------------------------
# Service (Business logic)
# ---------------------------

class BusinessError(Exception):
    """Base class for all business logic errors."""
    error_code = "BUSINESS_ERROR"
    default_message = "Request could not be processed"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

class ServiceError(BusinessError):
    """Generic error for unexpected service failures."""
    error_code = "INTERNAL_ERROR"
    default_message = "Internal server error"

class NotFoundError(BusinessError):
    """Raised when a requested resource does not exist."""
    error_code = "NOT_FOUND"
    default_message = "Resource not found"

class ConflictError(BusinessError):
    """Raised when a resource already exists or conflicts with another resource."""
    error_code = "CONFLICT"
    default_message = "Resource already exists"

class PermissionDeniedError(BusinessError):
    """Raised when a user does not have permission to perform an action."""
    error_code = "FORBIDDEN"
    default_message = "Permission denied"

class UnauthorizedError(BusinessError):
    """Raised when authentication fails."""
    error_code = "UNAUTHORIZED"
    default_message = "Could not validate credentials"

class InvalidCredentialsError(BusinessError):
    """Raised when a login identifier/password pair does not match."""
    error_code = "INVALID_CREDENTIALS"
    default_message = "Invalid username/email or password"

class AccountPrivateError(BusinessError):
    """Raised when a private account's data is requested by someone else."""
    error_code = "ACCOUNT_PRIVATE"
    default_message = "This account is private"

# ---------------------------
# Validation
# ---------------------------

class ValidationError(BusinessError):
    """Raised when business rule validation fails (e.g., invalid input)."""
    error_code = "VALIDATION_ERROR"
    default_message = "Invalid input"

class InvalidActivityError(ValidationError):
    """Activity name is not one of the known activities."""
    error_code = "INVALID_ACTIVITY"
    default_message = "Invalid activity name"

class InvalidHoursError(ValidationError):
    """Hours outside 0-24 or not a multiple of 0.25."""
    error_code = "INVALID_HOURS"
    default_message = "Hours must be between 0 and 24 in steps of 0.25"

class InvalidDateError(ValidationError):
    """Date is malformed or a date range is inverted."""
    error_code = "INVALID_DATE"
    default_message = "Invalid date format, use YYYY-MM-DD"

class InvalidNoteError(ValidationError):
    """Note exceeds the maximum length."""
    error_code = "INVALID_NOTE"
    default_message = "Note is too long"

class InvalidConfigError(ValidationError):
    """Tile configuration failed validation."""
    error_code = "INVALID_CONFIG"
    default_message = "Invalid tile configuration"


# ---------------------------
# FastAPI Exception Handlers
# ---------------------------

def error_response(status_code: int, error_code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "error_code": error_code},
    )


def register_exception_handlers(app):
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return error_response(status.HTTP_404_NOT_FOUND, exc.error_code, exc.message)

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return error_response(status.HTTP_409_CONFLICT, exc.error_code, exc.message)

    @app.exception_handler(PermissionDeniedError)
    async def permission_handler(request: Request, exc: PermissionDeniedError):
        return error_response(status.HTTP_403_FORBIDDEN, exc.error_code, exc.message)

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        response = error_response(
            status.HTTP_401_UNAUTHORIZED, exc.error_code, exc.message
        )
        response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        request: Request, exc: InvalidCredentialsError
    ):
        return error_response(status.HTTP_400_BAD_REQUEST, exc.error_code, exc.message)

    # Expected outcome when viewing a private profile, not a fault.
    @app.exception_handler(AccountPrivateError)
    async def account_private_handler(request: Request, exc: AccountPrivateError):
        return error_response(status.HTTP_200_OK, exc.error_code, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, exc.error_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ())[1:])
            message = f"{location}: {first.get('msg')}" if location else first.get("msg")
        else:
            message = "Invalid request body"
        return error_response(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", message)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.error(f"Service error: {exc}", exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            exc.error_code,
            "Internal server error",
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.url.path}: {exc}", exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ServiceError.error_code,
            "Internal server error",
        )
