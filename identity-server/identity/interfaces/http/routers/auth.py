"""Registration and login endpoints."""
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from identity.infrastructure.database.session import commit_session
from identity.interfaces.http.deps import get_auth_service, get_db_session
from identity.modules.accounts import AuthService, InvalidPayloadError
from identity.schemas import CredentialsRequest, ErrorResponse, LoginResponse, RegisterResponse, UserResponse

router = APIRouter()

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_CREDENTIALS_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": CredentialsRequest.model_json_schema()},
            "application/x-www-form-urlencoded": {"schema": CredentialsRequest.model_json_schema()},
        },
    }
}


async def read_credentials_payload(request: Request) -> Any:
    """Accept a JSON object or a url-encoded form, like the original web clients send."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(_FORM_CONTENT_TYPES):
            form = await request.form()
            return dict(form)
        return await request.json()
    except (ValueError, UnicodeDecodeError, StarletteHTTPException) as exc:
        # Starlette reports malformed multipart bodies as a 400 HTTPException.
        raise InvalidPayloadError() from exc


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
    openapi_extra=_CREDENTIALS_BODY,
)
async def register(
    payload: Any = Depends(read_credentials_payload),
    auth_service: AuthService = Depends(get_auth_service),
    db: AsyncSession = Depends(get_db_session),
) -> RegisterResponse:
    await auth_service.register(payload)
    # Committed before responding; the dependency's own commit runs after the response is sent.
    await commit_session(db)
    return RegisterResponse()


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Check an email and password",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    },
    openapi_extra=_CREDENTIALS_BODY,
)
async def login(
    payload: Any = Depends(read_credentials_payload),
    auth_service: AuthService = Depends(get_auth_service),
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    account = await auth_service.login(payload)
    await commit_session(db)
    return LoginResponse(user=UserResponse(id=account.id, email=account.email))
