"""Pydantic schemas used across the project."""
from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Documented shape of the register and login bodies.

    Bodies are validated by the account module rather than by FastAPI, so
    wrong-typed fields surface as ``Invalid payload`` instead of a 422.
    """

    email: str = Field(..., examples=["user@example.com"])
    password: str = Field(..., min_length=6, examples=["hunter22"])


class RegisterResponse(BaseModel):
    ok: bool = True


class UserResponse(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    ok: bool = True
    user: UserResponse


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
