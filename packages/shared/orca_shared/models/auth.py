"""Session state and the request bodies of the auth and wallet endpoints."""

from __future__ import annotations

from pydantic import Field, model_validator

from orca_shared.models.base import CamelModel
from orca_shared.models.enums import AuthContextState, Purpose, Role
from orca_shared.models.networks import Network


class StateResponse(CamelModel):
    """Current auth-flow state reported by the session endpoint."""

    state: AuthContextState
    purpose: Purpose


class SessionUser(CamelModel):
    """The user attached to a session, as carried in the auth token."""

    state: AuthContextState
    email: str
    role: Role
    remember_me: bool | None = None
    purpose: Purpose


# ---------------------------------------------------------------------------
# Auth forms
# ---------------------------------------------------------------------------


class LoginForm(CamelModel):
    # Wire name is "emailOrusername" (lower-case u).
    email_orusername: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    remember_me: bool | None = None


class RegisterForm(CamelModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    confirm_password: str

    @model_validator(mode="after")
    def _passwords_match(self) -> RegisterForm:
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class SendOTPForm(CamelModel):
    purpose: Purpose


class VerifyOTPForm(CamelModel):
    code: str = Field(..., min_length=1)


class SessionCheckForm(CamelModel):
    token: str


class ResetPasswordForm(CamelModel):
    email: str = Field(..., min_length=1)


AuthForm = LoginForm | RegisterForm | VerifyOTPForm | ResetPasswordForm


# ---------------------------------------------------------------------------
# Wallet forms
# ---------------------------------------------------------------------------


class CreateWalletForm(CamelModel):
    label: str | None = None
    network: Network


class ImportWalletForm(CamelModel):
    label: str | None = None
    phrase: str = Field(..., min_length=1)
    network: Network
