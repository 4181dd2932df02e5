"""String enums shared by the API and its clients."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role."""

    USER = "USER"
    ADMIN = "ADMIN"


class AssetType(str, Enum):
    """Whether a transaction moves the chain's native coin or a token."""

    NATIVE = "NATIVE"
    TOKEN = "TOKEN"


class TokenStandard(str, Enum):
    ERC20 = "ERC20"


class TransactionType(str, Enum):
    SEND = "SEND"
    RECEIVE = "RECEIVE"
    CONTRACT = "CONTRACT"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class AuthContextState(str, Enum):
    """Where a session currently stands in the login/registration flow."""

    GUEST = "GUEST"
    AUTHORIZED = "AUTHORIZED"
    UNAUTHORIZED = "UNAUTHORIZED"

    LOGIN = "LOGIN"
    REGISTER = "REGISTER"

    VERIFY_OTP = "VERIFY_OTP"
    RESEND_OTP = "RESEND_OTP"

    LOGOUT = "LOGOUT"


class Purpose(str, Enum):
    """What a pending one-time password is meant to authorize."""

    NONE = "NONE"

    LOGIN = "LOGIN"
    REGISTER = "REGISTER"

    TRANSFER = "TRANSFER"
    SWAP = "SWAP"

    RESET_PASSWORD = "RESET_PASSWORD"
    CHANGE_PASSWORD = "CHANGE_PASSWORD"
