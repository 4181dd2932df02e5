"""Domain contracts shared between the API and its clients."""

from orca_shared.models.auth import (
    AuthForm,
    CreateWalletForm,
    ImportWalletForm,
    LoginForm,
    RegisterForm,
    ResetPasswordForm,
    SendOTPForm,
    SessionCheckForm,
    SessionUser,
    StateResponse,
    VerifyOTPForm,
)
from orca_shared.models.entities import (
    BalanceResponse,
    NativeBalance,
    TokenBalance,
    TokenTransfer,
    Transaction,
    TransactionReceipt,
    TransactionResponse,
    User,
    UserResponse,
    Wallet,
    WalletBalance,
    WalletResponse,
)
from orca_shared.models.enums import (
    AssetType,
    AuthContextState,
    Purpose,
    Role,
    TokenStandard,
    TransactionStatus,
    TransactionType,
)
from orca_shared.models.networks import Network, TokenIcon
from orca_shared.models.responses import ResponseBody

__all__ = [
    "AssetType",
    "AuthContextState",
    "AuthForm",
    "BalanceResponse",
    "CreateWalletForm",
    "ImportWalletForm",
    "LoginForm",
    "NativeBalance",
    "Network",
    "Purpose",
    "RegisterForm",
    "ResetPasswordForm",
    "ResponseBody",
    "Role",
    "SendOTPForm",
    "SessionCheckForm",
    "SessionUser",
    "StateResponse",
    "TokenBalance",
    "TokenIcon",
    "TokenStandard",
    "TokenTransfer",
    "Transaction",
    "TransactionReceipt",
    "TransactionResponse",
    "TransactionStatus",
    "TransactionType",
    "User",
    "UserResponse",
    "VerifyOTPForm",
    "Wallet",
    "WalletBalance",
    "WalletResponse",
]
