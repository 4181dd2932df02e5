"""Wallet, transaction and user records as returned by the API.

Amounts are kept as strings (``amount_raw``, ``value_raw``, ``balance``) since
on-chain integers routinely exceed what a JSON number can carry exactly.
"""

from __future__ import annotations

from datetime import datetime

from orca_shared.models.base import CamelModel
from orca_shared.models.enums import (
    AssetType,
    Role,
    TokenStandard,
    TransactionStatus,
    TransactionType,
)


class TokenTransfer(CamelModel):
    """A token movement decoded from a transaction's logs."""

    id: str
    transaction_id: str
    tx_hash: str
    token_address: str
    symbol: str
    decimals: int
    standard: TokenStandard
    amount_raw: str
    formatted_amount: str
    from_address: str
    to_address: str
    created_at: datetime


class TransactionReceipt(CamelModel):
    """Mined-transaction receipt. Everything but the keys is optional until mined."""

    id: str
    transaction_id: str
    tx_hash: str
    gas_used: str | None = None
    effective_gas_price: str | None = None
    fee_paid: str | None = None
    block_hash: str | None = None
    block_number: int | None = None
    nonce: int | None = None
    error_reason: str | None = None
    created_at: datetime


class Transaction(CamelModel):
    id: str
    wallet_id: str
    chain_id: int
    tx_hash: str | None = None
    type: TransactionType
    asset_type: AssetType
    from_address: str
    to_address: str | None = None
    value_raw: str | None = None
    value_formatted: str | None = None
    status: TransactionStatus
    block_number: int | None = None
    timestamp: datetime
    created_at: datetime


class Wallet(CamelModel):
    id: str
    user_id: str
    chain_id: int
    blockchain: str
    label: str | None = None
    address: str
    is_default: bool
    balance: str
    encrypted_mnemonic: str
    created_at: datetime
    updated_at: datetime


class User(CamelModel):
    id: str
    email: str
    username: str
    password: str
    avatar_url: str | None = None
    role: Role
    is_verified: bool
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Records with their relations included
# ---------------------------------------------------------------------------


class TransactionResponse(Transaction):
    receipt: TransactionReceipt | None = None
    transfers: list[TokenTransfer] | None = None


class WalletResponse(Wallet):
    transactions: list[TransactionResponse] | None = None


class UserResponse(User):
    wallets: list[WalletResponse] | None = None


# ---------------------------------------------------------------------------
# Balances
# ---------------------------------------------------------------------------


class WalletBalance(CamelModel):
    symbol: str
    balance: str


class NativeBalance(WalletBalance):
    kind: str


class TokenBalance(WalletBalance):
    kind: str


# A wallet's native coin balance, or the list of its token balances.
BalanceResponse = NativeBalance | list[TokenBalance]
