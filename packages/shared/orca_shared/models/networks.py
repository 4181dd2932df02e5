"""Blockchain network and token icon descriptors."""

from __future__ import annotations

from pydantic import ConfigDict

from orca_shared.models.base import CamelModel
from orca_shared.models.enums import TokenStandard


class Network(CamelModel):
    """A supported blockchain network."""

    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int
    blockchain: str
    token_standard: TokenStandard | None = None


class TokenIcon(CamelModel):
    """Display icon for a chain or token."""

    model_config = ConfigDict(frozen=True)

    name: str
    link: str
