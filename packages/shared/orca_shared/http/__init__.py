"""HTTP client package."""

from orca_shared.http.fetcher import OrcaFetcher
from orca_shared.http.types import UNSET, RawEnvelope, RequestOptions, Unset

__all__ = ["OrcaFetcher", "RawEnvelope", "RequestOptions", "UNSET", "Unset"]
