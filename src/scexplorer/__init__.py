"""
scexplorer - Client for the smart contract endpoints of a block explorer API.

Provides contract metadata lookup, source code verification and ABI
retrieval over a shared JSON transport built on httpx.
"""
__all__ = [
    # Service
    "SmartContractService",
    "MissingArgumentError",
    "smart_contract_service",
    # Transport
    "ApiService",
    "ApiError",
    # Config
    "ApiConfig",
    "ConfigError",
    "load_config",
    # Errors
    "ScExplorerError",
]

from .errors import ScExplorerError
from .config import ApiConfig, ConfigError, load_config
from .transport.api import ApiError, ApiService
from .services.smartcontract import (
    MissingArgumentError,
    SmartContractService,
    smart_contract_service,
)
