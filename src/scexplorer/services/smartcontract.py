"""
Smart Contract Service - Contract metadata, source verification and ABI.

Stateless façade over an API transport. Each operation checks that an
address was given and forwards one request; replies and transport errors
are returned or raised unchanged.
"""

from __future__ import annotations

import threading
from typing import Any, Optional, Protocol

from ..errors import ScExplorerError


class ApiTransport(Protocol):
    def get(self, path: str, params: dict[str, Any]) -> Any:
        ...

    def post(self, path: str, body: dict[str, Any]) -> Any:
        ...


class MissingArgumentError(ScExplorerError, ValueError):
    exit_code = 2


def _require_address(address: Optional[str]) -> None:
    if not address:
        raise MissingArgumentError("Missing argument")


class SmartContractService:
    def __init__(self, api: ApiTransport) -> None:
        self._api = api

    def get_one_by_address(self, address: str) -> Any:
        """Fetch contract metadata for ``address``."""
        _require_address(address)
        return self._api.get(f"smartcontract/{address}", {})

    def verify_source_code(
        self,
        address: str,
        source_code: Any,
        abi: Any,
        version: Any,
        version_full_name: Any,
        optimizer: Any,
        optimizer_runs: Any,
        is_single_file: Any,
        libs: Any,
        evm: Any,
        via_ir: Any,
    ) -> Any:
        """
        Submit contract source for verification.

        All verification fields are sent as-is; compiling and matching
        bytecode happens on the server.
        """
        _require_address(address)
        body = {
            "sourceCode": source_code,
            "abi": abi,
            "version": version,
            "versionFullName": version_full_name,
            "optimizer": optimizer,
            "optimizerRuns": optimizer_runs,
            "isSingleFile": is_single_file,
            "libs": libs,
            "evm": evm,
            "viaIR": via_ir,
        }
        return self._api.post(f"smartcontract/verify/{address}", body)

    def get_abi_by_address(self, address: str) -> Any:
        """Fetch the ABI for ``address``."""
        _require_address(address)
        return self._api.get(f"smartcontract/abi/{address}", {})


_default_service: Optional[SmartContractService] = None
_default_lock = threading.Lock()


def smart_contract_service() -> SmartContractService:
    """Process-wide service over the configured ApiService (built on first use)."""
    global _default_service
    with _default_lock:
        if _default_service is None:
            from ..config import load_config
            from ..transport.api import ApiService

            _default_service = SmartContractService(ApiService.from_config(load_config()))
        return _default_service
