"""
Commands - CLI command implementations for scexplorer.

Each module corresponds to a top-level CLI command group:
- contract: show / abi / verify smart contracts
"""
