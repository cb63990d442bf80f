"""
Services - Named operations against the explorer backend.

Each module groups the calls for one backend resource:
- smartcontract: contract metadata, source verification, ABI
"""
