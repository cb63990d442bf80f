"""
Transport - HTTP access to the explorer backend.

Exposes the generic ``get(path, params)`` / ``post(path, body)`` client that
service modules build their calls on.
"""
