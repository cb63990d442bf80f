"""Error base shared by the scexplorer modules."""

from __future__ import annotations


class ScExplorerError(RuntimeError):
    """Base error; ``exit_code`` is the CLI exit status for this failure."""

    exit_code: int = 1
