from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable


def read_text_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def parse_libraries(pairs: Iterable[str]) -> dict[str, str]:
    libs: dict[str, str] = {}
    for pair in pairs:
        name, sep, address = pair.partition("=")
        name, address = name.strip(), address.strip()
        if not sep or not name or not address:
            raise ValueError(f"Library must be NAME=ADDRESS: {pair!r}")
        libs[name] = address
    return libs


def dump_json(value: Any) -> str:
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
