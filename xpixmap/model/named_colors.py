from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "named_colors.json"


def normalize_color_name(name: str) -> str:
    """Drop every non-letter character, so "Alice Blue" and "alice_blue" match."""
    return "".join(ch for ch in name if ch.isalpha())


class NamedColorRegistry:
    _cache: Dict[Path, "NamedColorRegistry"] = {}

    def __init__(self, entries: Iterable[Tuple[str, int]]) -> None:
        self._names: List[str] = []
        table: Dict[str, int] = {}
        for name, argb in entries:
            self._names.append(name)
            table[normalize_color_name(name).casefold()] = argb
        self._table: Mapping[str, int] = MappingProxyType(table)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "NamedColorRegistry":
        key = path.resolve()
        cached = cls._cache.get(key)
        if cached is not None:
            return cached
        raw = json.loads(path.read_text(encoding="utf-8"))
        registry = cls((name, int(value.lstrip("#"), 16)) for name, value in raw.items())
        cls._cache[key] = registry
        return registry

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def get(self, name: str) -> Optional[int]:
        return self._table.get(normalize_color_name(name).casefold())

    def __len__(self) -> int:
        return len(self._table)
