from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class SymbolUniverse:
    symbols: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, tuple):
            raise ValueError("symbols must be a tuple")
        seen: set[str] = set()
        for s in self.symbols:
            if not isinstance(s, str) or not s.strip():
                raise ValueError("symbol cannot be empty")
            if s in seen:
                raise ValueError(f"duplicate symbol '{s}'")
            seen.add(s)

    @classmethod
    def parse(cls, raw: str) -> "SymbolUniverse":
        """"BTC, eth,LTC" -> ("BTC", "ETH", "LTC"), ordre conservé."""
        items = [part.strip().upper() for part in raw.split(",")]
        return cls(symbols=tuple(s for s in items if s))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)
