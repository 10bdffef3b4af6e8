from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Station:
    code: str
    name_long: str | None = None
    name_medium: str | None = None
    name_short: str | None = None
    uic_code: str | None = None
    country: str | None = None

    def matches(self, query: str) -> bool:
        """Case-insensitive match against the code and every name variant."""

        needle = query.strip().lower()
        if not needle:
            return False
        candidates = (self.code, self.name_long, self.name_medium, self.name_short)
        return any(c is not None and c.lower() == needle for c in candidates)
