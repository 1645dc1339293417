"""Minification result snapshot."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MinificationResult:
    """Minified document together with the stylesheet size totals."""

    text: str
    original_bytes: int
    minified_bytes: int

    def reduced_bytes(self) -> int:
        return self.original_bytes - self.minified_bytes

    def reduced_percentage(self) -> float:
        """Percentage of stylesheet bytes removed; 0.0 when there was no CSS."""
        if not self.original_bytes:
            return 0.0
        return self.reduced_bytes() / self.original_bytes * 100

    def to_dict(self) -> dict:
        return {
            "html": self.text,
            "original_bytes": self.original_bytes,
            "minified_bytes": self.minified_bytes,
            "reduced_bytes": self.reduced_bytes(),
            "reduced_percentage": round(self.reduced_percentage(), 2),
        }

    def __str__(self) -> str:
        return self.text
