"""Raw result of one HTTP exchange."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class HttpOutcome:
    """
    Transport-level result from the HTTP executor.
    Consumed once by the response transformer, then dropped.
    """

    status_code: int
    status_text: str
    final_url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    charset: Optional[str] = None
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    def header_map(self) -> dict[str, str]:
        """Headers as a mapping; repeated names are joined with ', '."""
        merged: dict[str, str] = {}
        for name, value in self.headers:
            if name in merged:
                merged[name] = f"{merged[name]}, {value}"
            else:
                merged[name] = value
        return merged
