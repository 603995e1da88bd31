from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Message:
    id: int
    sender: str
    recipient: str
    body: str
    timestamp: int

    def is_visible_to(self, username: str) -> bool:
        return username in (self.sender, self.recipient)
