from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Player:
    """A player connected to the media server, identified by its id (MAC address)."""
    name: str = field(compare=False)
    id: str
