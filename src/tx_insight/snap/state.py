"""Explicit wallet-plugin state."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class PluginState:
    """
    State owned by the wallet host and passed to every handler.

    `world_id` is None until the user has proven they are a unique human.
    """
    world_id: Optional[str] = None

    @property
    def is_verified(self) -> bool:
        return self.world_id is not None

    def update(self, world_id: Optional[str]) -> None:
        self.world_id = world_id

    def snapshot(self) -> Optional[Dict[str, str]]:
        if self.world_id is None:
            return None
        return {'worldId': self.world_id}
