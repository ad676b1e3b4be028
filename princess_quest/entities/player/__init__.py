from .player_core import Player
from .player_state import PlayerDamageState

__all__ = ["Player", "PlayerDamageState"]
