"""
event_manager.py
----------------
Event-driven communication between the simulation core and its adapters.

The core never calls audio or UI code directly; it dispatches events and
adapters subscribe. Each session owns its own EventManager instance.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type, Union
from princess_quest.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class SoundEvent(BaseEvent):
    """Request to play (or stop) a named sound cue."""
    name: str
    stop: bool = False


@dataclass(frozen=True)
class MusicEvent(BaseEvent):
    """Pause or resume background music without rewinding it."""
    paused: bool


@dataclass(frozen=True)
class MuteEvent(BaseEvent):
    """Dispatched when the mute state changes."""
    muted: bool


@dataclass(frozen=True)
class EnemyDefeatedEvent(BaseEvent):
    """Dispatched when the player stomps an enemy."""
    position: tuple
    variant: str
    remaining: int


@dataclass(frozen=True)
class CollectibleCollectedEvent(BaseEvent):
    """Dispatched when the player picks up a collectible."""
    position: tuple
    score: int


@dataclass(frozen=True)
class PlayerDamagedEvent(BaseEvent):
    """Dispatched after damage has been applied to the player."""
    amount: int
    health: int
    lives: int


@dataclass(frozen=True)
class LevelStartedEvent(BaseEvent):
    """Dispatched after a level has been generated."""
    level: int
    is_final: bool


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched on the terminal transition (defeat or victory)."""
    score: int
    victory: bool


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so the caller's tick
        always completes.

        Args:
            event: Event instance to dispatch
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    def play(self, name: str) -> None:
        """Shortcut for dispatching a SoundEvent."""
        self.dispatch(SoundEvent(name))

    def stop(self, name: str) -> None:
        """Shortcut for dispatching a stopping SoundEvent."""
        self.dispatch(SoundEvent(name, stop=True))

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Union[Type[BaseEvent], None] = None) -> int:
        """Count subscribers for one event type, or all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
