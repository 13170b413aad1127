"""
HitCraft Events - Event Channel

An EventChannel is a named list of handlers plus a publish() that calls
all of them, in order, with (source, payload).

Producers publish, consumers subscribe. The Enemy never learns that a
ScoreBoard exists - it just fires and forgets.
"""
import logging
import threading
import weakref
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Handler = Callable[[Any, Any], None]


# === Event Dataclasses ===

@dataclass(frozen=True)
class HitEvent:
    """Fired when an enemy is hit.

    Used by: Enemy.hit()
    Handled by: ScoreBoard, LoggerHandler
    """
    enemy_id: int
    hits_taken: int
    hp_remaining: int
    pos: tuple
    shooter_id: Optional[int] = None  # None when nobody in particular fired


class ErrorPolicy(Enum):
    """What publish() does when a handler raises."""
    PROPAGATE = "propagate"  # re-raise, skip the remaining handlers
    ISOLATE = "isolate"      # log and carry on with the next handler


# === Subscriptions ===

_token_ids = count(1)


class SubscriptionToken:
    """Identifies exactly one registration on a channel.

    Subscribing the same handler twice gives two different tokens.
    """

    __slots__ = ("id", "channel_name", "_ref", "_weak", "active")

    def __init__(self, channel_name: str, handler: Handler, weak: bool = False):
        self.id = next(_token_ids)
        self.channel_name = channel_name
        self._weak = weak
        self._ref = weakref.WeakMethod(handler) if weak else handler
        self.active = True

    @property
    def handler(self) -> Optional[Handler]:
        """The registered callable, or None once a weak owner is gone."""
        if self._weak:
            return self._ref()
        return self._ref

    def matches(self, handler: Handler) -> bool:
        return self.handler == handler

    def __repr__(self) -> str:
        state = "active" if self.active else "removed"
        return f"<SubscriptionToken #{self.id} on {self.channel_name!r} ({state})>"


class Subscription:
    """Scoped guard around a token: closing it unregisters the handler.

        with channel.subscription(board.on_enemy_hit):
            enemy.hit()   # counted
        enemy.hit()       # not counted
    """

    def __init__(self, channel: "EventChannel", token: SubscriptionToken):
        self.channel = channel
        self.token = token

    @property
    def active(self) -> bool:
        return self.token.active

    def close(self) -> None:
        """Unregister. Calling it again does nothing."""
        self.channel.unsubscribe(self.token)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# === EventChannel ===

class EventChannel(Generic[T]):
    """A named registry of handlers with a synchronous multicast publish.

    Handlers are called on the caller's thread in registration order.
    publish() walks a snapshot of the registrations, so a handler may
    subscribe or unsubscribe (itself or others) while being called:
    - handlers added during a publish first run on the next publish
    - handlers removed during a publish are skipped for the rest of it
    """

    def __init__(self, name: str = "channel", error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE):
        self.name = name
        self.error_policy = ErrorPolicy(error_policy)
        self._tokens: List[SubscriptionToken] = []
        self._lock = threading.RLock()
        self._history: List[Tuple[Any, T]] = []  # For debugging/replay
        self._recording = False

    def subscribe(self, handler: Handler, weak: bool = False) -> SubscriptionToken:
        """Register a handler. No uniqueness check - duplicates are called twice.

        Args:
            handler: Callable taking (source, payload)
            weak: Hold a bound method weakly; it drops out once its
                owner is garbage collected. Plain functions can't be weak.
        """
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")
        if weak and not hasattr(handler, "__self__"):
            raise TypeError("weak subscriptions need a bound method")

        token = SubscriptionToken(self.name, handler, weak=weak)
        with self._lock:
            self._tokens.append(token)
        LOGGER.debug("%s: subscribed %r as #%d", self.name, handler, token.id)
        return token

    def subscription(self, handler: Handler, weak: bool = False) -> Subscription:
        """Subscribe and wrap the token in a Subscription guard."""
        return Subscription(self, self.subscribe(handler, weak=weak))

    def unsubscribe(self, target: Union[SubscriptionToken, Handler]) -> bool:
        """Remove a registration by token, or the first one for a handler.

        Returns False (and changes nothing) if it isn't registered.
        """
        with self._lock:
            if isinstance(target, SubscriptionToken):
                token = target if target in self._tokens else None
            else:
                token = next((t for t in self._tokens if t.matches(target)), None)
            if token is None:
                return False
            self._tokens.remove(token)
            token.active = False
        LOGGER.debug("%s: unsubscribed #%d", self.name, token.id)
        return True

    def publish(self, source: Any, payload: T) -> None:
        """Call every registered handler with (source, payload).

        Args:
            source: Whoever raised the event (e.g. the Enemy that was hit)
            payload: Data describing this occurrence (e.g. a HitEvent)
        """
        with self._lock:
            if self._recording:
                self._history.append((source, payload))
            snapshot = list(self._tokens)

        for token in snapshot:
            if not token.active:
                continue
            handler = token.handler
            if handler is None:
                self.unsubscribe(token)
                continue
            try:
                handler(source, payload)
            except Exception:
                if self.error_policy is ErrorPolicy.PROPAGATE:
                    raise
                LOGGER.exception("%s: handler %r failed", self.name, handler)

    def handlers(self) -> List[Handler]:
        """Live handlers in registration order."""
        with self._lock:
            found = [t.handler for t in self._tokens]
        return [h for h in found if h is not None]

    @property
    def handler_count(self) -> int:
        return len(self.handlers())

    def __len__(self) -> int:
        return self.handler_count

    def __bool__(self) -> bool:
        # An empty channel is still a channel
        return True

    def clear(self) -> None:
        """Drop all registrations."""
        with self._lock:
            for token in self._tokens:
                token.active = False
            self._tokens.clear()

    def start_recording(self) -> None:
        """Start recording (source, payload) pairs for replay/debugging."""
        with self._lock:
            self._recording = True
            self._history.clear()

    def stop_recording(self) -> List[Tuple[Any, T]]:
        """Stop recording and return what was published meanwhile."""
        with self._lock:
            self._recording = False
            return self._history.copy()

    def __repr__(self) -> str:
        return f"<EventChannel {self.name!r} handlers={self.handler_count}>"


# === Shared Channel ===
# Game code passes channels around explicitly. This is for hosts that
# really want one process-wide instance; init and teardown are explicit.

_default_channel: Optional[EventChannel] = None


def init_default_channel(name: str = "default",
                         error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE) -> EventChannel:
    """Create the shared channel (replacing any previous one)."""
    global _default_channel
    teardown_default_channel()
    _default_channel = EventChannel(name, error_policy)
    return _default_channel


def get_default_channel() -> EventChannel:
    """Return the shared channel. Raises RuntimeError before init."""
    if _default_channel is None:
        raise RuntimeError("default channel not initialised; call init_default_channel() first")
    return _default_channel


def teardown_default_channel() -> None:
    """Clear and drop the shared channel. Safe to call twice."""
    global _default_channel
    if _default_channel is not None:
        _default_channel.clear()
    _default_channel = None
