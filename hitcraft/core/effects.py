"""
HitCraft Effects - the consumer side

Handlers subscribe themselves to a channel they are given. The Enemy
class never mentions them.
"""
from typing import List, Optional

from .events import EventChannel, HitEvent, Subscription


class ScoreBoard:
    """Counts enemy hits.

    Subscribing is automatic, unsubscribing is NOT: a ScoreBoard that is
    thrown away keeps being called until close() is called (or the
    `with` block around it ends).
    """

    def __init__(self, channel: EventChannel[HitEvent], verbose: bool = False):
        self.verbose = verbose
        self._enemies_hit = 0
        self.last_hit: Optional[HitEvent] = None
        self._subscription: Subscription = channel.subscription(self.on_enemy_hit)

    @property
    def enemies_hit(self) -> int:
        return self._enemies_hit

    @property
    def subscribed(self) -> bool:
        return self._subscription.active

    def on_enemy_hit(self, source, event: HitEvent) -> None:
        self._enemies_hit += 1
        self.last_hit = event
        if self.verbose:
            print(f"{self._enemies_hit} enemies have been hit!")

    def close(self) -> None:
        """Stop listening. Safe to call more than once."""
        self._subscription.close()

    def __enter__(self) -> "ScoreBoard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LoggerHandler:
    """Simple handler that logs hits to console."""

    def __init__(self, channel: EventChannel[HitEvent], verbose: bool = False):
        self.verbose = verbose
        self.lines: List[str] = []
        self._subscription = channel.subscription(self.on_hit)

    def on_hit(self, source, event: HitEvent) -> None:
        shooter = f"entity {event.shooter_id}" if event.shooter_id is not None else "nobody"
        line = (f"[HIT] {source.kind} {event.enemy_id} hit by {shooter} "
                f"at ({event.pos[0]:.1f}, {event.pos[1]:.1f}), hp left: {event.hp_remaining}")
        self.lines.append(line)
        if self.verbose:
            print(line)

    def close(self) -> None:
        self._subscription.close()
