"""
HitCraft Entities - the producer side

Enemy raises HitEvents on a channel it is handed. It has no idea who is
listening. Player just kicks off the chain by shooting.
"""
from itertools import count
from typing import Optional

from .config import SETTINGS
from .events import EventChannel, HitEvent

_entity_ids = count(1)


def next_entity_id() -> int:
    """Hand out a fresh entity id."""
    return next(_entity_ids)


class Entity:
    """Base class for all game objects."""

    def __init__(self, entity_id: int, pos: tuple):
        self.id = entity_id
        self.x, self.y = pos

    @property
    def pos(self) -> tuple:
        return (self.x, self.y)

    @property
    def kind(self) -> str:
        return self.__class__.__name__


class Enemy(Entity):
    """Source of hit events.

    Two channels are raised on every hit:
    - the shared channel passed in (every enemy, e.g. for a scoreboard)
    - self.on_hit, owned by this enemy (listeners interested in just it)
    """

    def __init__(self, entity_id: int, pos: tuple, channel: EventChannel[HitEvent],
                 hp: Optional[int] = None):
        super().__init__(entity_id, pos)
        self.channel = channel
        self.on_hit: EventChannel[HitEvent] = EventChannel(
            f"enemy-{entity_id}.on_hit", channel.error_policy
        )
        self.hp = hp if hp is not None else SETTINGS.enemy_hp
        self.max_hp = self.hp
        self.hits_taken = 0

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def hit(self, shooter: Optional[Entity] = None) -> HitEvent:
        """Take a hit and raise it. Dead enemies still raise the event."""
        self.hits_taken += 1
        self.hp = max(0, self.hp - 1)

        event = HitEvent(
            enemy_id=self.id,
            hits_taken=self.hits_taken,
            hp_remaining=self.hp,
            pos=self.pos,
            shooter_id=shooter.id if shooter is not None else None,
        )
        self.channel.publish(self, event)
        self.on_hit.publish(self, event)
        return event


class Player(Entity):
    """Kicks off the chain of events. Not needed for the event itself."""

    def __init__(self, entity_id: int, pos: tuple, enemy_channel: EventChannel[HitEvent],
                 enemy_hp: Optional[int] = None):
        super().__init__(entity_id, pos)
        self.enemy_channel = enemy_channel
        self.enemy_hp = enemy_hp  # HP for stand-in enemies
        self.shots_fired = 0

    def shoot(self, target: Optional[Enemy] = None) -> Enemy:
        """Hit target, or a stand-in enemy when there is nothing to aim at."""
        if target is None:
            target = Enemy(next_entity_id(), (self.x + 1.0, self.y), self.enemy_channel,
                           hp=self.enemy_hp)
        self.shots_fired += 1
        target.hit(shooter=self)
        return target
