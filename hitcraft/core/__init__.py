"""HitCraft Core - channel, producers and consumers"""
from .events import (
    EventChannel,
    ErrorPolicy,
    HitEvent,
    Subscription,
    SubscriptionToken,
    init_default_channel,
    get_default_channel,
    teardown_default_channel,
)
from .config import Settings, load_settings
from .entities import Entity, Enemy, Player
from .effects import ScoreBoard, LoggerHandler
