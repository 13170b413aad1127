"""
HitCraft
Decoupled event handling for game objects.

- core.events: EventChannel (subscribe / unsubscribe / publish)
- core.entities: Enemy raises hits, Player shoots
- core.effects: ScoreBoard and LoggerHandler listen
- main: host loop (headless or pygame)
"""
