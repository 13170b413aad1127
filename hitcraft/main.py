#!/usr/bin/env python3
"""
HitCraft - Event Channel Demo
=============================

Run with: python -m hitcraft.main [--headless] [--verbose]

The host loop only ever talks to the Player. Enemies raise hits on a
channel, the ScoreBoard listens on it - neither knows about the other.
"""
import argparse
import logging
import sys
import time
from typing import List, Optional

from hitcraft.core.config import SETTINGS, TILE_SIZE, Settings, load_settings
from hitcraft.core.effects import LoggerHandler, ScoreBoard
from hitcraft.core.entities import Enemy, Player, next_entity_id
from hitcraft.core.events import EventChannel, HitEvent

LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


class Game:
    """Main game controller."""

    CLICK_RADIUS = 0.6  # Tiles

    def __init__(self, settings: Optional[Settings] = None, verbose: bool = False):
        self.settings = settings or SETTINGS
        self.verbose = verbose
        self.running = True
        self.game_time = 0.0
        self.accumulator = 0.0
        self.last_time = time.time()
        self._fire_cooldown = self.settings.fire_interval

        # One channel for every enemy's hits, handed to producers and consumers
        self.channel: EventChannel[HitEvent] = EventChannel("enemy.on_hit", self.settings.error_policy)

        self.player: Optional[Player] = None
        self.enemies: List[Enemy] = []
        self.scoreboard: Optional[ScoreBoard] = None
        self.logger: Optional[LoggerHandler] = None

    @property
    def width(self) -> float:
        return self.settings.screen_width / TILE_SIZE

    @property
    def height(self) -> float:
        return self.settings.screen_height / TILE_SIZE

    def setup(self) -> None:
        """Place the player and the enemies, attach the listeners."""
        mid_y = self.height / 2
        self.player = Player(next_entity_id(), (2.0, mid_y), self.channel,
                             enemy_hp=self.settings.enemy_hp)

        count = self.settings.enemy_count
        spacing = self.height / (count + 1)
        self.enemies = [
            Enemy(next_entity_id(), (self.width - 4.0, spacing * (i + 1)), self.channel,
                  hp=self.settings.enemy_hp)
            for i in range(count)
        ]

        self.scoreboard = ScoreBoard(self.channel, verbose=self.verbose)
        self.logger = LoggerHandler(self.channel, verbose=self.verbose)
        LOGGER.info("Game set up with %d enemies", count)

    def alive_enemies(self) -> List[Enemy]:
        return [e for e in self.enemies if e.alive]

    def update(self) -> None:
        """Update game state with fixed timestep."""
        current_time = time.time()
        frame_time = current_time - self.last_time
        self.last_time = current_time

        self.accumulator += frame_time

        sim_dt = self.settings.sim_dt
        while self.accumulator >= sim_dt:
            self._tick(sim_dt)
            self.accumulator -= sim_dt

    def _tick(self, dt: float) -> None:
        """Advance the simulation; the player fires every fire_interval."""
        if not self.running:
            return
        self.game_time += dt
        self._fire_cooldown -= dt
        if self._fire_cooldown <= 0:
            self._fire_cooldown += self.settings.fire_interval
            targets = self.alive_enemies()
            if targets:
                self.player.shoot(targets[0])

        if not self.alive_enemies():
            LOGGER.info("All enemies down after %.1fs", self.game_time)
            self.running = False

    def get_enemy_at(self, x: float, y: float) -> Optional[Enemy]:
        """Find a live enemy near (x, y) in tile coordinates."""
        for enemy in self.alive_enemies():
            if (enemy.x - x) ** 2 + (enemy.y - y) ** 2 <= self.CLICK_RADIUS ** 2:
                return enemy
        return None

    def handle_click(self, x: float, y: float) -> Optional[Enemy]:
        """Shoot whatever live enemy was clicked."""
        enemy = self.get_enemy_at(x, y)
        if enemy is not None:
            self.player.shoot(enemy)
        return enemy

    @property
    def score(self) -> int:
        return self.scoreboard.enemies_hit if self.scoreboard else 0

    def cleanup(self) -> None:
        """Unsubscribe the listeners; nobody does it for them."""
        if self.scoreboard:
            self.scoreboard.close()
        if self.logger:
            self.logger.close()
        self.channel.clear()


def run_headless(game: Game, ticks: int) -> None:
    for _ in range(ticks):
        if not game.running:
            break
        game._tick(game.settings.sim_dt)


def main(argv=None):
    parser = argparse.ArgumentParser(description="HitCraft - decoupled event handling demo")
    parser.add_argument('--headless', action='store_true',
                        help='Run without a window')
    parser.add_argument('--ticks', type=int, default=300,
                        help='Ticks to simulate in headless mode')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every hit to console')
    parser.add_argument('--isolate', action='store_true',
                        help='Keep calling handlers after one fails')
    parser.add_argument('--settings', default=None,
                        help='Path to a settings JSON file')
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    overrides = {"error_policy": "isolate"} if args.isolate else {}
    settings = load_settings(args.settings, **overrides)

    game = Game(settings, verbose=args.verbose)
    game.setup()

    if args.headless:
        try:
            run_headless(game, args.ticks)
        finally:
            game.cleanup()
        print(f"Game ended. Score: {game.score}")
        return

    try:
        from frontends.simple_renderer import SimpleRenderer
        renderer = SimpleRenderer(settings.screen_width, settings.screen_height)
    except ImportError as e:
        print(f"Error: pygame is required for the windowed version: {e}")
        print("Install with: pip install pygame, or run with --headless")
        sys.exit(1)

    renderer.camera.center_on(game.width / 2, game.height / 2)
    game.last_time = time.time()
    print("HitCraft started!")
    print("Controls: Click an enemy to shoot it, ESC=Quit")

    try:
        while game.running:
            input_state = renderer.handle_input()
            if input_state['quit']:
                game.running = False
            if input_state['left_click']:
                wx, wy = renderer.camera.to_world(*input_state['left_click'])
                game.handle_click(wx, wy)

            game.update()
            renderer.render_frame(game)

    except KeyboardInterrupt:
        pass
    finally:
        renderer.cleanup()
        game.cleanup()

    print(f"\nGame ended. Score: {game.score}")


if __name__ == '__main__':
    main()
