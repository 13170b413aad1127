"""
Simple Renderer - geometric shapes only
Player is a circle, enemies are triangles with a health bar.

Interface used by hitcraft.main:
- __init__(width, height)
- render_frame(game)
- handle_input() -> dict
- cleanup()
"""
import pygame
from typing import Dict, Any, Optional

from hitcraft.core.config import FPS, TILE_SIZE


class Camera:
    """Maps world tiles to window pixels around a centre point."""

    def __init__(self, screen_width: int, screen_height: int, tile_size: int = TILE_SIZE):
        self.tile_size = tile_size
        self.half_w = screen_width // 2
        self.half_h = screen_height // 2
        self.x, self.y = 0.0, 0.0

    def center_on(self, wx: float, wy: float) -> None:
        self.x, self.y = wx, wy

    def to_screen(self, wx: float, wy: float) -> tuple:
        return (int(self.half_w + (wx - self.x) * self.tile_size),
                int(self.half_h + (wy - self.y) * self.tile_size))

    def to_world(self, sx: int, sy: int) -> tuple:
        return (self.x + (sx - self.half_w) / self.tile_size,
                self.y + (sy - self.half_h) / self.tile_size)


class SimpleRenderer:
    """Pygame renderer using plain colored shapes."""

    # Colors
    COLOR_BG = (20, 20, 30)
    COLOR_PLAYER = (52, 152, 219)  # Blue
    COLOR_ENEMY = (231, 76, 60)    # Red
    COLOR_DEAD = (90, 90, 90)
    COLOR_HEALTH_BG = (60, 60, 60)
    COLOR_HEALTH_GREEN = (100, 200, 100)
    COLOR_TEXT = (255, 255, 255)
    COLOR_HINT = (150, 150, 150)

    def __init__(self, width: int = 800, height: int = 600, tile_size: int = TILE_SIZE):
        pygame.init()
        pygame.display.set_caption("HitCraft")

        self.width = width
        self.height = height
        self.tile_size = tile_size

        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.camera = Camera(width, height, tile_size)

    def render_frame(self, game: Any, camera: Optional[Camera] = None) -> None:
        """Render one frame of the game."""
        if camera is None:
            camera = self.camera

        self.screen.fill(self.COLOR_BG)

        for enemy in game.enemies:
            self._draw_enemy(enemy, camera)
        if game.player:
            sx, sy = camera.to_screen(game.player.x, game.player.y)
            pygame.draw.circle(self.screen, self.COLOR_PLAYER, (sx, sy), int(self.tile_size * 0.4))

        self._draw_ui(game)

        pygame.display.flip()
        self.clock.tick(FPS)

    def _draw_enemy(self, enemy, camera) -> None:
        sx, sy = camera.to_screen(enemy.x, enemy.y)
        radius = int(self.tile_size * 0.4)
        color = self.COLOR_ENEMY if enemy.alive else self.COLOR_DEAD

        # Triangle pointing left, at the player
        points = [
            (sx - radius, sy),
            (sx + radius, sy - radius),
            (sx + radius, sy + radius),
        ]
        pygame.draw.polygon(self.screen, color, points)
        self._draw_health_bar(enemy, sx, sy)

    def _draw_health_bar(self, entity, sx: int, sy: int) -> None:
        """Draw health bar above entity."""
        bar_w = 30
        bar_h = 4
        bar_x = sx - bar_w // 2
        bar_y = sy - int(self.tile_size * 0.7)

        pygame.draw.rect(
            self.screen, self.COLOR_HEALTH_BG,
            (bar_x, bar_y, bar_w, bar_h)
        )
        health_w = int(bar_w * entity.hp / entity.max_hp) if entity.max_hp else 0
        pygame.draw.rect(
            self.screen, self.COLOR_HEALTH_GREEN,
            (bar_x, bar_y, health_w, bar_h)
        )

    def _draw_ui(self, game) -> None:
        """Draw the scoreboard and a controls hint."""
        text_surface = self.font.render(f"Enemies hit: {game.score}", True, self.COLOR_TEXT)
        self.screen.blit(text_surface, (10, 10))

        hint_surface = self.font.render("LMB: Shoot enemy | ESC: Quit", True, self.COLOR_HINT)
        self.screen.blit(hint_surface, (10, self.height - 30))

    def handle_input(self) -> Dict[str, Any]:
        """Process pygame events and return input state."""
        result = {
            'quit': False,
            'left_click': None,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    result['quit'] = True
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:  # Left click
                    result['left_click'] = event.pos

        return result

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
