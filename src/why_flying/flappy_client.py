#!/usr/bin/env python3
"""
flappy_client.py

Pygame window, input mapping and rendering for the single-player game.
The simulation itself lives in game_loop; this module only reads its state.
"""

import logging
import math
import random
from typing import Optional

import pygame

from .assets import CharacterRoster
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS
from .data_models import GamePhase, TickEvent, TickResult
from .effects import PygameEffects, NullEffects
from .game_loop import GameLoop
from .score_db import HighScoreStore
from .settings import GameConfig

logger = logging.getLogger(__name__)

SKY = (112, 197, 206)
WHITE = (255, 255, 255)
GOLD = (255, 215, 0)
RED = (255, 80, 80)

PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 2
LEVEL_BANNER_MS = 1500
SHAKE_MS = 500
SHAKE_PIXELS = 6

CHARACTER_KEYS = {pygame.K_1: "nidha", pygame.K_2: "aami"}


def pipe_color(score: int, saturation: float, lightness: float) -> pygame.Color:
    """Pipe hue drifts 5 degrees per point."""
    color = pygame.Color(0, 0, 0)
    color.hsla = ((90 + score * 5) % 360, saturation, lightness, 100)
    return color


def is_activate_event(event) -> bool:
    """Pointer or finger down. Mouse events SDL synthesizes from touches are skipped."""
    if event.type == pygame.FINGERDOWN:
        return True
    return event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False)


def handle_key(game: GameLoop, roster: CharacterRoster, key) -> bool:
    """Applies one key press. Returns False when the application should quit."""
    state = game.state
    if key == pygame.K_SPACE:
        game.activate()
    elif state.over and key == pygame.K_r:
        game.restart()
    elif state.over and key in (pygame.K_h, pygame.K_ESCAPE):
        game.go_home()
    elif state.phase is GamePhase.IDLE and key == pygame.K_ESCAPE:
        return False
    elif state.phase is GamePhase.IDLE and key in CHARACTER_KEYS:
        roster.select(CHARACTER_KEYS[key])
    return True


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Why Am I Flying?")

        self.roster = CharacterRoster()
        effects = self._init_audio()
        self.roster.load(self.config.asset_dir)

        self.store = HighScoreStore(self.config.db_file, self.config.high_score_key)
        self.game = GameLoop(
            config=self.config,
            store=self.store,
            effects=effects,
            flap_sound=self.roster.flap_sound,
        )

        # Time Management
        self.clock = pygame.time.Clock()
        self.level_banner_until = 0
        self.shake_until = 0

        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

    def _init_audio(self):
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return NullEffects()
        return PygameEffects()

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not handle_key(self.game, self.roster, event.key):
                        running = False
                elif is_activate_event(event):
                    self.game.activate()

            # Size is read every frame so a resize takes effect mid-run
            width, height = self.screen.get_size()
            result = self.game.tick(width, height)
            self._handle_tick(result)
            self._draw_game()

        self.store.close()
        pygame.quit()

    def _handle_tick(self, result: TickResult):
        now = pygame.time.get_ticks()
        if TickEvent.LEVEL_UP in result.events:
            self.level_banner_until = now + LEVEL_BANNER_MS
        if TickEvent.GAME_OVER in result.events:
            self.shake_until = now + SHAKE_MS

    # --- Rendering ---

    def _draw_game(self):
        """Renders the game state using Pygame."""
        width, height = self.screen.get_size()
        world = pygame.Surface((width, height))
        world.fill(SKY)

        self._draw_pipes(world, height)
        self._draw_bird(world)

        offset = (0, 0)
        if pygame.time.get_ticks() < self.shake_until:
            offset = (random.randint(-SHAKE_PIXELS, SHAKE_PIXELS),
                      random.randint(-SHAKE_PIXELS, SHAKE_PIXELS))
        self.screen.fill((0, 0, 0))
        self.screen.blit(world, offset)

        self._draw_hud(width, height)
        pygame.display.flip()

    def _draw_pipes(self, surface: pygame.Surface, height: int):
        score = self.game.state.score
        pipe_w = self.config.pipe_width
        gap = self.config.pipe_gap
        body_color = pipe_color(score, 60, 45)
        cap_color = pipe_color(score, 65, 45)
        border_color = pipe_color(score, 70, 20)

        for pipe in self.game.obstacles:
            top_height = pipe.gap_start
            bottom_top = pipe.gap_start + gap

            pygame.draw.rect(surface, body_color, (pipe.x, 0, pipe_w, top_height))
            pygame.draw.rect(surface, body_color, (pipe.x, bottom_top, pipe_w, height - bottom_top))

            cap_w = pipe_w + PIPE_CAP_OVERHANG * 2
            top_cap = pygame.Rect(pipe.x - PIPE_CAP_OVERHANG, top_height - PIPE_CAP_HEIGHT, cap_w, PIPE_CAP_HEIGHT)
            bottom_cap = pygame.Rect(pipe.x - PIPE_CAP_OVERHANG, bottom_top, cap_w, PIPE_CAP_HEIGHT)
            for cap in (top_cap, bottom_cap):
                pygame.draw.rect(surface, cap_color, cap)
                pygame.draw.rect(surface, border_color, cap, 2)

    def _draw_bird(self, surface: pygame.Surface):
        body = self.game.body
        center = (int(body.x + body.w / 2), int(body.y + body.h / 2))

        if not self.roster.sprite_ready:
            pygame.draw.circle(surface, GOLD, center, int(body.radius))
            return

        size = (max(1, int(body.w * body.scale_x)), max(1, int(body.h * body.scale_y)))
        sprite = pygame.transform.smoothscale(self.roster.sprite(), size)
        # pygame rotates counter-clockwise, positive rotation tilts nose down
        sprite = pygame.transform.rotate(sprite, -math.degrees(body.rotation))
        surface.blit(sprite, sprite.get_rect(center=center))

    def _blit_centered(self, text: str, font, color, y: int, width: int):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (width // 2 - surf.get_width() // 2, y))

    def _draw_hud(self, width: int, height: int):
        state = self.game.state

        if state.phase is GamePhase.IDLE:
            self._blit_centered("Why Am I Flying?", self.large_font, WHITE, height // 3, width)
            self._blit_centered(f"Character: {self.roster.selected}  (1 / 2 to change)",
                                self.font, WHITE, height // 3 + 60, width)
            self._blit_centered("Space / Click / Tap to start", self.font, WHITE, height // 3 + 95, width)
            self._blit_centered(f"Best: {state.high_score}", self.font, WHITE, height // 3 + 130, width)
            return

        if state.running:
            self._blit_centered(str(state.score), self.large_font, WHITE, 20, width)
            if pygame.time.get_ticks() < self.level_banner_until:
                self._blit_centered(f"Level {state.level}", self.large_font, GOLD, height // 4, width)
            return

        # Game over panel
        best = f"{state.high_score} (NEW!)" if state.new_best else str(state.high_score)
        self._blit_centered("Game Over", self.large_font, RED, height // 3, width)
        self._blit_centered(f"Score: {state.score}", self.font, WHITE, height // 3 + 60, width)
        self._blit_centered(f"Best: {best}", self.font, GOLD if state.new_best else WHITE,
                            height // 3 + 95, width)
        self._blit_centered("R = Restart | H = Home", self.font, WHITE, height // 3 + 140, width)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    client = FlappyClient(GameConfig.from_env())
    client.run()


if __name__ == "__main__":
    main()
