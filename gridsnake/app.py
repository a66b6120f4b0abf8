import logging

import pygame

from .audio import SoundBoard
from .config import *
from .engine import Game
from .render import Fonts, render
from .scheduler import Scheduler
from .storage import Storage

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}
DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
    pygame.K_4: "extreme",
    pygame.K_5: "endless",
}


class SnakeGame:
    """Window, keyboard and frame loop around a Game."""

    def __init__(self, storage=None):
        pygame.init()
        # Window includes game board plus an information panel on the right
        total_width = GAME_WIDTH + INFO_PANEL_WIDTH
        self.screen = pygame.display.set_mode((total_width, GAME_HEIGHT))
        pygame.display.set_caption("Grid Snake")
        self.clock = pygame.time.Clock()
        self.fonts = Fonts()
        self.sounds = SoundBoard()

        self.scheduler = Scheduler()
        self.game = Game(
            scheduler=self.scheduler,
            storage=storage or Storage(),
            play_sound=self.sounds.play,
        )
        self.running = True

    def handle_key(self, key):
        """Map one key press onto a game command."""
        game = self.game
        if key in DIRECTION_KEYS:
            game.turn(DIRECTION_KEYS[key])
        elif key in (pygame.K_SPACE, pygame.K_p):
            game.toggle_pause()
        elif key in (pygame.K_RETURN, pygame.K_r):
            game.new_game()
        elif key in DIFFICULTY_KEYS:
            game.set_difficulty(DIFFICULTY_KEYS[key])
        elif key == pygame.K_m:
            game.toggle_sound()
        elif key == pygame.K_n:
            game.step()
        elif key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False

    def run(self):
        """Main game loop."""
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)

                self.scheduler.run_pending()
                render(self.screen, self.game.state, self.fonts, self.scheduler.now())
                pygame.display.flip()
                self.clock.tick(FPS)
        finally:
            self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        self.game.close()
        pygame.quit()
