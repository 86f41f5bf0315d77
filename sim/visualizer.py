"""Pygame host — window, keyboard input, score tones and display-refresh frames."""

from typing import Optional

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None

from pong.config import DEFAULT_CONFIG, GameConfig
from pong.controls import DEFAULT_KEY_BINDINGS, QUIT, InputState
from pong.game import PongGame
from pong.loop import FrameLoop
from pong.types import PLAY, BounceEvent, ScoreEvent

# Colors
BG_COLOR = (12, 12, 22)
LINE_DIM = (60, 60, 80)
PADDLE_COLOR = (224, 224, 224)
BALL_COLOR = (255, 255, 255)
P1_COLOR = (78, 205, 196)
P2_COLOR = (233, 69, 96)
TEXT_DIM = (136, 136, 136)

SCORE_FONT_SIZE = 100
SCORE_Y = 75

SAMPLE_RATE = 44100


class PygameScheduler:
    """Frame scheduler paced by pygame's clock, one callback per display refresh."""

    def __init__(self, fps: int = 60):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._pending = None

    def request_next_frame(self, callback) -> None:
        self._pending = callback

    def run(self):
        while self._pending is not None:
            self.clock.tick(self.fps)
            callback, self._pending = self._pending, None
            callback(pygame.time.get_ticks())


class ToneAudio:
    """Short synthesized blips for points and paddle hits.

    Without an audio device the cues are silently skipped; the game never
    sees an audio failure.
    """

    def __init__(self):
        self.sounds = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        except pygame.error as exc:
            print(f"Audio disabled: {exc}")
            return
        self.sounds["score"] = self.make_tone(220, 0.24, 0.30)
        self.sounds["paddle"] = self.make_tone(560, 0.05, 0.25)
        self.sounds["wall"] = self.make_tone(440, 0.04, 0.15)

    @staticmethod
    def make_tone(freq_hz, seconds, volume):
        t = np.arange(int(SAMPLE_RATE * seconds)) / SAMPLE_RATE
        envelope = np.linspace(1.0, 0.0, len(t))
        wave = np.sin(2.0 * np.pi * freq_hz * t) * envelope
        samples = (32767 * volume * wave).astype(np.int16)
        return pygame.mixer.Sound(buffer=samples.tobytes())

    def play(self, name):
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def on_score(self, event: ScoreEvent):
        self.play("score")

    def on_bounce(self, event: BounceEvent):
        self.play("paddle" if event.kind == "paddle" else "wall")


class PygameRenderer:
    """Draws paddles, ball, centre line and both scores."""

    def __init__(self, screen, config: GameConfig):
        self.screen = screen
        self.config = config
        self.font_score = pygame.font.SysFont("monospace", SCORE_FONT_SIZE, bold=True)
        self.font_hint = pygame.font.SysFont("monospace", 18)

    def _draw_centered(self, text, font, color, center):
        surface = font.render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def __call__(self, game: PongGame):
        w, h = self.config.width, self.config.height
        self.screen.fill(BG_COLOR)

        dash, gap = 20, 16
        for y in range(0, h, dash + gap):
            pygame.draw.rect(self.screen, LINE_DIM, (w // 2 - 2, y, 4, dash))

        self._draw_centered(str(game.p1_score), self.font_score, P1_COLOR, (int(w * 0.25), SCORE_Y))
        self._draw_centered(str(game.p2_score), self.font_score, P2_COLOR, (int(w * 0.75), SCORE_Y))

        for paddle in (game.player1, game.player2):
            pygame.draw.rect(self.screen, PADDLE_COLOR, pygame.Rect(*map(round, paddle.rect)))
        pygame.draw.rect(self.screen, BALL_COLOR, pygame.Rect(*map(round, game.ball.rect)))

        if game.state != PLAY:
            self._draw_centered("ENTER to serve", self.font_hint, TEXT_DIM, (w // 2, h - 30))

        pygame.display.flip()


def run_visualizer(config: GameConfig = DEFAULT_CONFIG, bindings: Optional[dict] = None):
    """Open the Pong window and play until it is closed or ESC is pressed.

    Returns the finished game, or None when pygame is not installed.
    """
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return None

    if bindings is None:
        bindings = DEFAULT_KEY_BINDINGS

    pygame.mixer.pre_init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Pong")

    audio = ToneAudio()
    game = PongGame(config, on_score=audio.on_score, on_bounce=audio.on_bounce)
    scheduler = PygameScheduler(config.fps)
    inputs = InputState()

    def poll(state: InputState):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                state.apply_key(pygame.key.name(event.key), event.type == pygame.KEYDOWN, bindings)
        if state.consume(QUIT):
            loop.stop()

    loop = FrameLoop(
        game, scheduler, inputs,
        render=PygameRenderer(screen, config),
        poll=poll,
    )
    loop.start()
    try:
        scheduler.run()
    finally:
        pygame.quit()

    return game
