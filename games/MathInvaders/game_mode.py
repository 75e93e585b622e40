"""
MathInvaders Game Mode

Arithmetic questions ride falling ships toward the base. Typing a
ship's answer and pressing Enter shoots it down; ships that land cost a
life and a shield.
"""
import math
import random
from typing import Dict, List, Optional, Tuple

from mathdef.games.base_game import BaseGame
from mathdef.games.canvas import Canvas
from mathdef.games.game_state import GameState
from mathdef.games.input import key_event
from mathdef.games.input.key_event import KeyEvent
from mathdef.logging import get_logger
from mathdef.scheduling import FrameScheduler, Handle
from models import QuestionConfig, Vector2D
from games.MathInvaders import config, game_info
from games.MathInvaders.base import Base
from games.MathInvaders.beam import Beam
from games.MathInvaders.question_generator import QuestionGenerator
from games.MathInvaders.score import ScoreBoard
from games.MathInvaders.settings import GameSettings, question_config_from_args
from games.MathInvaders.ship import Ship
from games.MathInvaders.user_input import UserInput

log = get_logger('math_invaders')


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


class MathInvadersMode(BaseGame):
    """Math Invaders game mode - answer questions before they land.

    Time is driven by a FrameScheduler: start() registers a recurring
    spawn timer and requests the first frame; every frame runs update,
    breach detection and rendering, then requests the next frame while
    the game is running.

    States:
        RUNNING -> PAUSED: Escape (spawn timer cancelled, frames stop)
        PAUSED -> RUNNING: Escape (spawn timer recreated, frames resume)
        RUNNING -> OVER: lives reach zero; terminal
    """

    NAME = game_info.NAME
    DESCRIPTION = game_info.DESCRIPTION
    VERSION = game_info.VERSION
    AUTHOR = game_info.AUTHOR
    ARGUMENTS = game_info.ARGUMENTS

    def __init__(
        self,
        scheduler: Optional[FrameScheduler] = None,
        canvas: Optional[Canvas] = None,
        question_config: Optional[QuestionConfig] = None,
        rng: Optional[random.Random] = None,
        # CLI-style overrides (None = use config.py)
        max_number: Optional[int] = None,
        operators: Optional[str] = None,
        allow_negative: Optional[bool] = None,
        fractions: Optional[bool] = None,
        lives: Optional[int] = None,
        spawn_interval: Optional[float] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        pool_size: Optional[int] = None,
        **kwargs,  # Accept launcher arguments this game does not use
    ):
        """Initialize the game.

        Args:
            scheduler: Frame/timer scheduler (a private one if omitted)
            canvas: Surface rendered to at the end of every frame
            question_config: Question settings; overrides the CLI-style options
            rng: Random source for questions, spawn and miss positions
            max_number: Largest question operand
            operators: Operator symbols, e.g. "+-*/"
            allow_negative: Allow negative subtraction results
            fractions: Allow fractional division results
            lives: Starting lives
            spawn_interval: Milliseconds between spawns
            width: Field width (defaults to the canvas width, then config)
            height: Field height (defaults to the canvas height, then config)
            pool_size: Number of ship slots

        Raises:
            ConfigurationError: If any setting is invalid
        """
        if canvas is not None:
            canvas_width, canvas_height = canvas.size
            width = width if width is not None else canvas_width
            height = height if height is not None else canvas_height

        self._settings = GameSettings.from_settings(
            width=width,
            height=height,
            pool_size=pool_size,
            lives=lives,
            spawn_interval=spawn_interval,
        )
        if question_config is None:
            question_config = question_config_from_args(
                max_number=max_number,
                operators=operators,
                allow_negative=allow_negative,
                fractions=fractions,
            )

        self._scheduler = scheduler if scheduler is not None else FrameScheduler()
        self._canvas = canvas
        self._rng = rng if rng is not None else random.Random()
        self._generator = QuestionGenerator(question_config, rng=self._rng)

        width, height = self._settings.width, self._settings.height
        self._score = ScoreBoard(Vector2D(x=20, y=height - 40), lives=self._settings.lives)
        self._user_input = UserInput(Vector2D(x=width / 2, y=height - 10))
        self._base = Base(Vector2D(x=width / 2, y=height), shields=self._settings.shields)
        self._ships: List[Ship] = [Ship() for _ in range(self._settings.pool_size)]
        self._beams: List[Beam] = []

        self._state = GameState.RUNNING
        self._started = False
        self._spawn_handle: Optional[Handle] = None
        self._frame_handle: Optional[Handle] = None

        # Stats
        self._hits = 0
        self._misses = 0
        self._breaches = 0

        log.info(
            "Game created: %dx%d, %d ships, operators %s, max operand %d",
            width, height, len(self._ships),
            ''.join(op.symbol for op in question_config.operators),
            question_config.max_operand,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def field_size(self) -> Tuple[int, int]:
        return self._settings.width, self._settings.height

    @property
    def ships(self) -> Tuple[Ship, ...]:
        """The ship pool, in spawn/answer order."""
        return tuple(self._ships)

    @property
    def beams(self) -> Tuple[Beam, ...]:
        """Beams currently on screen."""
        return tuple(self._beams)

    @property
    def base(self) -> Base:
        return self._base

    @property
    def score_board(self) -> ScoreBoard:
        return self._score

    @property
    def user_input(self) -> UserInput:
        return self._user_input

    @property
    def generator(self) -> QuestionGenerator:
        return self._generator

    @property
    def stats(self) -> Dict[str, int]:
        """Hit, miss and breach counters."""
        return {
            'hits': self._hits,
            'misses': self._misses,
            'breaches': self._breaches,
        }

    def get_score(self) -> int:
        """Get current score."""
        return self._score.score

    def attach_canvas(self, canvas: Canvas) -> None:
        """Render frames onto canvas from now on."""
        self._canvas = canvas

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        """Begin spawning ships and running frames."""
        if self._started:
            log.warning("start() called twice, ignoring")
            return
        self._started = True
        log.info("Game started")

        if self._state == GameState.RUNNING:
            self._resume_scheduling()

    def _resume_scheduling(self) -> None:
        self._spawn_handle = self._scheduler.call_every(
            self._settings.spawn_interval, self.spawn_ship
        )
        self._frame_handle = self._scheduler.request_frame(self.run)

    def _stop_scheduling(self) -> None:
        if self._spawn_handle is not None:
            self._spawn_handle.cancel()
            self._spawn_handle = None
        if self._frame_handle is not None:
            self._frame_handle.cancel()
            self._frame_handle = None

    def toggle_pause(self) -> None:
        """Pause or resume the game. No effect once the game is over.

        Pausing cancels the spawn timer and the frame loop; resuming
        recreates both, so spawning continues where it left off.
        """
        if self._state == GameState.OVER:
            return

        if self._state == GameState.RUNNING:
            self._state = GameState.PAUSED
            self._stop_scheduling()
            if self._canvas is not None:
                self.render(self._canvas)
        else:
            self._state = GameState.RUNNING
            if self._started:
                self._resume_scheduling()

        log.info("Pause toggle: %s", self._state == GameState.PAUSED)

    def _game_over(self) -> None:
        self._state = GameState.OVER
        self._stop_scheduling()
        log.info(
            "Game over: score %d, hits %d, misses %d, breaches %d",
            self._score.score, self._hits, self._misses, self._breaches,
        )

    # =========================================================================
    # Spawning
    # =========================================================================

    def _ship_speed(self) -> float:
        steps = round_half_up(self._score.score / self._settings.speedup_score)
        return steps * self._settings.speedup_factor

    def spawn_ship(self) -> Optional[Ship]:
        """Refill the first dead ship with a new question and send it in.

        Returns:
            The spawned ship, or None if every ship is already alive
        """
        for index, ship in enumerate(self._ships):
            if ship.dead:
                width = self._settings.width
                x = config.SPAWN_MARGIN + round_half_up(
                    self._rng.random() * (width - 2 * config.SPAWN_MARGIN)
                )
                ship.spawn(
                    self._generator.generate(),
                    Vector2D(x=x, y=config.SHIP_SPAWN_Y),
                    self._ship_speed(),
                )
                log.debug("Spawned ship %d: %s at x=%d speed %.2f", index, ship.question, x, ship.speed)
                return ship

        log.info("Too many ships in game, could not spawn another one")
        return None

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[KeyEvent]) -> None:
        """Process key events in arrival order."""
        for event in events:
            self.handle_key(event.key)

    def handle_key(self, key: str) -> None:
        """Apply one key press.

        Enter submits, Backspace deletes, Escape clears and toggles pause,
        modifiers are ignored and anything else is typed.
        """
        if self._state == GameState.OVER:
            return

        if key == key_event.ENTER:
            self.process_answer()
        elif key == key_event.BACKSPACE:
            self._user_input.clear()
        elif key == key_event.ESCAPE:
            self._user_input.clear(all_text=True)
            self.toggle_pause()
        elif key not in key_event.MODIFIER_KEYS:
            self._user_input.add(key)

    def process_answer(self) -> Optional[Ship]:
        """Fire at the first live ship whose answer was typed.

        Hit: beam to the ship, ship killed, points for how high it was.
        Miss: beam to a random point in the field. The typed text is
        cleared either way.

        Returns:
            The ship that was shot down, or None on a miss
        """
        answer = self._user_input.text
        self._user_input.clear(all_text=True)

        for ship in self._ships:
            if ship.alive and ship.matches_answer(answer):
                target = ship.position
                self._fire(target)
                ship.kill()
                points = round_half_up((self._settings.height - target.y) / config.SCORE_DIVISOR)
                self._score.add_score(points)
                self._hits += 1
                log.debug("Hit %s for %d points", ship.question, points)
                return ship

        width, height = self.field_size
        self._fire(Vector2D(
            x=round_half_up(self._rng.random() * width),
            y=round_half_up(self._rng.random() * (height - config.MISS_TARGET_TOP_BAND)),
        ))
        self._misses += 1
        log.debug("Miss: %r matched no ship", answer)
        return None

    def _fire(self, target: Vector2D) -> None:
        self._beams.append(Beam(self._base.position, target, life=self._settings.beam_life))

    # =========================================================================
    # Frame loop
    # =========================================================================

    def update(self) -> None:
        """Advance ships and beams one frame, then check for landed ships."""
        for ship in self._ships:
            ship.update()

        for beam in self._beams:
            beam.update()
        self._beams = [beam for beam in self._beams if beam.active]

        self._check_collision()

    def _check_collision(self) -> None:
        """Ships reaching the bottom edge cost a life and a shield.

        Killed ships stay where they died, so a dead ship below the edge
        must not be counted again.
        """
        for ship in self._ships:
            if ship.position.y >= self._settings.height and ship.alive:
                ship.kill()
                self._score.damage()
                self._base.remove_shield()
                self._breaches += 1
                log.debug("Ship landed: %s, lives left %d", ship.question, self._score.lives)

    def run(self) -> None:
        """One frame: update, collide, render, then schedule the next."""
        # A direct call replaces any frame still waiting in the scheduler
        if self._frame_handle is not None:
            self._frame_handle.cancel()
            self._frame_handle = None
        if self._state != GameState.RUNNING:
            return

        self.update()

        if self._score.lives <= 0:
            self._game_over()

        if self._canvas is not None:
            self.render(self._canvas)

        if self._state == GameState.RUNNING:
            self._frame_handle = self._scheduler.request_frame(self.run)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, canvas: Canvas) -> None:
        """Draw the whole field; later items layer over earlier ones."""
        canvas.clear(config.BACKGROUND_COLOR)

        for ship in self._ships:
            ship.draw(canvas)

        for beam in self._beams:
            beam.draw(canvas)

        self._score.draw(canvas)
        self._user_input.draw(canvas)
        self._base.draw(canvas)

        if self._state == GameState.PAUSED:
            self._render_banner(canvas, "PAUSED", "Press Escape to resume")
        elif self._state == GameState.OVER:
            self._render_banner(canvas, "GAME OVER", f"Final score: {self._score.score}")

    def _render_banner(self, canvas: Canvas, title: str, subtitle: str) -> None:
        width, height = self.field_size
        center = Vector2D(x=width / 2, y=height / 2)
        canvas.draw_text(
            title, center,
            color=config.BANNER_COLOR, size=config.BANNER_TEXT_SIZE, align='center',
        )
        canvas.draw_text(
            subtitle, center.offset(dy=30),
            color=config.HUD_COLOR, size=config.HUD_TEXT_SIZE, align='center',
        )
