"""
Tests for MathInvadersMode.

Covers spawning from the ship pool, answer submission, landed ships,
pause/resume, game over and the render pass.
"""
import pytest

from mathdef.errors import ConfigurationError
from mathdef.games.game_state import GameState
from mathdef.games.input.key_event import KeyEvent
from models import Question, Vector2D
from games.MathInvaders import config
from games.MathInvaders.game_mode import MathInvadersMode, round_half_up

FRAME_MS = 16


def place_ship(game, index, answer, y, x=100.0, speed=1.0):
    """Spawn pool slot `index` with a known question at height y."""
    ship = game.ships[index]
    ship.spawn(Question(text=f"{answer}+0", answer=answer), Vector2D(x=x, y=y), speed)
    return ship


def type_answer(game, text):
    for char in text:
        game.handle_key(char)
    game.handle_key('Enter')


class TestRoundHalfUp:

    @pytest.mark.parametrize('value, expected', [
        (0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (157.5, 158), (-0.5, 0), (-2.5, -2),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestInitialState:

    def test_fresh_game(self, game):
        assert game.state == GameState.RUNNING
        assert len(game.ships) == 10
        assert all(ship.dead for ship in game.ships)
        assert game.beams == ()
        assert game.score_board.lives == 3
        assert game.get_score() == 0
        assert game.base.shields == config.DEFAULT_SHIELDS

    def test_layout(self, game):
        assert game.base.position == Vector2D(x=400, y=600)
        assert game.score_board.position == Vector2D(x=20, y=560)
        assert game.user_input.position == Vector2D(x=400, y=590)

    def test_size_from_canvas(self, canvas, scheduler):
        game = MathInvadersMode(scheduler=scheduler, canvas=canvas)
        assert game.field_size == canvas.size

    def test_start_registers_timer_and_frame(self, game, scheduler):
        game.start()
        assert scheduler.pending_timers == 1
        assert scheduler.pending_frames == 1

    def test_start_twice_is_ignored(self, game, scheduler):
        game.start()
        game.start()
        assert scheduler.pending_timers == 1


class TestConfiguration:

    @pytest.mark.parametrize('settings', [
        {'lives': 0},
        {'width': 0},
        {'height': -1},
        {'pool_size': 0},
        {'spawn_interval': 0},
        {'operators': ''},
        {'operators': '+^'},
        {'max_number': -5},
    ])
    def test_invalid_settings_fail_at_construction(self, settings):
        with pytest.raises(ConfigurationError):
            MathInvadersMode(**settings)

    def test_cli_style_question_options(self):
        game = MathInvadersMode(max_number=12, operators="+-*/", fractions=True, allow_negative=True)
        question_config = game.generator.config
        assert question_config.max_operand == 12
        assert [op.symbol for op in question_config.operators] == ['+', '-', '*', '/']
        assert question_config.whole_numbers_only is False
        assert question_config.allow_negative_results is True

    def test_ignores_launcher_kwargs(self):
        game = MathInvadersMode(resolution='800x600', log_level='INFO')
        assert game.state == GameState.RUNNING


class TestSpawning:

    def test_spawn_activates_first_dead_ship(self, game):
        ship = game.spawn_ship()
        assert ship is game.ships[0]
        assert ship.alive
        assert ship.question is not None

    def test_spawn_position_and_speed(self, game):
        for _ in range(10):
            ship = game.spawn_ship()
            assert ship.position.y == config.SHIP_SPAWN_Y
            assert config.SPAWN_MARGIN <= ship.position.x <= 800 - config.SPAWN_MARGIN
            assert ship.speed == 1.0

    def test_pool_order_reuses_first_dead(self, game):
        for _ in range(5):
            game.spawn_ship()
        game.ships[3].kill()
        assert game.spawn_ship() is game.ships[3]

    def test_full_pool_is_noop(self, game):
        """Ten spawns fill the pool; the eleventh changes nothing."""
        for _ in range(10):
            assert game.spawn_ship() is not None
        questions = [ship.question for ship in game.ships]

        assert game.spawn_ship() is None
        assert sum(ship.alive for ship in game.ships) == 10
        assert [ship.question for ship in game.ships] == questions

    def test_spawn_timer_fills_pool(self, game, scheduler):
        game.start()
        for _ in range(10):
            scheduler.advance(5000)
        assert sum(ship.alive for ship in game.ships) == 10

        scheduler.advance(5000)
        assert sum(ship.alive for ship in game.ships) == 10

    def test_nothing_spawns_before_interval(self, game, scheduler):
        game.start()
        scheduler.advance(4999)
        assert all(ship.dead for ship in game.ships)
        scheduler.advance(1)
        assert game.ships[0].alive

    @pytest.mark.parametrize('score, expected_speed', [
        (0, 1.0),
        (499, 1.0),
        (500, 1.1),
        (1000, 1.1),
        (1500, 2.2),
        (3000, 3.3000000000000003),
    ])
    def test_speed_steps_with_score(self, game, score, expected_speed):
        game.score_board.add_score(score)
        ship = game.spawn_ship()
        assert ship.speed == pytest.approx(expected_speed)


class TestAnswers:

    def test_correct_answer_kills_ship(self, game):
        ship = place_ship(game, 0, answer=7, y=200.0)

        type_answer(game, "7")

        assert ship.dead
        assert game.get_score() == 100  # (600 - 200) / 4
        assert game.user_input.text == ""
        assert game.stats['hits'] == 1

    def test_beam_aims_at_prekill_position(self, game):
        ship = place_ship(game, 2, answer=12, y=150.0, x=321.0)
        position = ship.position

        assert game.process_answer() is None  # empty input misses
        game.user_input.add("12")
        assert game.process_answer() is ship

        beam = game.beams[-1]
        assert beam.start == game.base.position
        assert beam.end == position

    def test_score_rounds_half_up(self, game):
        place_ship(game, 0, answer=5, y=-30.0)
        type_answer(game, "5")
        assert game.get_score() == 158  # 630 / 4 = 157.5

    def test_first_match_in_pool_order_wins(self, game):
        first = place_ship(game, 4, answer=9, y=100.0)
        second = place_ship(game, 1, answer=9, y=500.0)

        type_answer(game, "9")

        assert second.dead
        assert first.alive
        assert game.get_score() == 25  # ship 1 at y=500

    def test_only_one_ship_per_submission(self, game):
        place_ship(game, 0, answer=3, y=100.0)
        place_ship(game, 1, answer=3, y=100.0)

        type_answer(game, "3")

        assert sum(ship.alive for ship in game.ships) == 1
        assert len(game.beams) == 1

    def test_dead_ship_answer_does_not_score(self, game):
        ship = place_ship(game, 0, answer=4, y=100.0)
        ship.kill()

        type_answer(game, "4")

        assert game.get_score() == 0
        assert game.stats['misses'] == 1

    def test_wrong_answer_misses(self, game):
        place_ship(game, 0, answer=7, y=100.0)

        type_answer(game, "8")

        assert game.ships[0].alive
        assert game.get_score() == 0
        assert game.user_input.text == ""
        assert len(game.beams) == 1
        beam = game.beams[0]
        assert beam.start == game.base.position
        assert 0 <= beam.end.x <= 800
        assert 0 <= beam.end.y <= 600 - config.MISS_TARGET_TOP_BAND

    def test_fractional_answer(self, game):
        ship = game.ships[0]
        ship.spawn(Question(text="1/2", answer=0.5), Vector2D(x=10, y=0), 1.0)

        type_answer(game, "0.5")

        assert ship.dead


class TestKeys:

    def test_typing_and_backspace(self, game):
        for key in ["1", "2", "Backspace", "3"]:
            game.handle_key(key)
        assert game.user_input.text == "13"

    def test_modifiers_ignored(self, game):
        for key in ["Shift", "1", "Control", "Alt"]:
            game.handle_key(key)
        assert game.user_input.text == "1"

    def test_non_digits_are_typed(self, game):
        game.handle_key("a")
        game.handle_key("-")
        assert game.user_input.text == "a-"

    def test_escape_clears_and_pauses(self, game):
        game.handle_key("4")
        game.handle_key("2")
        game.handle_key("Escape")
        assert game.user_input.text == ""
        assert game.state == GameState.PAUSED

    def test_handle_input_events(self, game):
        place_ship(game, 0, answer=11, y=100.0)
        game.handle_input([KeyEvent(key=k) for k in ["1", "1", "Enter"]])
        assert game.ships[0].dead


class TestFrameLoop:

    def test_frame_moves_ships(self, game, scheduler):
        ship = place_ship(game, 0, answer=1, y=0.0)
        game.start()
        scheduler.advance(FRAME_MS)
        assert ship.position.y == config.SHIP_BASE_SPEED

    def test_frames_keep_running(self, game, scheduler):
        ship = place_ship(game, 0, answer=1, y=0.0)
        game.start()
        for _ in range(10):
            scheduler.advance(FRAME_MS)
        assert ship.position.y == 10 * config.SHIP_BASE_SPEED
        assert scheduler.pending_frames == 1

    def test_beams_removed_after_lifetime(self, game):
        game.process_answer()
        for _ in range(config.BEAM_LIFE - 1):
            game.update()
        assert len(game.beams) == 1
        game.update()
        assert game.beams == ()


class TestBreach:

    def test_landing_costs_life_and_shield(self, game):
        ship = place_ship(game, 0, answer=1, y=600.0 - config.SHIP_BASE_SPEED)

        game.update()

        assert ship.dead
        assert game.score_board.lives == 2
        assert game.base.shields == config.DEFAULT_SHIELDS - 1
        assert game.stats['breaches'] == 1

    def test_dead_ship_below_edge_costs_nothing(self, game):
        ship = place_ship(game, 0, answer=1, y=600.0 - config.SHIP_BASE_SPEED)
        game.update()

        game.update()
        game.update()

        assert ship.dead
        assert game.score_board.lives == 2

    def test_shot_down_ship_at_edge_costs_nothing(self, game):
        place_ship(game, 0, answer=1, y=650.0)
        type_answer(game, "1")

        game.update()

        assert game.score_board.lives == 3

    def test_shields_floor_at_zero(self, game):
        for index in range(3):
            place_ship(game, index, answer=index, y=700.0)
        game.update()
        assert game.base.shields == 0
        assert game.score_board.lives == 0


class TestGameOver:

    def test_three_breaches_end_game(self, game, scheduler):
        for index, y in enumerate([599.5, 599.0, 598.5]):
            place_ship(game, index, answer=index, y=y)
        game.start()

        scheduler.advance(FRAME_MS)
        scheduler.advance(FRAME_MS)
        assert game.state == GameState.RUNNING
        scheduler.advance(FRAME_MS)

        assert game.state == GameState.OVER
        assert scheduler.pending_timers == 0
        assert scheduler.pending_frames == 0

    def test_no_spawns_after_game_over(self, game, scheduler):
        for index in range(3):
            place_ship(game, index, answer=index, y=700.0)
        game.start()
        scheduler.advance(FRAME_MS)
        assert game.state == GameState.OVER

        scheduler.advance(60000)
        assert all(ship.dead for ship in game.ships)

    def test_keys_ignored_when_over(self, game):
        for index in range(3):
            place_ship(game, index, answer=index, y=700.0)
        game.start()
        game.run()

        game.handle_key("5")
        game.handle_key("Escape")

        assert game.user_input.text == ""
        assert game.state == GameState.OVER

    def test_several_landings_in_one_frame(self, game):
        for index in range(5):
            place_ship(game, index, answer=index, y=700.0)
        game.start()
        game.run()
        assert game.score_board.lives == -2
        assert game.state == GameState.OVER


class TestPause:

    def test_pause_stops_timer_and_frames(self, game, scheduler):
        ship = place_ship(game, 0, answer=1, y=0.0)
        game.start()
        game.handle_key("Escape")

        assert game.state == GameState.PAUSED
        assert scheduler.pending_timers == 0
        assert scheduler.pending_frames == 0

        scheduler.advance(20000)
        assert ship.position.y == 0.0
        assert sum(s.alive for s in game.ships) == 1

    def test_resume_restarts_spawning_and_frames(self, game, scheduler):
        game.start()
        game.handle_key("Escape")
        game.handle_key("Escape")

        assert game.state == GameState.RUNNING
        assert scheduler.pending_timers == 1
        assert scheduler.pending_frames == 1

        scheduler.advance(5000)
        assert game.ships[0].alive

    def test_pause_before_start(self, game, scheduler):
        game.toggle_pause()
        game.start()
        assert scheduler.pending_timers == 0
        game.toggle_pause()
        assert scheduler.pending_timers == 1

    def test_pause_renders_banner(self, scheduler, canvas, rng, addition_config):
        game = MathInvadersMode(scheduler=scheduler, canvas=canvas, rng=rng, question_config=addition_config)
        game.start()
        game.toggle_pause()
        assert "PAUSED" in canvas.texts()


class TestRender:

    def test_draw_order(self, game, canvas):
        place_ship(game, 0, answer=6, y=100.0)
        game.process_answer()  # miss beam
        game.render(canvas)

        names = [name for name, _ in canvas.calls]
        assert names == [
            'clear',
            'stroke_lines', 'draw_text',      # ship hull and question
            'stroke_lines',                   # beam
            'draw_text', 'draw_text',         # score and lives
            'draw_text',                      # typed answer
            'stroke_arc', 'stroke_arc', 'stroke_arc',  # base and two shields
        ]
        assert canvas.calls[0] == ('clear', (config.BACKGROUND_COLOR,))

    def test_dead_ships_not_rendered(self, game, canvas):
        game.render(canvas)
        assert 'stroke_lines' not in [name for name, _ in canvas.calls]

    def test_frame_renders_to_attached_canvas(self, game, canvas, scheduler):
        game.attach_canvas(canvas)
        game.start()
        scheduler.advance(FRAME_MS)
        assert canvas.calls[0][0] == 'clear'
        assert "Score: 0" in canvas.texts()

    def test_game_over_banner(self, game, canvas):
        game.attach_canvas(canvas)
        for index in range(3):
            place_ship(game, index, answer=index, y=700.0)
        game.start()
        game.run()
        assert "GAME OVER" in canvas.texts()
        assert "Final score: 0" in canvas.texts()


class TestMetadata:

    def test_info(self):
        info = MathInvadersMode.get_info()
        assert info['name'] == "Math Invaders"
        names = [arg['name'] for arg in info['arguments']]
        assert '--max-number' in names
        assert '--resolution' in names
        assert len(names) == len(set(names))
