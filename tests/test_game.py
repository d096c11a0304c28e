import pytest

from coin_runner import settings
from coin_runner.game import Game, start, step
from coin_runner.level import load_level
from coin_runner.levels import EnemySpec, PlatformSpec
from coin_runner.state import Controls, GameState, Phase

from conftest import GROUND

JUMP = Controls(jump=True)
PAUSE = Controls(pause=True)


def run(state, ticks, controls=Controls()):
    for _ in range(ticks):
        step(state, controls)
    return state


def settle(state):
    """Let the player drop from the spawn point onto the ground (4 ticks)."""
    run(state, 4)
    assert state.player.grounded
    assert state.player.body.pos.y == 390


# --------------------------
# Start / not running
# --------------------------

def test_nothing_happens_before_start():
    state = GameState()
    step(state, Controls(right=True))
    assert state.phase is Phase.NOT_RUNNING
    assert state.tick_count == 0
    assert state.platforms == []


def test_start_loads_first_level_with_full_lives():
    state = GameState()
    state.player.lives = 3
    start(state)
    assert state.phase is Phase.RUNNING
    assert state.current_level == 0
    assert state.player.lives == settings.STARTING_LIVES
    assert state.total_coins == 7
    assert state.coins_text == "0/7"


def test_first_tick_from_spawn_applies_gravity():
    state = start(GameState())
    step(state)
    assert state.player.body.vel.y == 0.5
    assert state.player.body.pos.y == 385.5


# --------------------------
# Movement and jumping
# --------------------------

def test_right_input_moves_player(ground_state):
    settle(ground_state)
    step(ground_state, Controls(right=True))
    body = ground_state.player.body
    assert body.vel.x == pytest.approx(settings.PLAYER_SPEED * settings.FRICTION)
    assert body.pos.x == pytest.approx(50 + 4)
    assert ground_state.player.facing == 1


def test_left_wins_when_both_held(ground_state):
    settle(ground_state)
    step(ground_state, Controls(left=True, right=True))
    assert ground_state.player.body.vel.x < 0
    assert ground_state.player.facing == -1


def test_resting_player_stays_put(ground_state):
    settle(ground_state)
    for _ in range(120):
        step(ground_state)
        assert ground_state.player.grounded
        assert ground_state.player.body.pos.y == 390


def test_jump_press_launches_player(ground_state):
    settle(ground_state)
    step(ground_state, JUMP)
    player = ground_state.player
    assert player.jumping
    assert not player.grounded
    # -13 impulse, then one tick of gravity
    assert player.body.vel.y == -12.5
    assert player.body.pos.y == 377.5


def test_holding_jump_does_not_bounce_forever(ground_state):
    settle(ground_state)
    heights = []
    for _ in range(120):
        step(ground_state, JUMP)
        heights.append(ground_state.player.body.pos.y)

    assert min(heights) < 300
    assert ground_state.player.grounded
    assert heights[-40:] == [390] * 40


def test_jump_pressed_while_falling_fires_on_landing(ground_state):
    # Pressed on the first tick, while still falling from the spawn point
    run(ground_state, 4, JUMP)
    assert ground_state.player.grounded
    step(ground_state, JUMP)
    assert ground_state.player.jumping
    assert ground_state.player.body.vel.y == -12.5


def test_early_jump_press_waits_for_the_ground(ground_state):
    player = ground_state.player
    player.body.pos.y = 200
    step(ground_state, JUMP)
    assert not player.jumping

    takeoffs = 0
    for _ in range(60):
        was_jumping = player.jumping
        step(ground_state)
        if player.jumping and not was_jumping:
            takeoffs += 1
    assert takeoffs == 1
    assert not ground_state.jump_pending


# --------------------------
# Pause
# --------------------------

def test_pause_toggles_on_press_edges_only(ground_state):
    settle(ground_state)
    step(ground_state, PAUSE)
    assert ground_state.phase is Phase.PAUSED

    x = ground_state.player.body.pos.x
    ticks = ground_state.tick_count
    run(ground_state, 10, Controls(pause=True, right=True))
    assert ground_state.phase is Phase.PAUSED
    assert ground_state.player.body.pos.x == x
    assert ground_state.tick_count == ticks

    step(ground_state)
    assert ground_state.phase is Phase.PAUSED
    step(ground_state, PAUSE)
    assert ground_state.phase is Phase.RUNNING


# --------------------------
# Boundaries
# --------------------------

def test_player_is_clamped_to_world(ground_state):
    settle(ground_state)
    ground_state.player.body.pos.x = 795
    step(ground_state)
    assert ground_state.player.body.right == ground_state.world.width

    ground_state.player.body.pos.update(10, 2)
    ground_state.player.body.vel.update(0, -10)
    ground_state.player.grounded = False
    step(ground_state)
    assert ground_state.player.body.pos.y == 0


def test_falling_off_the_world_reloads_without_cost(make_state):
    state = make_state(coins=[(700, 50), (600, 50)])
    player = state.player
    lives = player.lives
    player.body.pos.update(300, 495)
    player.body.vel.update(0, 10)

    step(state)

    assert (player.body.pos.x, player.body.pos.y) == settings.PLAYER_SPAWN
    assert player.lives == lives
    assert state.current_level == 0
    assert state.coins_text == "0/2"


# --------------------------
# Enemies during play
# --------------------------

def test_stomped_enemy_is_gone_after_the_tick(make_state):
    state = make_state(platforms=[GROUND], enemies=[EnemySpec(51, 430)])
    # Enemy walks left one pixel to x=50, player falls onto its head
    state.player.body.pos.update(50, 365)
    state.player.body.vel.update(0, 7.5)

    step(state)

    assert state.enemies == []
    assert state.player.body.vel.y == settings.STOMP_BOUNCE


# --------------------------
# Level progression
# --------------------------

def test_collecting_all_coins_completes_then_advances():
    state = start(GameState())
    for coin in state.coins:
        coin.body.pos.update(60, 400)

    step(state)
    assert state.coins_collected == 7
    assert state.level_complete
    assert state.level_complete_timer == 120
    assert state.phase is Phase.LEVEL_COMPLETE
    lives = state.player.lives

    run(state, 119)
    assert state.current_level == 0
    assert state.level_complete_timer == 1

    step(state)
    assert state.current_level == 1
    assert state.coins_collected == 0
    assert state.total_coins == 7
    assert not state.level_complete
    assert state.player.lives == lives + settings.LEVEL_BONUS_LIVES
    assert (state.player.body.pos.x, state.player.body.pos.y) == settings.PLAYER_SPAWN


def test_world_is_frozen_while_level_complete():
    state = start(GameState())
    state.level_complete = True
    state.level_complete_timer = 50
    enemy_x = state.enemies[0].body.pos.x
    run(state, 10, Controls(right=True))
    assert state.enemies[0].body.pos.x == enemy_x
    assert state.player.body.pos.x == 50


def test_last_level_loops_back_to_first():
    state = start(GameState())
    load_level(state, len(state.levels) - 1)
    state.level_complete = True
    state.level_complete_timer = 1
    lives = state.player.lives

    step(state)

    assert state.current_level == 0
    assert state.player.lives == lives + 1


def test_losing_last_life_resets_and_pauses():
    state = start(GameState())
    load_level(state, 2)
    state.player.lives = 1
    state.enemies[0].body.pos.update(61, 400)

    step(state)

    assert state.current_level == 0
    assert state.player.lives == settings.STARTING_LIVES
    assert state.paused
    assert state.phase is Phase.GAME_OVER

    step(state, PAUSE)
    assert state.phase is Phase.RUNNING
    assert not state.game_over


# --------------------------
# Observers
# --------------------------

class Recorder:
    def __init__(self):
        self.huds = []
        self.frames = 0

    def on_hud(self, coins_text, lives):
        self.huds.append((coins_text, lives))

    def on_frame(self, state):
        self.frames += 1


def test_hud_only_published_on_change(make_state):
    state = make_state(platforms=[GROUND], coins=[(100, 400), (700, 50)])
    recorder = Recorder()
    game = Game(state, observers=[recorder])

    game.publish()
    for _ in range(3):
        game.tick()
    assert recorder.huds == [("0/2", settings.STARTING_LIVES)]
    assert recorder.frames == 4

    state.player.body.pos.x = 90
    game.tick()
    assert recorder.huds[-1] == ("1/2", settings.STARTING_LIVES)
    assert len(recorder.huds) == 2


def test_game_start_publishes():
    recorder = Recorder()
    game = Game(observers=[recorder])
    game.start()
    assert recorder.huds == [("0/7", settings.STARTING_LIVES)]
    assert recorder.frames == 1


def test_added_observer_gets_current_hud_once(make_state):
    state = make_state(platforms=[GROUND])
    first = Recorder()
    game = Game(state, observers=[first])
    game.tick()

    late = Recorder()
    game.add_observer(late)
    game.tick()
    game.tick()

    assert late.huds == [("0/1", settings.STARTING_LIVES)]
    assert late.frames == 2
    assert len(first.huds) == 2
