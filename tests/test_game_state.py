import pytest

from flappy_dragon.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from flappy_dragon.data_models import GameMode, Key, Obstacle
from flappy_dragon.editions import ANIMATED, OBSTACLES, SCORING, SPRITES, WALLS


@pytest.fixture
def playing(make_state, console):
    state = make_state(SCORING)
    console.frame(state, Key.P)
    return state


def test_starts_in_menu(make_state, console):
    state = make_state()
    console.frame(state)
    assert state.mode is GameMode.MENU
    assert "(P) Play" in console.text
    assert "(Q) Quit" in console.text


def test_menu_play_starts_a_game(make_state, console):
    state = make_state(SCORING)
    console.frame(state, Key.P)
    assert state.mode is GameMode.PLAYING
    assert state.score == 0
    assert (state.player.x, state.player.y) == (5, 20)
    assert len(state.obstacles) == 1
    assert state.obstacles[0].x == SCREEN_WIDTH
    assert state.obstacles[0].size == 20


def test_menu_quit(make_state, console):
    state = make_state()
    console.frame(state, Key.Q)
    assert console.quitting is True
    assert state.mode is GameMode.MENU


def test_unrecognised_keys_are_ignored(make_state, console):
    state = make_state()
    console.frame(state, Key.SPACE)
    assert state.mode is GameMode.MENU
    assert console.quitting is False


def test_escape_quits_from_any_mode(playing, console):
    console.frame(playing, Key.ESCAPE)
    assert console.quitting is True


def test_update_waits_for_frame_duration(playing, console):
    console.frame(playing, ms=50.0)
    assert playing.player.x == 5
    console.frame(playing, ms=30.0)
    assert playing.player.x == 6
    assert playing.frame_time == 0.0


def test_space_flaps(playing, console):
    console.frame(playing, Key.SPACE)
    assert playing.player.velocity == -2.0


def test_pause_freezes_physics(playing, console):
    console.frame(playing, Key.P)
    assert playing.paused is True
    for _ in range(5):
        console.frame(playing, ms=100.0)
    assert playing.player.x == 5
    assert playing.frame_time == 0.0
    assert "PAUSED" in console.text

    console.frame(playing, Key.SPACE)
    assert playing.player.velocity == 0.0

    console.frame(playing, Key.P)
    assert playing.paused is False
    console.frame(playing, ms=100.0)
    assert playing.player.x == 6


def test_falling_through_the_floor_ends_the_game(playing):
    playing.player.y = SCREEN_HEIGHT
    playing.player.velocity = 2.0
    playing.update()
    assert playing.mode is GameMode.END


def test_hitting_a_wall_ends_the_game(playing):
    playing.obstacles = [Obstacle(x=6, gap_y=40, size=2)]
    playing.update()
    assert playing.mode is GameMode.END
    assert playing.score == 0


def test_passing_an_obstacle_scores_and_respawns(playing):
    playing.obstacles = [Obstacle(x=6, gap_y=20, size=10)]
    playing.update()
    assert playing.mode is GameMode.PLAYING
    assert playing.score == 1
    assert len(playing.obstacles) == 1
    assert playing.obstacles[0].x == 6 + SCREEN_WIDTH
    assert playing.obstacles[0].size == 19


def test_score_counts_each_obstacle_once(playing):
    for passed in range(1, 26):
        playing.player.velocity = 0.0
        playing.obstacles = [Obstacle(x=playing.player.x + 1, gap_y=playing.player.y, size=20)]
        playing.update()
        assert playing.score == passed

    # Nothing left to pass until the next obstacle comes round
    playing.update()
    assert playing.score == 25
    assert playing.obstacles[0].size == 2


def test_game_over_back_to_menu(playing, console):
    playing.score = 7
    playing.mode = GameMode.END
    console.frame(playing)
    assert "You are dead!" in console.text
    assert "You earned 7 points" in console.text

    console.frame(playing, Key.P)
    assert playing.mode is GameMode.END
    console.frame(playing, Key.SPACE)
    assert playing.mode is GameMode.MENU


def test_restart_resets_the_run(playing, console):
    playing.score = 4
    playing.paused = True
    playing.player.x = 60
    playing.mode = GameMode.MENU
    console.frame(playing, Key.P)
    assert playing.score == 0
    assert playing.paused is False
    assert playing.player.x == 5
    assert playing.obstacles[0].size == 20


def test_obstacles_edition_respawns_without_scoring(make_state, console):
    state = make_state(OBSTACLES)
    console.frame(state, Key.P)
    state.obstacles = [Obstacle(x=6, gap_y=20, size=20)]
    state.update()
    assert state.score == 0
    assert state.obstacles[0].x == 6 + SCREEN_WIDTH
    assert state.obstacles[0].size == 20

    console.frame(state)
    assert not any(line.startswith("Score") for line in console.text)


def test_walls_edition_adds_one_wall_per_tick(make_state, console):
    state = make_state(WALLS)
    console.frame(state, Key.P)
    assert state.obstacles == []

    state.update()
    assert [o.x for o in state.obstacles] == [85]
    state.update()
    assert [o.x for o in state.obstacles] == [85, 86]
    state.update()
    assert len(state.obstacles) == 2
    assert all(o.size == 10 for o in state.obstacles)


def test_walls_edition_never_holds_more_than_two(make_state, console, monkeypatch):
    state = make_state(WALLS)
    console.frame(state, Key.P)
    monkeypatch.setattr(state.physics, "check_collision", lambda player, obstacles: False)
    for _ in range(300):
        state.player.velocity = 0.0
        state.update()
        assert len(state.obstacles) <= 2
    assert state.score == 0


def test_walls_edition_hides_the_score(make_state, console):
    state = make_state(WALLS)
    state.mode = GameMode.END
    console.frame(state)
    assert not any("points" in line for line in console.text)


def test_frame_number_only_moves_when_animated(make_state, console):
    still = make_state(SCORING)
    animated = make_state(ANIMATED)
    for state in (still, animated):
        console.frame(state, Key.P)

    frames = []
    for _ in range(5):
        still.update()
        animated.update()
        frames.append(animated.player.frame_number)
    assert still.player.frame_number == 1
    assert frames == [2, 3, 4, 1, 2]


def test_render_glyphs(playing, console):
    playing.obstacles = [Obstacle(x=10, gap_y=20, size=10)]
    console.frame(playing)
    assert console.cells[(5, 20)] == "@"
    # Wall at world x=10 shows five columns right of the dragon
    assert console.cells[(10, 0)] == "|"
    assert console.cells[(10, 14)] == "|"
    assert (10, 15) not in console.cells
    assert (10, 24) not in console.cells
    assert console.cells[(10, 25)] == "|"
    assert console.cells[(10, SCREEN_HEIGHT - 1)] == "|"
    assert "Score: 0" in console.text


def test_offscreen_walls_are_skipped(playing, console):
    console.frame(playing)
    assert set(console.cells.values()) == {"@"}


def test_render_animated_glyph(make_state, console):
    state = make_state(ANIMATED)
    console.frame(state, Key.P)
    state.player.frame_number = 3
    console.frame(state)
    assert console.cells[(5, 20)] == "v"


def test_render_sprites(make_state, console):
    state = make_state(SPRITES)
    console.frame(state, Key.P)
    state.obstacles = [Obstacle(x=8, gap_y=20, size=10)]
    state.player.frame_number = 2
    console.frame(state)
    assert console.cells == {}
    assert console.sprites[(5, 20)] == "dragon_2"
    assert console.sprites[(8, 0)] == "wall"
    assert (8, 20) not in console.sprites
