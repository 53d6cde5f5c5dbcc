import pytest

from flappy_dragon.constants import GRAVITY, TERMINAL_VELOCITY
from flappy_dragon.data_models import Player
from flappy_dragon.physics_core import PhysicsCore


def test_new_player_starts_at_rest():
    player = Player.new(5, 25)
    assert player.x == 5
    assert player.y == 25.0
    assert isinstance(player.y, float)
    assert player.velocity == 0.0


def test_gravity_added_below_terminal_velocity():
    player = Player(x=5, y=25.0, velocity=0.0)
    player.integrate_physics()
    assert player.velocity == pytest.approx(GRAVITY)
    assert player.y == pytest.approx(25.0 + GRAVITY)
    assert player.x == 6


def test_gravity_not_added_at_terminal_velocity():
    player = Player(x=0, y=10.0, velocity=TERMINAL_VELOCITY)
    player.integrate_physics()
    assert player.velocity == TERMINAL_VELOCITY
    assert player.y == pytest.approx(12.0)


def test_velocity_may_overshoot_terminal_on_crossing_tick():
    player = Player(x=0, y=10.0, velocity=1.9)
    player.integrate_physics()
    assert player.velocity == pytest.approx(2.1)
    assert player.velocity > TERMINAL_VELOCITY

    # Stays put from then on
    player.integrate_physics()
    assert player.velocity == pytest.approx(2.1)


def test_velocity_converges_from_flap():
    player = Player.new(5, 25)
    player.flap()
    for _ in range(40):
        player.integrate_physics()
    assert player.velocity == pytest.approx(TERMINAL_VELOCITY, abs=GRAVITY)


@pytest.mark.parametrize("y, velocity", [(0.0, -1.0), (0.5, -1.0), (-3.0, 0.5), (0.0, 0.0)])
def test_y_never_negative(y, velocity):
    player = Player(x=0, y=y, velocity=velocity)
    player.integrate_physics()
    assert player.y >= 0.0


@pytest.mark.parametrize("velocity", [-1.0, 0.0, 0.7, 2.0, 2.1])
def test_flap_sets_fixed_upward_velocity(velocity):
    player = Player(x=0, y=20.0, velocity=velocity)
    player.flap()
    assert player.velocity == -1.0


def test_flap_does_not_move_player():
    player = Player(x=7, y=20.0, velocity=1.0)
    player.flap()
    assert (player.x, player.y) == (7, 20.0)


def test_row_truncates_fraction():
    assert Player(x=0, y=12.99).row == 12
    assert Player(x=0, y=0.4).row == 0


def test_player_renders_in_first_column(ctx):
    Player(x=42, y=17.8).render(ctx)
    assert list(ctx.cells) == [(0, 17)]
    assert ctx.cells[(0, 17)][0] == "@"


@pytest.mark.parametrize("score, size", [(0, 20), (1, 19), (10, 10), (18, 2), (19, 2), (500, 2)])
def test_gap_size(score, size):
    assert PhysicsCore().gap_size(score) == size


def test_gap_size_non_increasing():
    core = PhysicsCore()
    sizes = [core.gap_size(s) for s in range(60)]
    assert sizes == sorted(sizes, reverse=True)
    assert min(sizes) == 2


def test_gap_bounds_use_integer_half():
    assert PhysicsCore().gap_bounds(20, 5) == (18, 22)
