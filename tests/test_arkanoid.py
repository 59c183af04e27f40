from quadkit.arkanoid import BLOCKS_H, BLOCKS_W, SCR_H, Arkanoid


def test_starts_with_full_wall():
    game = Arkanoid()
    assert game.remaining_blocks() == BLOCKS_W * BLOCKS_H
    assert game.stick


def test_ball_rides_paddle_until_space():
    game = Arkanoid()
    game.update(0.1, left=False, right=True, space=False)
    assert game.ball_x == game.platform_x
    assert game.ball_y == SCR_H - 0.5
    assert game.stick
    game.update(0.1, left=False, right=False, space=True)
    assert not game.stick


def test_paddle_stays_in_field():
    game = Arkanoid()
    for _ in range(500):
        game.update(0.1, left=False, right=True, space=False)
    assert game.platform_x <= 20.0 - game.platform_width / 2.0 + 0.3
    for _ in range(1000):
        game.update(0.1, left=True, right=False, space=False)
    assert game.platform_x >= game.platform_width / 2.0 - 0.3


def test_hitting_block_removes_it_and_bounces():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 1.0, 0.5
    game.dx, game.dy = 0.0, 1.0
    game.update(0.0, left=False, right=False, space=False)
    assert game.blocks[0][0] is False
    assert game.remaining_blocks() == BLOCKS_W * BLOCKS_H - 1
    assert game.dy == -1.0


def test_falling_ball_resets_to_paddle():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 0.5, 19.9
    game.dy = 3.5
    game.update(0.1, left=False, right=False, space=False)
    assert game.stick
    assert game.ball_y == 10.0
    assert game.dy == -3.5


def test_wall_bounce_flips_dx():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 0.1, 10.0
    game.dx, game.dy = -3.5, 0.0
    game.update(0.1, left=False, right=False, space=False)
    assert game.dx == 3.5


def test_play_breaks_blocks():
    game = Arkanoid()
    game.update(0.05, left=False, right=False, space=True)
    for _ in range(400):
        game.update(0.05, left=False, right=False, space=False)
        if game.remaining_blocks() < BLOCKS_W * BLOCKS_H:
            break
    assert game.remaining_blocks() < BLOCKS_W * BLOCKS_H