import pygame
import pytest

from lanerunner.assets import Texture
from lanerunner.sprites import Background, Ball, Block, Button, EnergyBar


class RecordingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1
        return True


def make_texture(tmp_path, name, size):
    surface = pygame.Surface(size)
    surface.fill((10, 20, 30))
    path = tmp_path / name
    pygame.image.save(surface, str(path))
    return Texture(path)


@pytest.fixture
def ball_texture(tmp_path):
    return make_texture(tmp_path, "ball.png", (50, 50))


@pytest.fixture
def stone_texture(tmp_path):
    return make_texture(tmp_path, "stone.png", (60, 60))


@pytest.fixture
def ball(ball_texture):
    return Ball(ball_texture, RecordingSound())


def test_background_wraps_to_width(tmp_path):
    texture = make_texture(tmp_path, "bg.png", (80, 60))
    background = Background(texture)
    background.scroll(50)
    assert background.scrolling_offset == texture.w
    background.scroll(10)
    assert background.scrolling_offset == texture.w - 10


def test_background_render_draws(tmp_path):
    texture = make_texture(tmp_path, "bg.png", (80, 60))
    background = Background(texture)
    target = pygame.Surface((80, 60))
    target.fill((255, 255, 255))
    background.scroll(30)
    background.render(target)
    assert target.get_at((0, 0))[:3] == (10, 20, 30)
    assert target.get_at((79, 59))[:3] == (10, 20, 30)


def test_ball_lanes_are_bounded(ball):
    ball.up()
    ball.up()
    assert ball.lane == -1
    ball.down()
    ball.down()
    ball.down()
    assert ball.lane == 1


def test_ball_cannot_change_lane_while_jumping(ball):
    ball.jump()
    ball.up()
    ball.down()
    assert ball.lane == 0
    assert ball.jump_sound.plays == 1


def test_jump_arc_returns_to_ground(ball):
    ball.jump()
    heights = []
    while ball.jumping:
        ball.step_jump()
        heights.append(ball.y1)
    assert len(heights) == 6
    assert max(heights) == 200
    assert heights[-1] == 0
    assert ball.angle == 0


def test_step_jump_idle_does_nothing(ball):
    ball.step_jump()
    assert ball.angle == 0
    assert ball.y1 == 0


def test_roll_cycles(ball):
    for _ in range(6):
        ball.roll()
    assert ball.rotation == 360
    ball.roll()
    assert ball.rotation == 60


def test_ball_place_uses_lane(ball):
    ball.down()
    ball.place()
    assert ball.y == 300 + 100


def test_ball_render_rolls(ball):
    target = pygame.Surface((800, 600))
    ball.render(target)
    assert ball.rotation == 60


def test_block_scroll_and_place(stone_texture):
    block = Block(stone_texture, -1)
    assert block.x == 800
    block.scroll(50)
    assert block.x == 750
    assert block.y == 300 - 100


def test_block_collides_with_ball(ball, stone_texture):
    block = Block(stone_texture, 0)
    block.x = ball.x
    assert block.collides(ball)


def test_block_no_collision_when_jumping(ball, stone_texture):
    block = Block(stone_texture, 0)
    block.x = ball.x
    ball.jump()
    assert not block.collides(ball)


def test_block_no_collision_in_other_lane(ball, stone_texture):
    block = Block(stone_texture, 1)
    block.x = ball.x
    assert not block.collides(ball)


def test_block_no_collision_far_away(ball, stone_texture):
    block = Block(stone_texture, 0)
    assert not block.collides(ball)


def test_energy_fills_to_max_and_drains():
    bar = EnergyBar()
    assert bar.energy == 70
    bar.use()
    assert not bar.in_use
    for _ in range(100):
        bar.update()
    assert bar.energy == 100
    bar.use()
    assert bar.in_use
    for _ in range(100):
        bar.update()
    assert bar.energy == 0
    assert not bar.in_use
    bar.update()
    assert bar.energy == 1


def test_energy_filled_width_tracks_energy():
    bar = EnergyBar()
    bar.update()
    assert bar.filled.w == bar.energy


def test_energy_render_draws_fill():
    bar = EnergyBar()
    target = pygame.Surface((300, 100))
    target.fill((255, 255, 255))
    bar.render(target)
    assert target.get_at((110, 20))[:3] == (0, 255, 0)


def test_button_click_is_strict(stone_texture):
    button = Button(300, 200, "Play", 40, texture=stone_texture)
    assert button.click(301, 201)
    assert not button.click(300, 201)
    assert not button.click(300 + button.w, 201)
    assert not button.click(301, 200 + button.h)


def test_button_label_text(stone_texture):
    button = Button(300, 200, "Play", 40, texture=stone_texture)
    assert button.label.text == "Play"