import pygame
import pytest

from gridrunner.action import Action
from gridrunner.assets import Assets
from gridrunner.game_engine import GameEngine, read_config
from gridrunner.scene import Scene

CONFIG_TEXT = (
    "Window 320 240 60 0\n"
    "Font Arial arial.ttf 24 255 255 255\n"
    "Tile Ground ground.png\n"
    "Background Background bg.png\n"
)


class RecordingScene(Scene):
    def __init__(self, game, stop_after_update=False):
        super().__init__(game)
        self.actions = []
        self.updates = 0
        self.renders = 0
        self.stop_after_update = stop_after_update
        self.register_key_action(pygame.K_w, "JUMP")
        self.register_mouse_action(1, "SHOOT")

    def simulate(self):
        pass

    def do_action(self, action):
        self.actions.append(action)

    def update(self):
        self.updates += 1
        if self.stop_after_update:
            self.game.quit()

    def render(self):
        self.renders += 1


def fake_assets():
    return Assets(
        texture_loader=lambda path: ("texture", path),
        font_loader=lambda path: ("font", path),
    )


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(CONFIG_TEXT)
    return path


@pytest.fixture
def engine(config_file):
    return GameEngine(str(config_file), window=pygame.Surface((320, 240)), assets=fake_assets())


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    yield
    pygame.display.quit()


def test_read_config_parses_window_font_and_textures():
    config = read_config(CONFIG_TEXT)
    assert (config.width, config.height, config.framerate) == (320, 240, 60)
    assert config.fullscreen is False
    assert config.fonts == {"Font_Arial": "arial.ttf"}
    assert config.font_size == 24
    assert config.font_color == (255, 255, 255)
    assert config.textures == {"Tile_Ground": "ground.png", "Background_Background": "bg.png"}


def test_read_config_without_font_consumes_word():
    config = read_config("Window 10 20 30 1 Tile Ground g.png Player Idle p.png")
    assert config.fullscreen is True
    assert config.fonts == {}
    assert config.textures == {"Player_Idle": "p.png"}


def test_read_config_skips_unknown_words():
    config = read_config("Window 1 2 3 0 Font A a.ttf 1 2 3 4 Junk Enemy Walk e.png")
    assert config.textures == {"Enemy_Walk": "e.png"}


def test_read_config_requires_window():
    with pytest.raises(ValueError):
        read_config("Font Arial a.ttf 1 2 3 4")


def test_read_config_rejects_truncated_window():
    with pytest.raises(ValueError):
        read_config("Window 320 240")


def test_engine_loads_assets(engine):
    assert engine.assets.get_texture("Tile_Ground") == ("texture", "ground.png")
    assert engine.assets.get_font("Font_Arial") == ("font", "arial.ttf")
    assert engine.window_size == (320, 240)
    assert engine.is_running is True


def test_change_scene_and_current_scene(engine):
    assert engine.current_scene() is None
    first = RecordingScene(engine)
    second = RecordingScene(engine)
    engine.change_scene("A", first)
    assert engine.current_scene() is first
    engine.change_scene("B", second, False)
    assert engine.current_scene() is second
    engine.change_scene("A", first)
    assert engine.current_scene() is first


def test_change_scene_can_end_current(engine):
    first = RecordingScene(engine)
    engine.change_scene("A", first)
    engine.change_scene("B", RecordingScene(engine), True)
    engine._current = "A"
    assert engine.current_scene() is None


def test_update_updates_current_scene(engine):
    scene = RecordingScene(engine)
    engine.update()
    engine.change_scene("A", scene)
    engine.update()
    engine.update()
    assert scene.updates == 2


def test_quit_stops_running(engine):
    engine.quit()
    assert engine.is_running is False


def test_user_input_dispatches_actions(engine, display):
    scene = RecordingScene(engine)
    engine.change_scene("A", scene)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    engine.user_input()
    assert scene.actions == [
        Action("JUMP", "START"),
        Action("JUMP", "END"),
        Action("SHOOT", "START"),
    ]
    assert engine.running is True


def test_user_input_quit_event_stops(engine, display):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.user_input()
    assert engine.running is False


def test_run_loops_until_quit(engine, display):
    scene = RecordingScene(engine, stop_after_update=True)
    engine.change_scene("A", scene)
    engine.run()
    assert (scene.updates, scene.renders) == (1, 1)
    assert engine.running is False


def test_run_without_scene_raises(engine, display):
    with pytest.raises(RuntimeError):
        engine.run()


def test_engine_opens_window_from_config(config_file, display):
    game = GameEngine(str(config_file), assets=fake_assets())
    assert game.window_size == (320, 240)
    assert pygame.display.get_surface() is game.window