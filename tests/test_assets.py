import pygame
import pytest

from gridrunner.animation import Animation
from gridrunner.assets import Assets


def _recording_loader(calls):
    def load(path):
        calls.append(path)
        return ("loaded", path)

    return load


def test_texture_uses_loader_and_is_found_by_name():
    calls = []
    assets = Assets(texture_loader=_recording_loader(calls))
    assets.add_texture("Tile_Ground", "images/ground.png")
    assert calls == ["images/ground.png"]
    assert assets.get_texture("Tile_Ground") == ("loaded", "images/ground.png")


def test_adding_same_name_replaces():
    assets = Assets(texture_loader=_recording_loader([]))
    assets.add_texture("Player_Idle", "a.png")
    assets.add_texture("Player_Idle", "b.png")
    assert assets.get_texture("Player_Idle") == ("loaded", "b.png")


def test_sound_and_font_use_their_loaders():
    sounds, fonts = [], []
    assets = Assets(
        sound_loader=_recording_loader(sounds),
        font_loader=_recording_loader(fonts),
    )
    assets.add_sound("shot", "shot.wav")
    assets.add_font("Font_Arial", "arial.ttf")
    assert sounds == ["shot.wav"]
    assert fonts == ["arial.ttf"]
    assert assets.get_sound("shot") == ("loaded", "shot.wav")
    assert assets.get_font("Font_Arial") == ("loaded", "arial.ttf")


def test_animation_round_trip():
    assets = Assets()
    animation = Animation("Enemy_Walk", None, 2, 10)
    assets.add_animation("Enemy_Walk", animation)
    assert assets.get_animation("Enemy_Walk") is animation


@pytest.mark.parametrize(
    "adder, getter",
    [
        ("add_texture", "get_texture"),
        ("add_sound", "get_sound"),
        ("add_font", "get_font"),
    ],
)
def test_unknown_name_raises_key_error(adder, getter):
    loader = _recording_loader([])
    assets = Assets(texture_loader=loader, sound_loader=loader, font_loader=loader)
    getattr(assets, adder)("present", "present.bin")
    assert getattr(assets, getter)("present") == ("loaded", "present.bin")
    with pytest.raises(KeyError) as excinfo:
        getattr(assets, getter)("missing")
    assert "missing" in str(excinfo.value)


def test_unknown_animation_raises_key_error():
    assets = Assets()
    animation = Animation("Enemy_Walk", None, 2, 10)
    assets.add_animation("Enemy_Walk", animation)
    assert assets.get_animation("Enemy_Walk") is animation
    with pytest.raises(KeyError) as excinfo:
        assets.get_animation("missing")
    assert "missing" in str(excinfo.value)


def test_default_texture_loader_reads_image(tmp_path):
    surface = pygame.Surface((8, 4))
    path = tmp_path / "tile.png"
    pygame.image.save(surface, str(path))
    assets = Assets()
    assets.add_texture("Tile_Test", str(path))
    assert assets.get_texture("Tile_Test").get_size() == (8, 4)


def test_default_font_loader_missing_file(tmp_path):
    assets = Assets()
    with pytest.raises(FileNotFoundError):
        assets.add_font("Font_None", str(tmp_path / "none.ttf"))


def test_default_font_loader_keeps_path(tmp_path):
    path = tmp_path / "font.ttf"
    path.write_bytes(b"\x00")
    assets = Assets()
    assets.add_font("Font_Test", str(path))
    assert assets.get_font("Font_Test") == path