"""The playable level: loading, spawning, movement, collisions and drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional

import pygame

from .action import Action
from .animation import Animation
from .collision import collide_all
from .components import (
    CAnimation,
    CBoundingBox,
    CFriction,
    CGravity,
    CInput,
    CJumpTimer,
    CLifespan,
    CState,
    CTransform,
)
from .entity import Entity
from .scene import Scene
from .vec2 import Vec2

EPSILON = 0.05
GRID_SIZE = (64.0, 64.0)
GRID_COLOR = (255, 255, 255)
BOX_COLOR = (255, 255, 255, 50)

Segment = tuple[tuple[float, float], tuple[float, float]]

_SCENE_FLAGS = {
    "PAUSE": "paused",
    "QUIT": "has_ended",
    "TOGGLE_COLLISION": "draw_collision",
    "TOGGLE_GRID": "draw_grid",
}

_INPUT_FLAGS = {
    "JUMP": "jump",
    "LEFT": "left",
    "RIGHT": "right",
    "SHOOT": "shoot",
}


@dataclass
class EntityConfig:
    """Per-kind settings read from the head of a level file."""

    speed: float = 0.0
    grid_scale_x: float = 0.0
    grid_scale_y: float = 0.0
    lifespan: int = 0
    kind: str = ""
    orig_x: int = 0
    orig_y: int = 0


@dataclass
class LevelSpec:
    """A parsed level: entity settings and (tag, kind, x, y) placements."""

    player: EntityConfig = field(default_factory=EntityConfig)
    enemy: EntityConfig = field(default_factory=EntityConfig)
    tile: EntityConfig = field(default_factory=EntityConfig)
    bullet: EntityConfig = field(default_factory=EntityConfig)
    placements: list[tuple[str, str, float, float]] = field(default_factory=list)


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("level data ends unexpectedly") from None


def _number(tokens: Iterator[str]) -> float:
    token = _next(tokens)
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"expected a number in level data, got {token!r}") from None


def _integer(tokens: Iterator[str]) -> int:
    token = _next(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer in level data, got {token!r}") from None


def parse_level(text: str) -> LevelSpec:
    """Parse a level description.

    The first four words name entity kinds, each followed by its settings
    (bullets first give their texture kind). The rest is a list of
    ``<tag> <kind> <grid x> <grid y>`` placements. The player's and
    enemy's origin is kept in whole grid cells.
    """
    spec = LevelSpec()
    configs = {
        "Player": spec.player,
        "Tile": spec.tile,
        "Enemy": spec.enemy,
        "Bullet": spec.bullet,
    }
    tokens = iter(text.split())
    for _ in range(4):
        word = _next(tokens)
        config = configs.get(word)
        if config is None:
            continue
        if word == "Bullet":
            config.kind = _next(tokens)
        config.speed = _number(tokens)
        config.grid_scale_x = _number(tokens)
        config.grid_scale_y = _number(tokens)
        config.lifespan = _integer(tokens)

    for word in tokens:
        kind = _next(tokens)
        x = _number(tokens)
        y = _number(tokens)
        if word == "Player":
            spec.player.orig_x, spec.player.orig_y = int(x), int(y)
        elif word == "Enemy":
            spec.enemy.orig_x, spec.enemy.orig_y = int(x), int(y)
        spec.placements.append((word, kind, x, y))
    return spec


class ScenePlay(Scene):
    """A level loaded from a file and played on a grid of cells.

    ``game`` provides ``assets``, ``window_size`` (width, height),
    ``window`` (the surface drawn on) and ``change_scene``.
    """

    def __init__(self, game: Any, level_path: str) -> None:
        super().__init__(game)
        self.level_path = level_path
        self.player: Optional[Entity] = None
        self.grid_size = Vec2(*GRID_SIZE)
        self.draw_textures = False
        self.draw_grid = False
        self.draw_collision = False
        self.background: Any = None
        spec = LevelSpec()
        self.player_config = spec.player
        self.enemy_config = spec.enemy
        self.tile_config = spec.tile
        self.bullet_config = spec.bullet

        self.register_key_action(pygame.K_p, "PAUSE")
        self.register_key_action(pygame.K_ESCAPE, "QUIT")
        self.register_key_action(pygame.K_t, "TOGGLE_TEXTURE")
        self.register_key_action(pygame.K_c, "TOGGLE_COLLISION")
        self.register_key_action(pygame.K_g, "TOGGLE_GRID")
        self.register_key_action(pygame.K_w, "JUMP")
        self.register_key_action(pygame.K_a, "LEFT")
        self.register_key_action(pygame.K_d, "RIGHT")
        self.register_mouse_action(pygame.BUTTON_LEFT, "SHOOT")

        self._load_level(level_path)

    def _load_level(self, path: str) -> None:
        width, height = self.game.window_size
        background = self.game.assets.get_texture("Background_Background")
        self.background = pygame.transform.scale(background, (int(width), int(height)))

        spec = parse_level(Path(path).read_text())
        self.player_config = spec.player
        self.enemy_config = spec.enemy
        self.tile_config = spec.tile
        self.bullet_config = spec.bullet

        for tag, kind, x, y in spec.placements:
            if tag == "Player":
                self.spawn_player(int(x), int(y), kind)
            elif tag == "Enemy":
                self.spawn_enemy(int(x), int(y), kind)
            elif tag == "Tile":
                self.spawn_tile(x, y, kind)
        if self.player is None:
            raise ValueError(f"level {path} places no player")

    def _texture(self, name: str) -> Any:
        return self.game.assets.get_texture(name)

    def _box(self, config: EntityConfig) -> CBoundingBox:
        return CBoundingBox(
            Vec2(self.grid_size.x * config.grid_scale_x, self.grid_size.y * config.grid_scale_y)
        )

    def grid_to_mid_pixel(self, grid_x: float, grid_y: float) -> Vec2:
        """Pixel centre of a grid cell; grid (0, 0) is the bottom-left cell."""
        _, height = self.game.window_size
        x = grid_x * self.grid_size.x + self.grid_size.x / 2.0
        y = height - (grid_y * self.grid_size.y + self.grid_size.y / 2.0)
        return Vec2(x, y)

    def spawn_player(self, x: float, y: float, kind: str) -> Entity:
        name = f"Player_{kind}"
        player = self.entities.add_entity("Player")
        player.add_component(CAnimation(Animation(name, self._texture(name), 2, 10)))
        player.add_component(CTransform(pos=self.grid_to_mid_pixel(x, y)))
        player.add_component(self._box(self.player_config))
        player.add_component(CLifespan(self.player_config.lifespan))
        player.add_component(CInput())
        player.add_component(CGravity())
        player.add_component(CFriction())
        player.add_component(CState())
        player.add_component(CJumpTimer())
        self.player = player
        return player

    def spawn_enemy(self, x: float, y: float, kind: str) -> Entity:
        name = f"Enemy_{kind}"
        enemy = self.entities.add_entity("Enemy")
        enemy.add_component(CAnimation(Animation(name, self._texture(name), 2, 10)))
        enemy.add_component(
            CTransform(
                pos=self.grid_to_mid_pixel(x, y),
                velocity=Vec2(self.enemy_config.speed, 0.0),
            )
        )
        enemy.add_component(self._box(self.enemy_config))
        enemy.add_component(CLifespan(self.enemy_config.lifespan))
        enemy.add_component(CGravity())
        enemy.add_component(CState())
        return enemy

    def spawn_tile(self, x: float, y: float, kind: str) -> Entity:
        name = f"Tile_{kind}"
        tile = self.entities.add_entity("Tile")
        # Tiles have a single frame and are never advanced, so a zero speed is harmless.
        speed = max(1, int(self.tile_config.speed))
        tile.add_component(CAnimation(Animation(name, self._texture(name), 1, speed)))
        tile.add_component(CTransform(pos=self.grid_to_mid_pixel(x, y)))
        tile.add_component(self._box(self.tile_config))
        tile.add_component(CLifespan(self.tile_config.lifespan))
        return tile

    def spawn_bullet(self, kind: str) -> Entity:
        """Fire a bullet from the player's position in the direction it faces."""
        name = f"Bullet_{kind}"
        bullet = self.entities.add_entity("Bullet")
        bullet.add_component(CAnimation(Animation(name, self._texture(name), 8, 10)))
        state = bullet.add_component(CState())
        player_pos = self.player.get_component(CTransform).pos
        facing_right = self.player.get_component(CState).facing_right
        speed = self.bullet_config.speed if facing_right else -self.bullet_config.speed
        bullet.add_component(
            CTransform(pos=Vec2(player_pos.x, player_pos.y), velocity=Vec2(speed, 0.0))
        )
        state.facing_right = facing_right
        bullet.add_component(self._box(self.bullet_config))
        bullet.add_component(CLifespan(self.bullet_config.lifespan))
        return bullet

    def update(self) -> None:
        """Advance one frame unless paused; return to the menu once ended."""
        if not self.paused:
            self.entities.update()
            if not self.player.active:
                self.spawn_player(self.player_config.orig_x, self.player_config.orig_y, "Idle")
            self.movement()
            collide_all(self.entities.entities())
            self.animate()
            self.current_frame += 1
        if self.has_ended:
            from .scene_menu import SceneMenu

            self.game.change_scene("Menu", SceneMenu(self.game), False)

    def simulate(self) -> None:
        """Nothing to simulate beyond ``update``."""

    def do_action(self, action: Action) -> None:
        """Set scene flags and player input from START and END actions."""
        if action.type == "START":
            value = True
        elif action.type == "END":
            value = False
        else:
            return
        if action.name in _SCENE_FLAGS:
            setattr(self, _SCENE_FLAGS[action.name], value)
        elif action.name in _INPUT_FLAGS:
            setattr(self.player.get_component(CInput), _INPUT_FLAGS[action.name], value)

    def _player_movement(self) -> None:
        player = self.player
        controls = player.get_component(CInput)
        state = player.get_component(CState)
        timer = player.get_component(CJumpTimer)
        transform = player.get_component(CTransform)
        jump_speed = -self.player_config.speed * timer.speed_multiplier

        if controls.jump and state.on_ground and not timer.is_jumping:
            transform.velocity.y = jump_speed
            state.on_ground = False
            timer.is_jumping = True
            timer.current_frame = 0
        if timer.is_jumping:
            # Keep pushing upward for the timer's duration for a smoother jump.
            timer.current_frame += 1
            if timer.current_frame > timer.duration:
                timer.is_jumping = False
            transform.velocity.y = jump_speed

        if controls.left and state.on_ground:
            transform.velocity.x = -self.player_config.speed
            state.facing_right = False
        if controls.right and state.on_ground:
            transform.velocity.x = self.player_config.speed
            state.facing_right = True
        if state.on_ground:
            transform.velocity.x *= player.get_component(CFriction).friction

        if controls.shoot and not state.is_firing:
            self.spawn_bullet(self.bullet_config.kind)
            state.is_firing = True
        if not controls.shoot:
            state.is_firing = False

    @staticmethod
    def _confine(entity: Entity, width: float, height: float) -> None:
        transform = entity.get_component(CTransform)
        state = entity.get_component(CState)
        size = entity.get_component(CBoundingBox).size
        half_x, half_y = size.x / 2.0, size.y / 2.0
        pos, velocity = transform.pos, transform.velocity

        if pos.x - half_x < 0:
            if entity.tag == "Bullet":
                entity.destroy()
            pos.x = half_x
            if entity.tag == "Enemy":
                velocity.x *= -1
                state.facing_right = True
            else:
                velocity.x = 0.0
        elif pos.x + half_x > width:
            if entity.tag == "Bullet":
                entity.destroy()
            pos.x = width - half_x
            if entity.tag == "Enemy":
                velocity.x *= -1
                state.facing_right = False
            else:
                velocity.x = 0.0

        if pos.y - half_y < 0:
            if entity.tag == "Bullet":
                entity.destroy()
            pos.y = half_y
            velocity.y = 0.0
        elif pos.y + half_y > height:
            entity.destroy()

    def movement(self) -> None:
        """Apply input, window borders, gravity and velocity to every entity."""
        self._player_movement()
        width, height = self.game.window_size
        for entity in self.entities.entities():
            transform = entity.get_component(CTransform)
            if entity.has_component(CState):
                state = entity.get_component(CState)
                if state.on_ground:
                    transform.velocity.y = 0.0
                self._confine(entity, width, height)
                if entity.has_component(CGravity):
                    transform.velocity.y += entity.get_component(CGravity).gravity
                # Friction never brings velocity exactly to zero.
                vx = transform.velocity.x
                if abs(vx) > EPSILON and state.on_ground:
                    state.is_running = True
                    state.is_idle = False
                elif vx < EPSILON and state.on_ground:
                    state.is_running = False
                    state.is_idle = True
            transform.prev_pos = transform.pos
            transform.pos = transform.pos + transform.velocity

    def _set_player_animation(self, name: str, frame_count: int) -> None:
        animation = Animation(name, self._texture(name), frame_count, 10)
        self.player.add_component(CAnimation(animation))

    def animate(self) -> None:
        """Pick the player's animation from its state and advance animations."""
        state = self.player.get_component(CState)
        current = self.player.get_component(CAnimation).animation.name
        if not state.on_ground and current != "Player_Jump":
            self._set_player_animation("Player_Jump", 1)
        elif state.is_idle and current != "Player_Idle":
            self._set_player_animation("Player_Idle", 2)
        elif state.is_running and current != "Player_Run":
            self._set_player_animation("Player_Run", 3)

        for entity in self.entities.entities():
            if entity.has_component(CAnimation) and entity.has_component(CState):
                entity.get_component(CAnimation).animation.update()

    def grid_lines(self) -> list[Segment]:
        """Segments of the debug grid, vertical lines first."""
        width, height = self.game.window_size
        columns = int(width / self.grid_size.x)
        rows = int(height / self.grid_size.y)
        top = float(height) - rows * self.grid_size.y
        right = columns * self.grid_size.x
        lines: list[Segment] = [
            ((i * self.grid_size.x, float(height)), (i * self.grid_size.x, top))
            for i in range(columns + 1)
        ]
        lines.extend(
            ((0.0, height - j * self.grid_size.y), (right, height - j * self.grid_size.y))
            for j in range(rows + 1)
        )
        return lines

    def _draw_sprite(self, window: Any, entity: Entity) -> None:
        transform = entity.get_component(CTransform)
        animation = entity.get_component(CAnimation).animation
        image = animation.frame_image()
        frame_w, frame_h = animation.frame_size.x, animation.frame_size.y
        if image is None or frame_w == 0 or frame_h == 0:
            return
        transform.scale.x = self.grid_size.x / frame_w
        transform.scale.y = self.grid_size.y / frame_h
        if entity.has_component(CState) and not entity.get_component(CState).facing_right:
            transform.scale.x = -transform.scale.x
        size = (round(abs(transform.scale.x) * frame_w), round(transform.scale.y * frame_h))
        sprite = pygame.transform.scale(image, size)
        if transform.scale.x < 0:
            sprite = pygame.transform.flip(sprite, True, False)
        window.blit(sprite, (transform.pos.x - size[0] / 2.0, transform.pos.y - size[1] / 2.0))

    @staticmethod
    def _draw_box(window: Any, entity: Entity) -> None:
        size = entity.get_component(CBoundingBox).size
        pos = entity.get_component(CTransform).pos
        box = pygame.Surface((max(1, round(size.x)), max(1, round(size.y))), pygame.SRCALPHA)
        box.fill(BOX_COLOR)
        window.blit(box, (pos.x - size.x / 2.0, pos.y - size.y / 2.0))

    def render(self) -> None:
        """Draw background, optional grid, sprites and optional bounding boxes."""
        window = self.game.window
        window.fill((0, 0, 0))
        window.blit(self.background, (0, 0))
        if self.draw_grid:
            for start, end in self.grid_lines():
                pygame.draw.line(window, GRID_COLOR, start, end)
        for entity in self.entities.entities():
            if entity.has_component(CTransform) and entity.has_component(CAnimation):
                self._draw_sprite(window, entity)
            if self.draw_collision and entity.has_component(CBoundingBox):
                self._draw_box(window, entity)
        if pygame.display.get_init() and pygame.display.get_surface() is window:
            pygame.display.flip()