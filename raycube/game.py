"""Game state, keyboard handling and the interactive window loop."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .model import WINDOW_HEIGHT, WINDOW_WIDTH, Map
from .player import Player
from .render import draw_background, draw_walls, new_frame
from .textures import TextureSet, load_textures

WINDOW_TITLE = "cub3D"

_KEY_FIELDS = {
    "left": "left",
    "right": "right",
    "w": "forward",
    "s": "backward",
    "a": "strafe_left",
    "d": "strafe_right",
}


@dataclass
class Keys:
    """Which rotation and movement keys are currently held."""

    left: bool = False
    right: bool = False
    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False

    def _set(self, key: str, held: bool) -> bool:
        name = _KEY_FIELDS.get(key)
        if name is None:
            return False
        setattr(self, name, held)
        return True

    def press(self, key: str) -> bool:
        """Mark a key as held; returns whether the key is one that is tracked."""
        return self._set(key, True)

    def release(self, key: str) -> bool:
        """Mark a key as released; returns whether the key is one that is tracked."""
        return self._set(key, False)

    def any_movement(self) -> bool:
        """Whether any of the walking or strafing keys is held."""
        return self.forward or self.backward or self.strafe_left or self.strafe_right


@dataclass
class Game:
    """A loaded scene, the player in it and the frame drawn from them."""

    cub_map: Map
    player: Player
    textures: TextureSet | None = None
    win_width: int = WINDOW_WIDTH
    win_height: int = WINDOW_HEIGHT
    keys: Keys = field(default_factory=Keys)
    frame: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.frame = new_frame(self.win_width, self.win_height)

    def update(self) -> bool:
        """Apply the held keys for one tick; redraw and return True if anything changed."""
        updated = False
        if self.keys.left:
            self.player.rotate(1)
            updated = True
        if self.keys.right:
            self.player.rotate(-1)
            updated = True
        if self.keys.any_movement():
            self.player.move(
                self.cub_map,
                forward=self.keys.forward,
                backward=self.keys.backward,
                strafe_left=self.keys.strafe_left,
                strafe_right=self.keys.strafe_right,
            )
            updated = True
        if updated:
            self.render()
        return updated

    def render(self) -> np.ndarray:
        """Draw the background and, when textures are loaded, the walls."""
        draw_background(self.frame, self.cub_map)
        if self.textures is not None:
            draw_walls(self.frame, self.player, self.cub_map, self.textures)
        return self.frame

    def run(self) -> None:
        """Open the window and run the event loop until it is closed."""
        if self.textures is None:
            self.textures = load_textures(self.cub_map)

        import pygame

        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((self.win_width, self.win_height))
            except pygame.error as exc:
                raise RuntimeError("failed to create window") from exc
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            self._present(pygame, screen, self.render())
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        else:
                            self.keys.press(pygame.key.name(event.key))
                    elif event.type == pygame.KEYUP:
                        self.keys.release(pygame.key.name(event.key))
                if running and self.update():
                    self._present(pygame, screen, self.frame)
                clock.tick(60)
        finally:
            pygame.quit()

    @staticmethod
    def _present(pygame, screen, frame: np.ndarray) -> None:
        rgb = np.stack(
            ((frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF), axis=-1
        ).astype(np.uint8)
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        pygame.display.flip()