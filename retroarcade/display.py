"""Window, input, text and sound plumbing that runs a game on pygame."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pygame

from retroarcade.core import Controls, Key, Rect

_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_p: Key.P,
}

_fonts: dict[int, pygame.font.Font] = {}


def _draw_text(surface, text, x, y, size, color) -> None:
    """Render ``text`` at ``(x, y)`` with the default font at ``size``."""
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    surface.blit(font.render(text, True, color), (x, y))


def _rect_tuple(rect: Rect) -> tuple[int, int, int, int]:
    """Whole-pixel ``(x, y, width, height)`` of a rectangle for drawing."""
    return int(rect.x), int(rect.y), int(rect.width), int(rect.height)


def controls_from_keys(held: Iterable[Key], previous: Iterable[Key]) -> Controls:
    """Build this frame's controls from the keys held now and last frame."""
    now = frozenset(held)
    return Controls(held=now, pressed=now - frozenset(previous))


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()


def load_sound(path):
    """Load a sound effect; a missing or unplayable file gives ``None``."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        _ensure_mixer()
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def _start_music(path) -> None:
    path = Path(path)
    if not path.is_file():
        return
    try:
        _ensure_mixer()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.set_volume(1.0)
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _close_requested() -> bool:
    close = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            close = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            close = True
    return close


def _held_keys() -> frozenset[Key]:
    pressed = pygame.key.get_pressed()
    return frozenset(key for code, key in _KEYMAP.items() if pressed[code])


def run_game(game, title, fps=60):
    """Open a window and run ``game`` until the window is closed or Esc is hit.

    The game provides ``width``, ``height``, ``update`` and ``draw``. A game
    whose ``frame_time_aware`` attribute is true also gets the last frame's
    duration in seconds; one with a ``music_path`` gets looping music.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(game.width), int(game.height)))
        pygame.display.set_caption(title)
        music_path = getattr(game, "music_path", None)
        if music_path:
            _start_music(music_path)

        clock = pygame.time.Clock()
        previous: frozenset[Key] = frozenset()
        frame_time = 0.0
        wants_time = getattr(game, "frame_time_aware", False)
        while not _close_requested():
            held = _held_keys()
            controls = controls_from_keys(held, previous)
            previous = held
            if wants_time:
                game.update(controls, frame_time)
            else:
                game.update(controls)
            game.draw(screen)
            pygame.display.flip()
            frame_time = clock.tick(fps) / 1000.0
    finally:
        pygame.quit()