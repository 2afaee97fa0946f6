"""Caching loader for textures, fonts and sounds."""

from __future__ import annotations

from typing import Any, Optional

import pygame


class ResourceManager:
    """Loads each asset once and hands out the cached object afterwards.

    A failed load raises and leaves nothing cached, so it is retried on
    the next request.
    """

    def __init__(self) -> None:
        self._textures: dict[str, Any] = {}
        self._fonts: dict[tuple[Optional[str], int], Any] = {}
        self._sounds: dict[str, Any] = {}

    def load_texture(self, path: str) -> pygame.Surface:
        """The image at ``path``."""
        texture = self._textures.get(path)
        if texture is None:
            texture = pygame.image.load(path)
            self._textures[path] = texture
        return texture

    def load_font(self, path: Optional[str], size: int) -> pygame.font.Font:
        """The font at ``path`` (None for the default font) at ``size`` pixels."""
        key = (path, size)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(path, size)
            self._fonts[key] = font
        return font

    def load_sound(self, path: str) -> pygame.mixer.Sound:
        """The sound at ``path``; the mixer must already be initialised."""
        sound = self._sounds.get(path)
        if sound is None:
            sound = pygame.mixer.Sound(path)
            self._sounds[path] = sound
        return sound

    def unload_all(self) -> None:
        """Forget every cached asset."""
        self._textures.clear()
        self._fonts.clear()
        self._sounds.clear()