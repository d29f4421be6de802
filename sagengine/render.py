"""Render passes, the window interface and the renderer that drives them."""

from __future__ import annotations

import abc
from typing import Dict, List


class RenderPassData:
    """Named textures handed from one render pass to the next."""

    def __init__(self) -> None:
        self._textures: Dict[str, int] = {}

    def add_texture(self, name: str, texture_id: int) -> None:
        """Register a texture; an existing name keeps its first id."""
        self._textures.setdefault(name, texture_id)

    def get_texture(self, name: str) -> int:
        try:
            return self._textures[name]
        except KeyError:
            raise KeyError(f"No texture with the name {name!r} was found.") from None


class RenderPass(abc.ABC):
    """One stage of rendering a scene."""

    @abc.abstractmethod
    def render(self, scene, pass_data: RenderPassData) -> None:
        """Render ``scene``, sharing data with other passes via ``pass_data``."""


class RenderWindow(abc.ABC):
    """A surface the renderer presents its frames to."""

    @abc.abstractmethod
    def swap_buffer(self) -> None:
        """Present the finished frame."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Height in pixels."""


class Renderer:
    """Runs its render passes in order each frame, then presents the frame."""

    def __init__(self, render_window: RenderWindow) -> None:
        self.render_window = render_window
        self._passes: List[RenderPass] = []

    @property
    def render_passes(self) -> tuple:
        return tuple(self._passes)

    def add_render_pass(self, render_pass: RenderPass) -> None:
        self._passes.append(render_pass)

    def render(self, scene) -> None:
        pass_data = RenderPassData()
        for render_pass in self._passes:
            render_pass.render(scene, pass_data)
        self.render_window.swap_buffer()