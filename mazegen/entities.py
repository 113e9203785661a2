"""Things that can occupy a maze cell."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Entity(ABC):
    """Something drawn in a maze cell, with a symbol and a console colour code."""

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Character used to draw the entity."""

    @property
    @abstractmethod
    def color_code(self) -> int:
        """Console colour code (0-7) used to draw the entity."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Wall(Entity):
    symbol = "#"
    color_code = 7


class Passage(Entity):
    symbol = " "
    color_code = 0


@dataclass
class Player(Entity):
    health: int = 0
    speed: int = 0

    symbol = "@"
    color_code = 1


@dataclass
class Enemy(Entity):
    speed: int = 0

    symbol = "!"
    color_code = 4


class Exit(Entity):
    symbol = "*"
    color_code = 6