"""Tile and box based collision world for platformer games.

Actors are moving bodies that collide with static tile layers and solids;
solids are moving platforms that carry and push actors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from quadkit.geometry import Rect, Vec2


class Tile(Enum):
    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two collision results; anything but empty/jump-through is solid."""
        soft = {Tile.EMPTY, Tile.JUMP_THROUGH}
        if self is Tile.EMPTY and other is Tile.EMPTY:
            return Tile.EMPTY
        if self in soft and other in soft:
            return Tile.JUMP_THROUGH
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle for a moving body in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle for a moving platform in a World."""

    index: int


@dataclass
class _StaticTiledLayer:
    static_colliders: list[Tile]
    tile_width: float
    tile_height: float
    width: int
    tag: int


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, float(self.width), float(self.height))


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class World:
    """Collision world holding static tile layers, actors and solids."""

    def __init__(self) -> None:
        self._layers: list[_StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def _actor(self, actor: Actor) -> _Collider:
        if not 0 <= actor.index < len(self._actors):
            raise IndexError(f"unknown actor {actor.index}")
        return self._actors[actor.index]

    def _solid(self, solid: Solid) -> _Collider:
        if not 0 <= solid.index < len(self._solids):
            raise IndexError(f"unknown solid {solid.index}")
        return self._solids[solid.index]

    def add_static_tiled_layer(
        self,
        static_colliders: list[Tile],
        tile_width: float,
        tile_height: float,
        width: int,
        tag: int,
    ) -> None:
        """Add a row-major grid of tiles, `width` tiles per row."""
        self._layers.append(
            _StaticTiledLayer(list(static_colliders), tile_width, tile_height, width, tag)
        )

    def add_actor(self, pos: Vec2, width: int, height: int) -> Actor:
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) is Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(
                pos=pos,
                width=width,
                height=height,
                descent=inside_wood,
                seen_wood=inside_wood,
            )
        )
        return actor

    def add_solid(self, pos: Vec2, width: int, height: int) -> Solid:
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=pos, width=width, height=height))
        return solid

    def set_actor_position(self, actor: Actor, pos: Vec2) -> None:
        collider = self._actor(actor)
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = pos

    def descent(self, actor: Actor) -> None:
        """Let the actor fall through jump-through tiles."""
        self._actor(actor).descent = True

    def move_v(self, actor: Actor, dy: float) -> bool:
        """Move vertically pixel by pixel; False if blocked."""
        collider = self._actor(actor)
        collider.y_remainder += dy
        steps = _round(collider.y_remainder)
        if steps != 0:
            collider.y_remainder -= steps
            sign = 1 if steps > 0 else -1
            while steps != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(0.0, float(sign)), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile is Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile is Tile.EMPTY or (tile is Tile.JUMP_THROUGH and collider.descent):
                    collider.pos = Vec2(collider.pos.x, collider.pos.y + sign)
                    steps -= sign
                else:
                    return False

        if self.collide_solids(collider.pos, collider.width, collider.height) is not Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor: Actor, dx: float) -> bool:
        """Move horizontally pixel by pixel; False if blocked."""
        collider = self._actor(actor)
        collider.x_remainder += dx
        steps = _round(collider.x_remainder)
        if steps != 0:
            collider.x_remainder -= steps
            sign = 1 if steps > 0 else -1
            while steps != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(float(sign), 0.0), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = Vec2(collider.pos.x + sign, collider.pos.y)
                    steps -= sign
                else:
                    return False
        return True

    def solid_move(self, solid: Solid, dx: float, dy: float) -> None:
        """Move a solid, carrying riding actors and pushing ones in its way."""
        collider = self._solid(solid)
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round(collider.x_remainder)
        move_y = _round(collider.y_remainder)

        riding_rect = Rect(collider.pos.x, collider.pos.y - 1.0, float(collider.width), 1.0)
        pushing_rect = Rect(
            collider.pos.x + move_x,
            collider.pos.y,
            float(collider.width),
            float(collider.height),
        )

        riding: list[Actor] = []
        pushing: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            rider_rect = Rect(
                actor_collider.pos.x,
                actor_collider.pos.y + actor_collider.height - 1.0,
                float(actor_collider.width),
                1.0,
            )
            in_the_way = pushing_rect.overlaps(actor_collider.rect())
            if riding_rect.overlaps(rider_rect):
                riding.append(Actor(index))
            elif in_the_way and not actor_collider.squished:
                pushing.append(Actor(index))

            if not in_the_way:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding:
            self.move_h(actor, float(move_x))
        for actor in pushing:
            if not self.move_h(actor, float(move_x)):
                pushed = self._actors[actor.index]
                pushed.squished = True
                pushed.squishers.add(solid)
        collider.collidable = True

        if move_x != 0:
            collider.x_remainder -= move_x
            collider.pos = Vec2(collider.pos.x + move_x, collider.pos.y)
        if move_y != 0:
            collider.y_remainder -= move_y
            collider.pos = Vec2(collider.pos.x, collider.pos.y + move_y)

    def solid_at(self, pos: Vec2) -> bool:
        return self.tag_at(pos, 1)

    def tag_at(self, pos: Vec2, tag: int) -> bool:
        """True if the first non-empty layer tile at pos has this tag, or a solid is there."""
        for layer in self._layers:
            y = int(pos.y / layer.tile_width)
            x = int(pos.x / layer.tile_height)
            ix = y * layer.width + x
            if 0 <= ix < len(layer.static_colliders) and layer.static_colliders[ix] is not Tile.EMPTY:
                return layer.tag == tag

        return any(s.collidable and s.rect().contains(pos) for s in self._solids)

    def collide_solids(self, pos: Vec2, width: int, height: int) -> Tile:
        tile = self.collide_tag(1, pos, width, height)
        if tile is not Tile.EMPTY:
            return tile
        probe = Rect(pos.x, pos.y, float(width), float(height))
        if any(s.collidable and s.rect().overlaps(probe) for s in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag: int, pos: Vec2, width: int, height: int) -> Tile:
        """Tile hit by a width x height box at pos in layers carrying this tag."""
        for layer in self._layers:
            colliders = layer.static_colliders
            layer_width = layer.width
            layer_height = len(colliders) // layer_width + 1

            def check(point: Vec2) -> Tile:
                y = int(point.y / layer.tile_width)
                x = int(point.x / layer.tile_height)
                ix = y * layer_width + x
                if (
                    0 <= y < layer_height
                    and 0 <= x < layer_width
                    and 0 <= ix < len(colliders)
                    and layer.tag == tag
                    and colliders[ix] is not Tile.EMPTY
                ):
                    return colliders[ix]
                return Tile.EMPTY

            right = width - 1.0
            bottom = height - 1.0
            tile = (
                check(pos)
                .combine(check(pos + Vec2(right, 0.0)))
                .combine(check(pos + Vec2(right, bottom)))
                .combine(check(pos + Vec2(0.0, bottom)))
            )
            if tile is not Tile.EMPTY:
                return tile

            if width > int(layer.tile_width):
                x = pos.x + layer.tile_width
                while x < pos.x + width - 1.0:
                    tile = check(Vec2(x, pos.y)).combine(check(Vec2(x, pos.y + bottom)))
                    if tile is not Tile.EMPTY:
                        return tile
                    x += layer.tile_width

            if height > int(layer.tile_height):
                y = pos.y + layer.tile_height
                while y < pos.y + height - 1.0:
                    tile = check(Vec2(pos.x, y)).combine(check(Vec2(pos.x + right, y)))
                    if tile is not Tile.EMPTY:
                        return tile
                    y += layer.tile_height
        return Tile.EMPTY

    def squished(self, actor: Actor) -> bool:
        return self._actor(actor).squished

    def actor_pos(self, actor: Actor) -> Vec2:
        return self._actor(actor).pos

    def solid_pos(self, solid: Solid) -> Vec2:
        return self._solid(solid).pos

    def collide_check(self, actor: Actor, pos: Vec2) -> bool:
        """Would the actor collide if it stood at pos."""
        collider = self._actor(actor)
        tile = self.collide_solids(pos, collider.width, collider.height)
        if collider.descent:
            return tile in (Tile.SOLID, Tile.COLLIDER)
        return tile in (Tile.SOLID, Tile.COLLIDER, Tile.JUMP_THROUGH)