"""World - ordered entity registry, frame buffer and global counters."""

from __future__ import annotations

import os
import random
from typing import Generator

from tick_invaders.collision import CollisionMode
from tick_invaders.config import HEIGHT, OFFSCREEN_MARGIN, STARTING_LIVES, WIDTH
from tick_invaders.entities import Entity, advance, classify, render
from tick_invaders.framebuffer import FrameBuffer
from tick_invaders.input import KeyState
from tick_invaders.types import Counter, DeadEntityError, EntityId, EntityKind, InputSource


class World:
    """Owns every entity of one game session.

    Insertion order is tick and draw order. During ``tick`` the order is
    snapshotted: additions are buffered and appended once the pass is
    done, removals take effect immediately for lookups and scans but the
    entries are only dropped after the pass. Entity ids are never reused,
    so removing one entity never invalidates another's id.
    """

    def __init__(
        self,
        height: int = HEIGHT,
        width: int = WIDTH,
        input_source: InputSource | None = None,
        *,
        lives: int = STARTING_LIVES,
        seed: int | None = None,
        collision_mode: CollisionMode = CollisionMode.LEGACY,
        offscreen_margin: int | None = OFFSCREEN_MARGIN,
    ) -> None:
        if lives < 0:
            raise ValueError(f"lives must not be negative, got {lives}")
        self._buffer = FrameBuffer(height, width)
        self._input: InputSource = input_source if input_source is not None else KeyState()
        self._entities: dict[EntityId, Entity] = {}
        # id(entity) -> its current entity id, live or pending add
        self._ids_by_object: dict[int, EntityId] = {}
        self._next_id: int = 0
        self._counters: dict[str, Counter] = {
            "score": Counter("integer", 0),
            "lives_left": Counter("integer", lives),
        }
        self._collision_mode = collision_mode
        self._offscreen_margin = offscreen_margin

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._ticking: bool = False
        self._pending_add: list[tuple[EntityId, Entity]] = []
        self._pending_remove: set[EntityId] = set()

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def buffer(self) -> FrameBuffer:
        return self._buffer

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def collision_mode(self) -> CollisionMode:
        return self._collision_mode

    @property
    def offscreen_margin(self) -> int | None:
        return self._offscreen_margin

    @property
    def input_source(self) -> InputSource:
        return self._input

    def is_key_pressed(self, name: str) -> bool:
        return self._input.is_key_pressed(name)

    # -- Entities --

    def add(self, entity: Entity) -> EntityId:
        classify(entity)
        eid = self._next_id
        self._next_id += 1
        if self._ticking:
            self._pending_add.append((eid, entity))
        else:
            self._entities[eid] = entity
        self._ids_by_object[id(entity)] = eid
        return eid

    def remove(self, entity_id: EntityId) -> None:
        if entity_id in self._entities and entity_id not in self._pending_remove:
            self._forget(entity_id, self._entities[entity_id])
            if self._ticking:
                self._pending_remove.add(entity_id)
            else:
                del self._entities[entity_id]
            return
        for i, (eid, entity) in enumerate(self._pending_add):
            if eid == entity_id:
                self._forget(eid, entity)
                del self._pending_add[i]
                return
        raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")

    def _forget(self, entity_id: EntityId, entity: Entity) -> None:
        if self._ids_by_object.get(id(entity)) == entity_id:
            del self._ids_by_object[id(entity)]

    def remove_at(self, index: int) -> None:
        """Remove the entity currently at ``index`` in tick order."""
        self.remove(self.ids()[index])

    def get(self, entity_id: EntityId) -> Entity:
        if not self.alive(entity_id):
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        return self._entities[entity_id]

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._entities and entity_id not in self._pending_remove

    def entities(self) -> Generator[tuple[EntityId, Entity], None, None]:
        for eid, entity in list(self._entities.items()):
            if eid not in self._pending_remove:
                yield eid, entity

    def ids(self) -> list[EntityId]:
        return [eid for eid, _ in self.entities()]

    def index_of(self, entity_id: EntityId) -> int:
        try:
            return self.ids().index(entity_id)
        except ValueError:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            ) from None

    def id_of(self, entity: Entity) -> EntityId | None:
        """Id of this exact object, including one added earlier in the current tick.

        An object registered more than once answers with its latest id.
        """
        return self._ids_by_object.get(id(entity))

    def of_kind(self, kind: EntityKind) -> list[tuple[EntityId, Entity]]:
        return [(eid, e) for eid, e in self.entities() if classify(e) is kind]

    def __len__(self) -> int:
        return len(self._entities) - len(self._pending_remove)

    @property
    def game_over(self) -> bool:
        return not self.of_kind(EntityKind.PLAYER)

    # -- Counters --

    def counter(self, name: str) -> Counter:
        return self._counters[name]

    def set_counter(self, name: str, value: int | str) -> None:
        kind = "integer" if isinstance(value, int) else "string"
        self._counters[name] = Counter(kind, value)

    def add_to_counter(self, name: str, amount: int) -> None:
        counter = self._counters[name]
        if counter.kind != "integer":
            raise TypeError(f"Counter {name!r} is not an integer")
        counter.value += amount

    @property
    def score(self) -> int:
        return self._counters["score"].value

    @property
    def lives_left(self) -> int:
        return self._counters["lives_left"].value

    # -- Frame --

    def tick(self, delta: float) -> None:
        if self._ticking:
            raise RuntimeError("World.tick() is not re-entrant")
        self._ticking = True
        try:
            for eid, entity in list(self._entities.items()):
                if eid in self._pending_remove:
                    continue
                advance(entity, self, delta)
        finally:
            self._ticking = False
            self._flush()

    def _flush(self) -> None:
        for eid in self._pending_remove:
            del self._entities[eid]
        self._pending_remove.clear()
        for eid, entity in self._pending_add:
            self._entities[eid] = entity
        self._pending_add.clear()

    def draw(self) -> str:
        self._buffer.clear()
        for _, entity in self.entities():
            origin, sprite = render(entity, self)
            self._buffer.composite(origin, sprite)
        return self._buffer.render()
