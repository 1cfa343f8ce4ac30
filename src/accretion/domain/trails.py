# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Motion trails.

Bounded position history per live body, plus detached trails that fade
out after their body was consumed by a merge.
"""
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.collision_merge import MergeResult

DEFAULT_TRAIL_LENGTH = 512
DEFAULT_FADEOUT_S = 2.0


@dataclass
class Trail:
    """Ring buffer of past positions (world units)."""
    vertices: Deque[tuple[float, float]]
    fadeout_s: float | None = None
    remaining_s: float | None = None

    @classmethod
    def empty(cls, length: int = DEFAULT_TRAIL_LENGTH) -> "Trail":
        return cls(vertices=deque(maxlen=length))

    def add_vertex(self, vertex: tuple[float, float]) -> None:
        self.vertices.append(vertex)

    def start_fadeout(self, seconds: float) -> None:
        """Begin fading; a non-positive duration removes the fade."""
        if seconds > 0:
            self.fadeout_s = seconds
            self.remaining_s = seconds
        else:
            self.fadeout_s = None
            self.remaining_s = None

    @property
    def fading(self) -> bool:
        return self.fadeout_s is not None

    @property
    def finished(self) -> bool:
        return self.remaining_s is not None and self.remaining_s <= 0.0

    @property
    def alpha(self) -> float:
        """Opacity in [0, 1]: remaining / duration while fading, else 1."""
        if self.fadeout_s is None or self.remaining_s is None:
            return 1.0
        ratio = self.remaining_s / self.fadeout_s
        if not math.isfinite(ratio):
            return 1.0
        return max(0.0, min(1.0, ratio))

    def tick(self, dt: float) -> None:
        if self.remaining_s is not None:
            self.remaining_s = max(0.0, self.remaining_s - dt)


@dataclass
class TrailStore:
    """Trails keyed by live body id, plus fading trails of merged bodies."""
    length: int = DEFAULT_TRAIL_LENGTH
    fadeout_s: float = DEFAULT_FADEOUT_S
    live: dict[int, Trail] = field(default_factory=dict)
    fading: list[Trail] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"trail length must be >= 1, got {self.length}")

    def record(self, bodies: BodyRegistry) -> None:
        """Append each live body's position to its trail."""
        for body in bodies:
            trail = self.live.get(body.body_id)
            if trail is None:
                trail = self.live[body.body_id] = Trail.empty(self.length)
            trail.add_vertex(body.position)

    def on_merge(self, merge: MergeResult) -> None:
        """
        Detach the consumed bodies' trails and fade them out.

        The heavier consumed body's trail is extended to the merged
        position so it joins the new body's trail.
        """
        id_a, id_b = merge.consumed
        mass_a, mass_b = merge.consumed_masses
        heavier = id_a if mass_a > mass_b else id_b
        for body_id in merge.consumed:
            trail = self.live.pop(body_id, None)
            if trail is None:
                continue
            if body_id == heavier:
                trail.add_vertex(merge.position)
            trail.start_fadeout(self.fadeout_s)
            if trail.fading:
                self.fading.append(trail)

    def advance(self, dt: float) -> None:
        """Tick fade timers and drop finished trails."""
        for trail in self.fading:
            trail.tick(dt)
        self.fading = [t for t in self.fading if not t.finished]

    def prune(self, bodies: BodyRegistry) -> None:
        """Forget trails of bodies removed outside a merge."""
        for body_id in [i for i in self.live if i not in bodies]:
            del self.live[body_id]
