"""Shared enums, value types and state containers for the encounter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sector_strike.reticle import Reticle


class Phase(str, Enum):
    PLAYING = "playing"
    VICTORY = "victory"
    DEFEAT = "defeat"


class Lifecycle(str, Enum):
    ALIVE = "alive"
    POPPING = "popping"
    FADING = "fading"
    DEAD = "dead"


class WeaponMode(str, Enum):
    SWEEPING = "sweeping"
    BOUNCING = "bouncing"
    CHAINING = "chaining"
    DUAL_LINE = "dual_line"
    CONVERGING_ARC = "converging_arc"


class KillRule(str, Enum):
    """How a weapon's hits are resolved by combat."""

    IMMEDIATE = "immediate"
    CHAIN = "chain"
    GEOMETRY = "geometry"


class VerdictKind(str, Enum):
    KILL = "kill"
    CHAIN = "chain"
    TARGETS = "targets"
    MISS = "miss"


class FeedbackKind(str, Enum):
    NONE = "none"
    HIT = "hit"
    MISS = "miss"


@dataclass(frozen=True, slots=True)
class SectorGeometry:
    """Fixed angular wedge. Apex at ``center``, 0 degrees straight up.

    ``inner`` and ``outer`` bound the radial reticles, as fractions of
    ``plane_radius``.
    """

    half_width: float = 45.0
    inner: float = 0.1
    outer: float = 1.0
    center: tuple[float, float] = (100.0, 200.0)
    plane_radius: float = 180.0

    def __post_init__(self) -> None:
        if not 0.0 < self.half_width <= 180.0:
            raise ValueError("half_width must be in (0, 180]")
        if not 0.0 <= self.inner < self.outer <= 1.0:
            raise ValueError("radius bounds must satisfy 0 <= inner < outer <= 1")
        if self.plane_radius <= 0.0:
            raise ValueError("plane_radius must be positive")

    @property
    def min_angle(self) -> float:
        return -self.half_width

    @property
    def max_angle(self) -> float:
        return self.half_width

    @property
    def midpoint(self) -> float:
        return (self.inner + self.outer) / 2.0

    def contains_angle(self, angle: float) -> bool:
        return self.min_angle <= angle <= self.max_angle


@dataclass
class Enemy:
    index: int
    angle: float
    radius: float
    lifecycle: Lifecycle = Lifecycle.ALIVE

    @property
    def alive(self) -> bool:
        return self.lifecycle is Lifecycle.ALIVE


@dataclass
class LineTarget:
    """Left/right angle pair that both DualLine halves must cross together."""

    index: int
    left: float
    right: float
    hit: bool = False


@dataclass
class ArcTarget:
    """Top/bottom radius pair that both ConvergingArc halves must cross together."""

    index: int
    top: float
    bottom: float
    hit: bool = False


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of one hit-detection evaluation. Not applied by itself."""

    kind: VerdictKind
    targets: tuple[int, ...] = ()

    @property
    def is_miss(self) -> bool:
        return self.kind is VerdictKind.MISS


MISS = Verdict(VerdictKind.MISS)


@dataclass(frozen=True, slots=True)
class Feedback:
    kind: FeedbackKind = FeedbackKind.NONE
    subject: int | None = None


NO_FEEDBACK = Feedback()


@dataclass
class EncounterState:
    """Everything the combat rules read and write. Owned by ``Encounter``."""

    health: int
    max_health: int
    remaining: int
    enemies: list[Enemy]
    reticle: Reticle
    weapon_index: int = 0
    phase: Phase = Phase.PLAYING
    paused: bool = False
    feedback: Feedback = NO_FEEDBACK
    chain: list[int] = field(default_factory=list)
    chain_resolving: bool = False
    line_targets: list[LineTarget] = field(default_factory=list)
    arc_targets: list[ArcTarget] = field(default_factory=list)
    victory_pending: bool = False
    shaking: bool = False
    last_attack_ms: float | None = None

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def alive_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.lifecycle is Lifecycle.ALIVE]

    def animating(self) -> bool:
        """True while any enemy is popping or fading."""
        return any(
            e.lifecycle in (Lifecycle.POPPING, Lifecycle.FADING) for e in self.enemies
        )
