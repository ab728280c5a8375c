"""sector-strike - Timed-reticle targeting encounter simulation."""

from sector_strike.config import EncounterConfig
from sector_strike.encounter import Encounter
from sector_strike.geometry import angular_difference, polar_to_plane
from sector_strike.placement import Placement, Position, generate_enemy_positions
from sector_strike.reticle import ConvergingArcReticle, DualLineReticle, RadialReticle
from sector_strike.signals import SignalBus
from sector_strike.timers import TimerQueue
from sector_strike.types import (
    ArcTarget,
    EncounterState,
    Enemy,
    Feedback,
    FeedbackKind,
    Lifecycle,
    LineTarget,
    Phase,
    SectorGeometry,
    Verdict,
    VerdictKind,
    WeaponMode,
)
from sector_strike.weapons import CATALOGUE

__all__ = [
    "Encounter",
    "EncounterConfig",
    "EncounterState",
    "SectorGeometry",
    "Enemy",
    "LineTarget",
    "ArcTarget",
    "Lifecycle",
    "Phase",
    "WeaponMode",
    "Verdict",
    "VerdictKind",
    "Feedback",
    "FeedbackKind",
    "RadialReticle",
    "DualLineReticle",
    "ConvergingArcReticle",
    "Placement",
    "Position",
    "SignalBus",
    "TimerQueue",
    "CATALOGUE",
    "angular_difference",
    "polar_to_plane",
    "generate_enemy_positions",
]
