"""Encounter configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EncounterConfig:
    """Immutable tuning for one encounter.

    Durations are milliseconds of encounter time. Speeds are per second:
    normalized radius per second for radial reticles, degrees per second
    for the DualLine halves.

    Attributes:
        max_health: Starting (and maximum) player health.
        enemy_count: Point enemies and line/arc targets per encounter.
        radial_speed: Sweeping/Bouncing/Chaining reticle speed.
        line_speed_left: DualLine left half speed.
        line_speed_right: DualLine right half speed.
        arc_speed: ConvergingArc speed of each half.
        bounce_nudge: Distance a bouncing reticle is placed inside a bound.
        radius_tolerance: Radial hit window for point enemies.
        angle_tolerance: Angular hit window for each DualLine half.
        arc_tolerance: Radial hit window for each ConvergingArc half.
        pop_ms: Popping duration before an enemy starts fading.
        fade_ms: Fading duration before an enemy is dead.
        miss_ms: Miss feedback duration (the player is braced).
        victory_delay_ms: Delay between the final hit and Victory.
        shake_ms: Screen shake after each kill.
        chain_stagger_ms: Delay between consecutive chained kills.
        attack_debounce_ms: Minimum spacing between accepted attack intents.
        edge_inset: Degrees kept clear at both sector edges during placement.
        radius_min: Lowest enemy radius.
        radius_max: Highest enemy radius.
        min_angle_separation: Minimum degrees between enemies.
        min_radius_separation: Minimum normalized radius between enemies.
        min_planar_distance: Minimum plane distance between enemies.
        max_placement_attempts: Samples tried per enemy before falling back.
        line_center_clearance: Degrees around 0 kept for the centered line target.
        arc_jitter: Maximum random offset applied to arc target pairs.
    """

    max_health: int = 6
    enemy_count: int = 3

    radial_speed: float = 0.6
    line_speed_left: float = 40.0
    line_speed_right: float = 55.0
    arc_speed: float = 0.35
    bounce_nudge: float = 0.001

    radius_tolerance: float = 0.05
    angle_tolerance: float = 4.0
    arc_tolerance: float = 0.04

    pop_ms: float = 600.0
    fade_ms: float = 800.0
    miss_ms: float = 1000.0
    victory_delay_ms: float = 500.0
    shake_ms: float = 300.0
    chain_stagger_ms: float = 250.0
    attack_debounce_ms: float = 200.0

    edge_inset: float = 8.0
    radius_min: float = 0.3
    radius_max: float = 0.9
    min_angle_separation: float = 15.0
    min_radius_separation: float = 0.1
    min_planar_distance: float = 30.0
    max_placement_attempts: int = 50
    line_center_clearance: float = 10.0
    arc_jitter: float = 0.03

    def __post_init__(self) -> None:
        if self.max_health < 1:
            raise ValueError("max_health must be at least 1")
        if self.enemy_count < 1:
            raise ValueError("enemy_count must be at least 1")
        for name in ("radial_speed", "line_speed_left", "line_speed_right", "arc_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("radius_tolerance", "angle_tolerance", "arc_tolerance"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("pop_ms", "fade_ms", "miss_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("victory_delay_ms", "shake_ms", "chain_stagger_ms", "attack_debounce_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if not 0.0 <= self.radius_min < self.radius_max <= 1.0:
            raise ValueError("radius range must satisfy 0 <= radius_min < radius_max <= 1")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be at least 1")
        if not 0.0 <= self.bounce_nudge < 0.1:
            raise ValueError("bounce_nudge must be in [0, 0.1)")
