"""
Static lookup tables: region name lists, position boosts, role buckets and age bands.

Everything here is read-only and checked once at import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import ATTRIBUTE_NAMES, Position, RoleBucket

DEFAULT_REGION = "england"

REGION_FIRST_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "england": ("Harry", "John", "James", "Adam", "Jack", "Thomas", "William"),
        "spain": ("Javier", "Carlos", "Antonio", "Miguel", "David", "Juan", "Sergio"),
        "germany": ("Hans", "Thomas", "Franz", "Lukas", "Felix", "Jonas", "Paul"),
        "italy": ("Marco", "Antonio", "Giuseppe", "Andrea", "Federico", "Mario", "Alessandro"),
        "france": ("Jean", "Antoine", "Pierre", "Nicolas", "Paul", "Hugo", "Louis"),
        "brazil": ("Carlos", "Rafael", "Gustavo", "Roberto", "Thiago", "Gabriel", "Lucas"),
        "argentina": ("Lionel", "Diego", "Sergio", "Juan", "Gabriel", "Nicolas", "Roberto"),
    }
)

REGION_LAST_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "england": ("Smith", "Jones", "Williams", "Brown", "Taylor", "Davies", "Wilson"),
        "spain": ("Garcia", "Rodriguez", "Fernandez", "Lopez", "Martinez", "Sanchez", "Perez"),
        "germany": ("Müller", "Schmidt", "Schneider", "Fischer", "Weber", "Meyer", "Wagner"),
        "italy": ("Rossi", "Russo", "Ferrari", "Esposito", "Bianchi", "Romano", "Colombo"),
        "france": ("Martin", "Bernard", "Dubois", "Thomas", "Robert", "Richard", "Petit"),
        "brazil": ("Silva", "Santos", "Oliveira", "Souza", "Costa", "Pereira", "Almeida"),
        "argentina": ("Gonzalez", "Rodriguez", "Fernandez", "Lopez", "Martinez", "Garcia", "Sanchez"),
    }
)

POSITIONS: Tuple[Position, ...] = tuple(Position)

POSITION_ROLES: Mapping[Position, RoleBucket] = MappingProxyType(
    {
        Position.GK: RoleBucket.GOALKEEPER,
        Position.CB: RoleBucket.DEFENDER,
        Position.RB: RoleBucket.DEFENDER,
        Position.LB: RoleBucket.DEFENDER,
        Position.CDM: RoleBucket.MIDFIELDER,
        Position.CM: RoleBucket.MIDFIELDER,
        Position.CAM: RoleBucket.MIDFIELDER,
        Position.RM: RoleBucket.MIDFIELDER,
        Position.LM: RoleBucket.MIDFIELDER,
        Position.RW: RoleBucket.FORWARD,
        Position.LW: RoleBucket.FORWARD,
        Position.ST: RoleBucket.FORWARD,
        Position.CF: RoleBucket.FORWARD,
    }
)

# (technical, physical, mental)
POSITION_BOOSTS: Mapping[Position, Mapping[str, int]] = MappingProxyType(
    {
        position: MappingProxyType(dict(zip(ATTRIBUTE_NAMES, boosts)))
        for position, boosts in {
            Position.GK: (0, 1, 1),
            Position.CB: (0, 2, 0),
            Position.RB: (1, 1, 0),
            Position.LB: (1, 1, 0),
            Position.CDM: (1, 1, 1),
            Position.CM: (2, 0, 1),
            Position.CAM: (3, -1, 1),
            Position.RM: (2, 1, 0),
            Position.LM: (2, 1, 0),
            Position.RW: (2, 1, 0),
            Position.LW: (2, 1, 0),
            Position.ST: (2, 1, 0),
            Position.CF: (3, 0, 0),
        }.items()
    }
)

# (min_age, max_age, weight); weights sum to 1.
AGE_BANDS: Tuple[Tuple[int, int, float], ...] = (
    (16, 19, 0.4),
    (20, 23, 0.3),
    (24, 27, 0.2),
    (28, 35, 0.1),
)
MIN_AGE = 16
MAX_AGE = 35

ATTRIBUTE_BASE_RANGE = (3, 9)
POTENTIAL_BASE_RANGE = (5, 9)
RATING_MIN = 1
RATING_MAX = 10


def role_for(position: Position) -> RoleBucket:
    return POSITION_ROLES[Position(position)]


def known_regions() -> Tuple[str, ...]:
    return tuple(sorted(REGION_FIRST_NAMES))


def _validate_tables() -> None:
    missing_boosts = [p.value for p in Position if p not in POSITION_BOOSTS]
    if missing_boosts:
        raise ValueError(f"Position boost table missing entries for: {', '.join(missing_boosts)}")
    missing_roles = [p.value for p in Position if p not in POSITION_ROLES]
    if missing_roles:
        raise ValueError(f"Role bucket table missing entries for: {', '.join(missing_roles)}")
    for position, boosts in POSITION_BOOSTS.items():
        if set(boosts) != set(ATTRIBUTE_NAMES):
            raise ValueError(f"Boosts for {position.value} must cover {ATTRIBUTE_NAMES}")
    if set(REGION_FIRST_NAMES) != set(REGION_LAST_NAMES):
        raise ValueError("First-name and last-name tables must cover the same regions")
    if DEFAULT_REGION not in REGION_FIRST_NAMES:
        raise ValueError(f"Default region {DEFAULT_REGION!r} has no name lists")
    empty = [r for r in REGION_FIRST_NAMES if not REGION_FIRST_NAMES[r] or not REGION_LAST_NAMES[r]]
    if empty:
        raise ValueError(f"Empty name lists for regions: {', '.join(empty)}")
    for low, high, weight in AGE_BANDS:
        if not (MIN_AGE <= low <= high <= MAX_AGE) or weight <= 0:
            raise ValueError(f"Invalid age band ({low}, {high}, {weight})")


_validate_tables()
