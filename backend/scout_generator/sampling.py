"""
Samplers for the ground-truth side of a generated player.

Each sampler draws from an injected `RandomSource`. Attribute and potential
draws respond to the scout's skills: talent spotting raises the attribute
ceiling. Role knowledge and potential assessment produce a narrowing span
that is logged but does not change the draw range.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Tuple

from .models import ATTRIBUTE_NAMES, Attributes, Position, ScoutSkillProfile
from .random_source import RandomSource, choice, default_source, randint
from .tables import (
    AGE_BANDS,
    ATTRIBUTE_BASE_RANGE,
    MAX_AGE,
    MIN_AGE,
    POSITION_BOOSTS,
    POSITIONS,
    POTENTIAL_BASE_RANGE,
    RATING_MAX,
    RATING_MIN,
    role_for,
)

logger = logging.getLogger(__name__)


class PositionSampler:
    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()

    def generate(self) -> Position:
        return choice(self.source, POSITIONS)


class AgeSampler:
    """Weighted age draw that favours younger players."""

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()

    def generate(self) -> int:
        roll = self.source.random()
        cumulative = 0.0
        for low, high, weight in AGE_BANDS:
            cumulative += weight
            if roll <= cumulative:
                return randint(self.source, low, high)
        return randint(self.source, MIN_AGE, MAX_AGE)


def attribute_range(position: Position, attribute: str, talent_spotting: float = 0.0) -> Tuple[int, int]:
    """Inclusive draw range for one attribute after position boost, clamping and talent boost."""
    base_min, base_max = ATTRIBUTE_BASE_RANGE
    boost = POSITION_BOOSTS[Position(position)][attribute]
    low = max(RATING_MIN, base_min + boost)
    high = min(RATING_MAX, base_max + boost)
    high = min(RATING_MAX, high + math.floor(talent_spotting * 3))
    return low, high


def age_factor(age: int) -> float:
    """1.0 at 16, falling linearly to 0.0 at 30 and beyond."""
    return max(0.0, 1 - (age - 16) / 14)


def potential_range(age: int) -> Tuple[float, float]:
    base_min, base_max = POTENTIAL_BASE_RANGE
    low = max(RATING_MIN, base_min)
    high = min(RATING_MAX, base_max - (1 - age_factor(age)) * 3)
    return low, high


class AttributeSampler:
    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()

    def generate(self, position: Position, scout_skills: Optional[Mapping[str, Any]] = None) -> Attributes:
        skills = ScoutSkillProfile.from_mapping(scout_skills)
        role_knowledge = skills.role_impact(role_for(position))
        talent_spotting = skills.impact("talent_spotting")
        narrowing = role_knowledge * 2

        values = {}
        for attribute in ATTRIBUTE_NAMES:
            low, high = attribute_range(position, attribute, talent_spotting)
            logger.debug(
                "%s %s range [%d, %d] (narrowing %.1f not applied)",
                Position(position).value,
                attribute,
                low,
                high,
                narrowing,
            )
            values[attribute] = randint(self.source, low, high)
        return Attributes(**values)


class PotentialSampler:
    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()

    def generate(self, age: int, scout_skills: Optional[Mapping[str, Any]] = None) -> int:
        skills = ScoutSkillProfile.from_mapping(scout_skills)
        narrowing = skills.impact("player_potential") * 2
        low, high = potential_range(age)
        logger.debug("potential range for age %d [%d, %.2f] (narrowing %.1f not applied)", age, low, high, narrowing)
        return randint(self.source, low, high)
