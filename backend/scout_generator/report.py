"""
Scouting reports: a scout's noisy view of a generated player.

Accuracy is derived from the scout's skills only. It bounds the error applied
to each true value and is reported back as a confidence percentage. The
commentary is built from the perceived numbers, never the true ones.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

from .models import (
    ATTRIBUTE_NAMES,
    Attributes,
    Confidence,
    Player,
    Position,
    RoleBucket,
    ScoutingReport,
    ScoutSkillProfile,
)
from .random_source import RandomSource, coin_flip, default_source, randint
from .tables import RATING_MAX, RATING_MIN, role_for

BASE_ACCURACY = 0.70
MAX_ACCURACY = 0.95

AGE_COMMENTS = {
    "very_young": "Very young player with time to develop.",
    "young": "Young player entering their development prime.",
    "prime": "Player in their prime years.",
    "experienced": "Experienced player with limited development potential.",
}

# attribute -> (high >= 8, mid 6-7, low <= 4)
ATTRIBUTE_COMMENTS = {
    "technical": ("Technically exceptional.", "Good technical ability.", "Limited technical skills."),
    "physical": ("Physically dominant.", "Physically capable.", "Physically needs development."),
    "mental": ("Exceptional mental attributes.", "Good mental approach.", "Mental aspects need work."),
}

# role -> (attribute checked, comment when >= 7, comment otherwise)
POSITION_COMMENTS = {
    RoleBucket.GOALKEEPER: ("physical", "Good physical presence in goal.", "Could improve physical presence in goal."),
    RoleBucket.DEFENDER: ("physical", "Strong defensive attributes.", "Has room to improve defensively."),
    RoleBucket.MIDFIELDER: ("technical", "Technically gifted midfielder.", "Midfield fundamentals could improve."),
    RoleBucket.FORWARD: ("technical", "Shows good attacking qualities.", "Attacking skills need development."),
}
POSITION_COMMENT_THRESHOLD = 7

POTENTIAL_COMMENTS = {
    "world_class": "Has world-class potential.",
    "elite": "Could develop into an elite player.",
    "very_good": "Has the potential to be a very good player.",
    "decent": "Decent potential to develop further.",
    "limited": "Limited potential for future growth.",
}


def attribute_accuracy(skills: ScoutSkillProfile, position: Position) -> float:
    talent = skills.impact("talent_spotting")
    role_knowledge = skills.role_impact(role_for(position))
    return min(MAX_ACCURACY, BASE_ACCURACY + talent * 0.15 + role_knowledge * 0.15)


def potential_accuracy(skills: ScoutSkillProfile) -> float:
    talent = skills.impact("talent_spotting")
    assessment = skills.impact("player_potential")
    return min(MAX_ACCURACY, BASE_ACCURACY + assessment * 0.20 + talent * 0.10)


def max_error(accuracy: float) -> int:
    return 10 - math.floor(accuracy * 10)


def confidence_percent(accuracy: float) -> int:
    return math.floor(accuracy * 100)


def clamp_rating(value: int) -> int:
    return max(RATING_MIN, min(RATING_MAX, value))


def perceive(source: RandomSource, true_value: int, accuracy: float) -> int:
    """Apply a signed error of at most `max_error(accuracy)` points and clamp to the rating scale."""
    magnitude = randint(source, 0, max_error(accuracy))
    sign = -1 if coin_flip(source) else 1
    return clamp_rating(true_value + magnitude * sign)


def age_comment(age: int) -> str:
    if age < 20:
        return AGE_COMMENTS["very_young"]
    if age <= 23:
        return AGE_COMMENTS["young"]
    if age <= 27:
        return AGE_COMMENTS["prime"]
    return AGE_COMMENTS["experienced"]


def attribute_comment(attribute: str, value: int) -> str:
    high, mid, low = ATTRIBUTE_COMMENTS[attribute]
    if value >= 8:
        return high
    if value >= 6:
        return mid
    if value <= 4:
        return low
    return ""


def position_comment(position: Position, attributes: Attributes) -> str:
    attribute, strong, weak = POSITION_COMMENTS[role_for(position)]
    return strong if getattr(attributes, attribute) >= POSITION_COMMENT_THRESHOLD else weak


def potential_comment(potential: int) -> str:
    if potential >= 9:
        return POTENTIAL_COMMENTS["world_class"]
    if potential == 8:
        return POTENTIAL_COMMENTS["elite"]
    if potential == 7:
        return POTENTIAL_COMMENTS["very_good"]
    if potential == 6:
        return POTENTIAL_COMMENTS["decent"]
    return POTENTIAL_COMMENTS["limited"]


def build_report_text(age: int, position: Position, perceived_attributes: Attributes, perceived_potential: int) -> str:
    parts: List[str] = [age_comment(age)]
    parts.extend(attribute_comment(name, getattr(perceived_attributes, name)) for name in ATTRIBUTE_NAMES)
    parts.append(position_comment(position, perceived_attributes))
    parts.append(potential_comment(perceived_potential))
    return " ".join(part for part in parts if part)


class ScoutingReportEngine:
    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()

    def generate(self, player: Player, scout_skills: Optional[Mapping[str, Any]] = None) -> ScoutingReport:
        skills = ScoutSkillProfile.from_mapping(scout_skills)
        attr_accuracy = attribute_accuracy(skills, player.position)
        pot_accuracy = potential_accuracy(skills)

        perceived_attributes = Attributes(
            **{
                name: perceive(self.source, getattr(player.attributes, name), attr_accuracy)
                for name in ATTRIBUTE_NAMES
            }
        )
        perceived_potential = perceive(self.source, player.potential, pot_accuracy)

        return ScoutingReport(
            perceived_attributes=perceived_attributes,
            perceived_potential=perceived_potential,
            report_text=build_report_text(player.age, player.position, perceived_attributes, perceived_potential),
            confidence=Confidence(
                attributes=confidence_percent(attr_accuracy),
                potential=confidence_percent(pot_accuracy),
            ),
        )
