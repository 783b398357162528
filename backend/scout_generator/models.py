from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

ATTRIBUTE_NAMES = ("technical", "physical", "mental")

SKILL_NAMES = (
    "talent_spotting",
    "player_potential",
    "goalkeeper_knowledge",
    "defender_knowledge",
    "midfielder_knowledge",
    "forward_knowledge",
)

SKILL_MIN = 0
SKILL_MAX = 10


class Position(str, Enum):
    GK = "GK"
    CB = "CB"
    RB = "RB"
    LB = "LB"
    CDM = "CDM"
    CM = "CM"
    CAM = "CAM"
    RM = "RM"
    LM = "LM"
    RW = "RW"
    LW = "LW"
    ST = "ST"
    CF = "CF"


class RoleBucket(str, Enum):
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    FORWARD = "forward"

    @property
    def knowledge_skill(self) -> str:
        return f"{self.value}_knowledge"


@dataclass(frozen=True)
class Attributes:
    technical: int
    physical: int
    mental: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class Player:
    name: str
    region_id: str
    age: int
    position: Position
    attributes: Attributes
    potential: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "region_id": self.region_id,
            "age": self.age,
            "position": self.position.value,
            "attributes": self.attributes.as_dict(),
            "potential": self.potential,
        }


@dataclass(frozen=True)
class ScoutSkillProfile:
    """
    A scout's skill ratings, each in [0, 10].

    Missing skills read as 0. Unknown keys are dropped and out-of-range values
    are clamped when the profile is built from a mapping.
    """

    talent_spotting: int = 0
    player_potential: int = 0
    goalkeeper_knowledge: int = 0
    defender_knowledge: int = 0
    midfielder_knowledge: int = 0
    forward_knowledge: int = 0

    @classmethod
    def from_mapping(
        cls, skills: Union["ScoutSkillProfile", Mapping[str, Any], None]
    ) -> "ScoutSkillProfile":
        if isinstance(skills, ScoutSkillProfile):
            return skills
        values: Dict[str, int] = {}
        for name in SKILL_NAMES:
            raw = (skills or {}).get(name)
            if raw is None:
                continue
            values[name] = max(SKILL_MIN, min(SKILL_MAX, int(raw)))
        return cls(**values)

    def impact(self, skill: str) -> float:
        """Skill normalised to [0, 1]."""
        return getattr(self, skill) / 10

    def role_impact(self, role: RoleBucket) -> float:
        return self.impact(role.knowledge_skill)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class Confidence:
    attributes: int
    potential: int


@dataclass(frozen=True)
class ScoutingReport:
    perceived_attributes: Attributes
    perceived_potential: int
    report_text: str
    confidence: Confidence

    def as_dict(self) -> Dict[str, Any]:
        return {
            "perceived_attributes": self.perceived_attributes.as_dict(),
            "perceived_potential": self.perceived_potential,
            "report_text": self.report_text,
            "confidence": asdict(self.confidence),
        }


@dataclass(frozen=True)
class GeneratedPlayer:
    """Ground-truth player paired with the scout's view of them."""

    player: Player
    report: ScoutingReport


@dataclass(frozen=True)
class GenerationResult:
    player: Player
    report: ScoutingReport
    stored_id: str
    persisted: bool = True
