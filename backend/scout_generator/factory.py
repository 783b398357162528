from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import Player, ScoutSkillProfile
from .names import NameGenerator
from .random_source import RandomSource, default_source
from .sampling import AgeSampler, AttributeSampler, PositionSampler, PotentialSampler


class PlayerFactory:
    """
    Compose the individual samplers into a ground-truth `Player`.

    Draw order is fixed (position, age, attributes, potential, name) so a
    seeded source always yields the same player.
    """

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or default_source()
        self.names = NameGenerator(self.source)
        self.positions = PositionSampler(self.source)
        self.ages = AgeSampler(self.source)
        self.attributes = AttributeSampler(self.source)
        self.potentials = PotentialSampler(self.source)

    def create(self, region_id: str, scout_skills: Optional[Mapping[str, Any]] = None) -> Player:
        skills = ScoutSkillProfile.from_mapping(scout_skills)
        position = self.positions.generate()
        age = self.ages.generate()
        attributes = self.attributes.generate(position, skills)
        potential = self.potentials.generate(age, skills)
        return Player(
            name=self.names.generate(region_id),
            region_id=region_id,
            age=age,
            position=position,
            attributes=attributes,
            potential=potential,
        )
