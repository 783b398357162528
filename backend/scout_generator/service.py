"""
Generation pipeline consumed by the API and CLI.

`build` is pure: it validates input and produces the player and the scout's
report. `persist` hands the result to a sink and reports the outcome as a
value, so a storage failure never turns a successful generation into an error.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

from .errors import PersistenceWarning, ValidationError
from .factory import PlayerFactory
from .models import GeneratedPlayer, GenerationResult, ScoutSkillProfile
from .random_source import RandomSource, default_source
from .report import ScoutingReportEngine

logger = logging.getLogger(__name__)


class PersistenceSink(Protocol):
    def store(self, record: Dict[str, Any]) -> Optional[str]:
        """Persist a generated player record and return its id; raise on failure."""
        ...


@dataclass(frozen=True)
class PersistOutcome:
    stored_id: str
    error: Optional[PersistenceWarning] = None

    @property
    def persisted(self) -> bool:
        return self.error is None


def player_record(generated: GeneratedPlayer, user_id: Optional[str] = None) -> Dict[str, Any]:
    player = generated.player
    return {
        "user_id": user_id,
        "name": player.name,
        "region_id": player.region_id,
        "age": player.age,
        "position": player.position.value,
        "attributes": player.attributes.as_dict(),
        "potential": player.potential,
        "scouting_report": generated.report.as_dict(),
    }


class GenerationService:
    def __init__(
        self,
        sink: Optional[PersistenceSink] = None,
        source: Optional[RandomSource] = None,
    ) -> None:
        self.sink = sink
        self.source = source or default_source()
        self.factory = PlayerFactory(self.source)
        self.reports = ScoutingReportEngine(self.source)

    def build(self, region_id: Optional[str], scout_skills: Optional[Mapping[str, Any]] = None) -> GeneratedPlayer:
        if region_id is None or not str(region_id).strip():
            raise ValidationError("Region ID is required", field="region_id")
        skills = ScoutSkillProfile.from_mapping(scout_skills)
        player = self.factory.create(str(region_id).strip(), skills)
        report = self.reports.generate(player, skills)
        logger.info(
            "Generated %s (%s, %d, %s) potential=%d perceived=%d",
            player.name,
            player.region_id,
            player.age,
            player.position.value,
            player.potential,
            report.perceived_potential,
        )
        return GeneratedPlayer(player=player, report=report)

    def persist(self, generated: GeneratedPlayer, user_id: Optional[str] = None) -> PersistOutcome:
        if self.sink is None:
            return PersistOutcome(
                stored_id=str(uuid.uuid4()),
                error=PersistenceWarning("No persistence sink configured"),
            )
        try:
            stored_id = self.sink.store(player_record(generated, user_id))
        except Exception as exc:
            warning = PersistenceWarning(f"Error saving generated player: {exc}", cause=exc)
            logger.warning("%s", warning)
            return PersistOutcome(stored_id=str(uuid.uuid4()), error=warning)
        if not stored_id:
            warning = PersistenceWarning("Persistence sink returned no id")
            logger.warning("%s", warning)
            return PersistOutcome(stored_id=str(uuid.uuid4()), error=warning)
        return PersistOutcome(stored_id=str(stored_id))

    def generate(
        self,
        region_id: Optional[str],
        scout_skills: Optional[Mapping[str, Any]] = None,
        user_id: Optional[str] = None,
    ) -> GenerationResult:
        generated = self.build(region_id, scout_skills)
        outcome = self.persist(generated, user_id=user_id)
        return GenerationResult(
            player=generated.player,
            report=generated.report,
            stored_id=outcome.stored_id,
            persisted=outcome.persisted,
        )
