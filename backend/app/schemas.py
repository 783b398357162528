from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Attributes(ApiModel):
    technical: int = Field(ge=1, le=10)
    physical: int = Field(ge=1, le=10)
    mental: int = Field(ge=1, le=10)


class Confidence(ApiModel):
    attributes: int = Field(ge=0, le=95)
    potential: int = Field(ge=0, le=95)


class Player(ApiModel):
    name: str
    region_id: str
    age: int
    position: str
    attributes: Attributes
    potential: int


class ScoutingReport(ApiModel):
    perceived_attributes: Attributes
    perceived_potential: int
    report_text: str
    confidence: Confidence


class GenerateRequest(ApiModel):
    region_id: Optional[str] = Field(default=None, description="Region driving the player's name")
    scout_skills: Dict[str, int] = Field(default_factory=dict, description="Scout skill ratings, 0-10")


class GenerateResponse(ApiModel):
    player: Player
    report: ScoutingReport
    stored_id: str
    persisted: bool


class StoredPlayer(ApiModel):
    id: str
    user_id: Optional[str] = None
    name: str
    region_id: str
    age: int
    position: str
    attributes: Attributes
    potential: int
    scouting_report: ScoutingReport
    generated_at: datetime


class PlayersResponse(ApiModel):
    items: List[StoredPlayer]
    count: int
    limit: int


class RegionsResponse(ApiModel):
    items: List[str]
    default: str


class PositionInfo(ApiModel):
    position: str
    role: str
