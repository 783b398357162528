import uuid
from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class GeneratedPlayer(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)
    name: str
    region_id: str = Field(index=True, nullable=False)
    age: int
    position: str = Field(index=True, nullable=False)
    attributes: str  # {"technical": .., "physical": .., "mental": ..} as JSON
    potential: int
    scouting_report: str  # perceived values, text and confidence as JSON
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC), nullable=False)
