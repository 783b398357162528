"""
SQLModel-backed persistence sink for generated players.

`store` follows the sink contract used by `GenerationService`: it returns the
stored id or raises. The read helpers back the lookup routes.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app import models


class SqlPlayerSink:
    def __init__(self, session: Session) -> None:
        self.session = session

    def store(self, record: Dict[str, Any]) -> Optional[str]:
        row = models.GeneratedPlayer(
            user_id=record.get("user_id"),
            name=record["name"],
            region_id=record["region_id"],
            age=record["age"],
            position=record["position"],
            attributes=json.dumps(record["attributes"]),
            potential=record["potential"],
            scouting_report=json.dumps(record["scouting_report"], ensure_ascii=False),
        )
        try:
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return row.id

    def get(self, player_id: str) -> Optional[models.GeneratedPlayer]:
        return self.session.get(models.GeneratedPlayer, player_id)

    def list_by_region(self, region_id: str, limit: int) -> List[models.GeneratedPlayer]:
        return list(
            self.session.exec(
                select(models.GeneratedPlayer)
                .where(models.GeneratedPlayer.region_id == region_id)
                .order_by(models.GeneratedPlayer.generated_at.desc())
                .limit(limit)
            ).all()
        )

    def list_by_position(self, position: str, limit: int) -> List[models.GeneratedPlayer]:
        return list(
            self.session.exec(
                select(models.GeneratedPlayer)
                .where(models.GeneratedPlayer.position == position)
                .order_by(models.GeneratedPlayer.generated_at.desc())
                .limit(limit)
            ).all()
        )
