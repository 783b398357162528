import json
import logging
from typing import Iterable, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlmodel import Session

from app import models
from app.core.config import get_settings
from app.db import get_session
from app.schemas import (
    GenerateRequest,
    GenerateResponse,
    PlayersResponse,
    PositionInfo,
    RegionsResponse,
    StoredPlayer,
)
from app.storage import SqlPlayerSink
from scout_generator import GenerationResult, GenerationService, Position, ValidationError
from scout_generator.random_source import RandomSource, SeededRandomSource, default_source
from scout_generator.tables import DEFAULT_REGION, POSITIONS, known_regions, role_for

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)

_source: RandomSource = (
    SeededRandomSource(settings.rng_seed) if settings.rng_seed is not None else default_source()
)


def get_sink(session: Session = Depends(get_session)) -> SqlPlayerSink:
    return SqlPlayerSink(session)


def get_generation_service(sink: SqlPlayerSink = Depends(get_sink)) -> GenerationService:
    return GenerationService(sink=sink, source=_source)


def _serialize_result(result: GenerationResult) -> GenerateResponse:
    return GenerateResponse(
        player=result.player.as_dict(),
        report=result.report.as_dict(),
        stored_id=result.stored_id,
        persisted=result.persisted,
    )


def _serialize_players(records: Iterable[models.GeneratedPlayer]) -> List[StoredPlayer]:
    return [
        StoredPlayer(
            id=record.id,
            user_id=record.user_id,
            name=record.name,
            region_id=record.region_id,
            age=record.age,
            position=record.position,
            attributes=json.loads(record.attributes),
            potential=record.potential,
            scouting_report=json.loads(record.scouting_report),
            generated_at=record.generated_at,
        )
        for record in records
    ]


@router.post("/players/generate", response_model=GenerateResponse, tags=["players"])
def generate_player(
    request: GenerateRequest,
    user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
    service: GenerationService = Depends(get_generation_service),
) -> GenerateResponse:
    """Generate a player with a scouting report; storage failures still return the player."""
    try:
        result = service.generate(request.region_id, request.scout_skills, user_id=user_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if not result.persisted:
        logger.info("Returning unsaved player %s with fallback id %s", result.player.name, result.stored_id)
    return _serialize_result(result)


@router.get("/players/by-region", response_model=PlayersResponse, tags=["players"])
def list_players_by_region(
    region_id: str = Query(..., alias="regionId", min_length=1),
    limit: int = Query(settings.default_list_limit, ge=1, le=100),
    sink: SqlPlayerSink = Depends(get_sink),
) -> PlayersResponse:
    players = sink.list_by_region(region_id, limit)
    return PlayersResponse(items=_serialize_players(players), count=len(players), limit=limit)


@router.get("/players/by-position", response_model=PlayersResponse, tags=["players"])
def list_players_by_position(
    position: str = Query(..., min_length=1),
    limit: int = Query(settings.default_list_limit, ge=1, le=100),
    sink: SqlPlayerSink = Depends(get_sink),
) -> PlayersResponse:
    try:
        normalized = Position(position.strip().upper())
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown position {position!r}")
    players = sink.list_by_position(normalized.value, limit)
    return PlayersResponse(items=_serialize_players(players), count=len(players), limit=limit)


@router.get("/players/{player_id}", response_model=StoredPlayer, tags=["players"])
def get_player(player_id: str, sink: SqlPlayerSink = Depends(get_sink)) -> StoredPlayer:
    record = sink.get(player_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
    return _serialize_players([record])[0]


@router.get("/regions", response_model=RegionsResponse, tags=["lookups"])
def list_regions() -> RegionsResponse:
    return RegionsResponse(items=list(known_regions()), default=DEFAULT_REGION)


@router.get("/positions", response_model=List[PositionInfo], tags=["lookups"])
def list_positions() -> List[PositionInfo]:
    return [PositionInfo(position=p.value, role=role_for(p).value) for p in POSITIONS]
