"""REST API for the valuation engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request

from nbavalue.api.schemas import (
    BatchValuationRequest,
    BatchValuationResponse,
    CompensationRecordResponse,
    ReloadResponse,
    ValuationRequest,
)
from nbavalue.config import DEFAULT_CONFIG, Settings, ValuationConfig, load_settings
from nbavalue.ingest import CompensationIndex
from nbavalue.models import CompensationRecord
from nbavalue.valuation import (
    PlayerHistory,
    ValuationResult,
    compute_player_valuation,
    value_players,
)


logger = logging.getLogger("uvicorn.error")


def _record_to_response(record: CompensationRecord) -> CompensationRecordResponse:
    return CompensationRecordResponse(
        player_id=record.player_id,
        player_name=record.player_name,
        season=record.season,
        salary=record.salary,
    )


def create_app(
    *,
    settings: Settings | None = None,
    compensation: CompensationIndex | None = None,
    config: ValuationConfig = DEFAULT_CONFIG,
) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="nbavalue")
    index = compensation or CompensationIndex.from_csv(settings.contracts_path)
    app.state.compensation = index
    app.state.settings = settings

    def _index(request: Request) -> CompensationIndex:
        return request.app.state.compensation

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/valuation", response_model=ValuationResult)
    def valuation(payload: ValuationRequest, request: Request) -> ValuationResult:
        try:
            result = compute_player_valuation(
                payload.player_id,
                payload.seasons,
                payload.season,
                payload.age,
                compensation=_index(request),
                comparison_surplus=payload.comparison_surplus,
                config=config,
                default_age=settings.default_age,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info(
            "Valuation computed for %s (%s): index %.1f",
            payload.player_id,
            payload.season,
            result.stock_index,
        )
        return result

    @app.post("/valuation/batch", response_model=BatchValuationResponse)
    def valuation_batch(payload: BatchValuationRequest, request: Request) -> BatchValuationResponse:
        histories = [
            PlayerHistory(player_id=player.player_id, seasons=player.seasons, age=player.age)
            for player in payload.players
        ]
        try:
            results = value_players(
                histories,
                payload.season,
                compensation=_index(request),
                config=config,
                default_age=settings.default_age,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return BatchValuationResponse(season=payload.season, valuations=results)

    @app.get("/contracts/{season}", response_model=list[CompensationRecordResponse])
    def contracts_for_season(season: str, request: Request) -> list[CompensationRecordResponse]:
        try:
            records = _index(request).for_season(season)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return [_record_to_response(record) for record in records]

    @app.get("/contracts/{season}/{player_id}", response_model=CompensationRecordResponse)
    def contract_for_player(season: str, player_id: str, request: Request) -> CompensationRecordResponse:
        try:
            record = _index(request).get(player_id, season)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        if record is None:
            raise HTTPException(status_code=404, detail="No compensation on record")
        return _record_to_response(record)

    @app.post("/contracts/reload", response_model=ReloadResponse)
    def contracts_reload(request: Request) -> ReloadResponse:
        try:
            count = _index(request).reload()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ReloadResponse(records=count)

    return app
