"""REST service for hosting UNO games."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, Optional

from fastapi import APIRouter, Cookie, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from uno_engine.config import ServiceConfig
from uno_engine.game import (
    AlreadyStarted,
    CardNotFound,
    DuplicatePlayer,
    GameError,
    GameNotActive,
    IllegalCard,
    InsufficientCards,
    NotYourTurn,
)

from .auth import InvalidCredentials, resolve_uid
from .registry import GameNotFound, GameRegistry, RegistryError, RegistryFull

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[type, int] = {
    NotYourTurn: 403,
    CardNotFound: 400,
    IllegalCard: 400,
    AlreadyStarted: 409,
    DuplicatePlayer: 409,
    GameNotActive: 409,
    InsufficientCards: 409,
    GameNotFound: 404,
    RegistryFull: 503,
}

manage = APIRouter(prefix="/manage/game")
player = APIRouter(prefix="/player/game")


def get_registry(request: Request) -> GameRegistry:
    return request.app.state.registry


def get_uid(
    request: Request,
    authorization: Optional[str] = Cookie(None, alias="Authorization"),
) -> int:
    try:
        return resolve_uid(authorization, get_registry(request).config.tokens)
    except InvalidCredentials as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


# Management --------------------------------------------------------------


@manage.post("/create")
def create_game(_: int = Depends(get_uid), registry: GameRegistry = Depends(get_registry)) -> Dict[str, int]:
    return {"id": registry.create()}


@manage.post("/init")
def init_game(
    gameid: int,
    _: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        info = service.reset()
    logger.info("Reset game %d", gameid)
    return asdict(info)


@manage.post("/clear")
def clear_games(_: int = Depends(get_uid), registry: GameRegistry = Depends(get_registry)) -> Dict[str, bool]:
    registry.clear()
    return {"ok": True}


@manage.post("/start")
def start_game(
    gameid: int,
    _: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        info = service.start()
    logger.info("Started game %d with %d player(s)", gameid, len(info.players))
    return asdict(info)


# Players -----------------------------------------------------------------


@player.post("/join")
def join_game(
    gameid: int,
    name: str = Query(..., min_length=1),
    uid: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        info = service.join(uid, name)
    logger.info("Player %d (%s) joined game %d", uid, name, gameid)
    return asdict(info)


@player.get("/getcards")
def get_cards(
    gameid: int,
    uid: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        return asdict(service.get_hand(uid))


@player.get("/getgameinfo")
def get_game_info(
    gameid: int,
    _: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        return asdict(service.get_info())


@player.post("/playcard")
def play_card(
    gameid: int,
    uci: int,
    uid: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        return asdict(service.play_card(uid, uci))


@player.post("/draw")
def draw_cards(
    gameid: int,
    uid: int = Depends(get_uid),
    registry: GameRegistry = Depends(get_registry),
) -> Dict[str, object]:
    with registry.session(gameid) as service:
        return asdict(service.resolve_penalty(uid))


# App ---------------------------------------------------------------------


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    app = FastAPI(title="UNO Game Service")
    app.state.registry = GameRegistry(config)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(GameError)
    @app.exception_handler(RegistryError)
    async def handle_game_error(request: Request, exc: RuntimeError) -> JSONResponse:
        status = ERROR_STATUS.get(type(exc), 400)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    app.include_router(manage)
    app.include_router(player)
    return app


app = create_app()
