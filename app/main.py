"""
Application FastAPI — Point d'entrée
====================================

Rôle
----
- Instancie l'app FastAPI, configure le CORS pour le front,
- Monte les routeurs (REST + WebSocket),
- Configure le logging et construit un premier plateau au démarrage (si `AUTOSTART`).

Notes
-----
- ⚠️ Le middleware CORS doit être ajouté AVANT les include_router.
- Un échec du premier chargement ne bloque pas le démarrage : le plateau reste
  en phase IDLE et le front peut relancer via POST /board/restart.
"""
import logging

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from app.routes.board import router as board_router
from app.routes.health import router as health_router
from app.routes.websocket import router as ws_router

from app.config.settings import settings
from app.services.errors import BoardError
from app.services.game_store import get_game

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Logging applicatif (niveau piloté par `LOG_LEVEL`)."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# --- App FastAPI principale  ---
app = FastAPI(title=settings.APP_NAME)

# ===========================
# CORS (dev: permissif)
# ===========================
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===========================
# Montage des routers
# ===========================
app.include_router(board_router)
app.include_router(health_router)
app.include_router(ws_router)                  # WebSocket endpoint (/ws/board)


# --- Racine utile pour "ping" simple (sans /health) ---
@app.get("/")
async def root():
    """Ping basique : permet de vérifier que l'app tourne (sans appel à la source trivia)."""
    return {"ok": True, "service": "trivia-board"}


# --- Hook de démarrage ---
@app.on_event("startup")
async def startup():
    """
    Au démarrage:
    - configure le logging,
    - construit le premier plateau (hors boucle async : le client HTTP est bloquant).
    """
    configure_logging()
    logger.info(
        "Trivia source configured",
        extra={"trivia_url": settings.TRIVIA_API_URL, "board": f"{settings.NUM_CATEGORIES}x{settings.NUM_CLUES_PER_CAT}"},
    )
    if not settings.AUTOSTART:
        return
    try:
        await run_in_threadpool(get_game().setup_and_start)
    except BoardError:
        logger.warning("Initial board load failed, waiting for a restart", exc_info=True)
