"""
Module routes/health.py
Rôle:
- Endpoints de santé (service OK + ping de la source trivia).

Intégrations:
- settings: nom d’app + URL de la source.
- build_client: client trivia dédié (hors cycle de vie du plateau).
"""
from fastapi import APIRouter
import time

from app.config.settings import settings
from app.services.errors import DataSourceUnavailable
from app.services.game_store import get_game
from app.services.trivia_client import build_client

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Renvoie un OK minimal avec le nom de service configuré et la phase du plateau."""
    return {"ok": True, "service": settings.APP_NAME, "phase": get_game().phase}


@router.get("/trivia")
def health_trivia():
    """
    Vérifie la disponibilité de la source trivia en mesurant une latence simple.
    - Demande une seule catégorie pour minimiser la charge.
    """
    t0 = time.perf_counter()
    try:
        sample = build_client().list_categories(1)
        dt = time.perf_counter() - t0
        return {
            "ok": True,
            "source": settings.TRIVIA_API_URL,
            "latency_s": round(dt, 3),
            "sample": sample[0].title if sample else None,
        }
    except DataSourceUnavailable as e:
        dt = time.perf_counter() - t0
        return {
            "ok": False,
            "source": settings.TRIVIA_API_URL,
            "latency_s": round(dt, 3),
            "error": str(e),
        }
