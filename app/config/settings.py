"""
Configuration de l'application (Settings)
=========================================

Rôle
----
- Centraliser les paramètres de l'app (nom, source trivia, taille du plateau…).
- Les valeurs par défaut conviennent pour un environnement de dev local.
- Les variables peuvent être surchargées via un fichier `.env` ou l'environnement.

Intégrations
------------
- `pydantic-settings` charge automatiquement les variables d'env et `.env`.
- Les services/routers importent `from app.config.settings import settings`.

Bonnes pratiques
----------------
- `TRIVIA_API_URL` doit se terminer par `/` (les chemins `categories` / `category` y sont ajoutés).
- `CATEGORY_POOL_SIZE` doit rester nettement supérieur à `NUM_CATEGORIES`
  (sur-échantillonnage pour que le tirage distinct termine vite).
- `RANDOM_SEED` rend le plateau reproductible (démo, debug) ; laisser vide en prod.

Exemples de `.env`
------------------
APP_NAME="Trivia Board (Staging)"
TRIVIA_API_URL="http://localhost:3000/api/"
NUM_CATEGORIES=6
NUM_CLUES_PER_CAT=5
RANDOM_SEED=42
AUTOSTART=false
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Nom du service (apparaît dans /health)
    APP_NAME: str = "Trivia Board"
    LOG_LEVEL: str = "INFO"

    # Source de données (API compatible jService)
    TRIVIA_API_URL: str = "https://jservice.io/api/"
    HTTP_CONNECT_TIMEOUT: float = 5.0
    HTTP_READ_TIMEOUT: float = 20.0
    HTTP_RETRIES: int = 3

    # Dimensions du plateau : M colonnes (catégories) x N lignes (indices)
    NUM_CATEGORIES: int = 6
    NUM_CLUES_PER_CAT: int = 5
    # Nombre de catégories candidates demandées à la source avant tirage
    CATEGORY_POOL_SIZE: int = 100
    CATEGORY_POOL_OFFSET: int = 0

    # Graine RNG optionnelle (plateau déterministe si fournie)
    RANDOM_SEED: Optional[int] = None

    # Construit un premier plateau au démarrage de l'app
    AUTOSTART: bool = True

    # Paramétrage pydantic-settings :
    # - lit le fichier .env (UTF-8) si présent
    # - ignore les clés supplémentaires pour éviter les erreurs
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Instance unique importable partout : `settings`
settings = Settings()
