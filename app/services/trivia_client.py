"""
Service: trivia_client.py
- Centralise les appels HTTP vers la source trivia (API compatible jService).
- Valide les réponses (modèles pydantic) et convertit tout échec en `DataSourceUnavailable`.

Endpoints consommés:
- GET {base}categories?count=<n>&offset=<o>  → [{id, title, clues_count}, ...]
- GET {base}category?id=<id>                 → {id, title, clues: [{question, answer, ...}]}
"""
import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.config.settings import settings
from app.models.trivia import CategorySummary, RawCategory
from app.services.errors import DataSourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Tuple[float, float] = (
    settings.HTTP_CONNECT_TIMEOUT,
    settings.HTTP_READ_TIMEOUT,
)  # connect, read


class TriviaClient:
    """
    Client HTTP de la source trivia.
    - Configure retries avec backoff exponentiel (GET uniquement).
    - Journalise chaque requête avec un identifiant de corrélation.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Tuple[float, float] = DEFAULT_TIMEOUT,
        retries: int = 3,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session or self._build_session(retries)
        self.timeout = timeout

    @staticmethod
    def _build_session(retries: int) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset({"GET"}),
            respect_retry_after_header=True,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = self.base_url + path
        request_id = f"{path}-{uuid4().hex}"
        try:
            logger.debug(
                "Trivia request start",
                extra={"trivia_url": url, "trivia_params": params, "trivia_request_id": request_id},
            )
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as exc:
            logger.warning(
                "Trivia request timeout",
                extra={"trivia_url": url, "trivia_request_id": request_id},
            )
            raise DataSourceUnavailable("trivia request timed out") from exc
        except requests.RequestException as exc:
            logger.error(
                "Trivia request failed",
                exc_info=True,
                extra={"trivia_url": url, "trivia_request_id": request_id},
            )
            raise DataSourceUnavailable("trivia request failed") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "Invalid JSON payload from trivia source",
                exc_info=True,
                extra={"trivia_url": url, "trivia_request_id": request_id},
            )
            raise DataSourceUnavailable("invalid JSON payload from trivia source") from exc

    def list_categories(self, count: int, offset: int = 0) -> List[CategorySummary]:
        """Retourne `count` catégories candidates (à partir de `offset`)."""
        data = self._get("categories", {"count": count, "offset": offset})
        if not isinstance(data, list):
            raise DataSourceUnavailable("categories payload is not a list")
        try:
            return [CategorySummary.model_validate(entry) for entry in data]
        except ValidationError as exc:
            logger.error("Malformed categories payload", extra={"errors": exc.error_count()})
            raise DataSourceUnavailable("malformed categories payload") from exc

    def list_category_ids(self, count: int, offset: int = 0) -> List[int]:
        return [c.id for c in self.list_categories(count, offset)]

    def get_category(self, category_id: int) -> RawCategory:
        """Retourne la catégorie brute (titre + tous ses indices)."""
        data = self._get("category", {"id": category_id})
        try:
            return RawCategory.model_validate(data)
        except ValidationError as exc:
            logger.error(
                "Malformed category payload",
                extra={"category_id": category_id, "errors": exc.error_count()},
            )
            raise DataSourceUnavailable(f"malformed payload for category {category_id}") from exc


def build_client() -> TriviaClient:
    """Client configuré depuis `settings` (utilisé par le store et /health)."""
    return TriviaClient(
        settings.TRIVIA_API_URL,
        timeout=(settings.HTTP_CONNECT_TIMEOUT, settings.HTTP_READ_TIMEOUT),
        retries=settings.HTTP_RETRIES,
    )
