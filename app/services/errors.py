"""
Service: errors.py
Rôle :
- Taxonomie des erreurs du plateau, levées par les services et traduites en HTTP par les routes.

Hiérarchie :
- BoardError
  - SelectionExhausted     : pool trop pauvre pour tirer M catégories distinctes
  - InsufficientClues      : catégorie avec moins de N indices
  - DataSourceUnavailable  : source trivia injoignable ou réponse invalide
  - InvalidCoordinate      : clic sur une case qui n'existe pas
  - LoadingInProgress      : redémarrage demandé pendant un chargement
"""


class BoardError(RuntimeError):
    """Base commune des erreurs du plateau."""


class SelectionExhausted(BoardError):
    """Le pool ne contient pas assez d'identifiants distincts."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"cannot select {requested} distinct ids from a pool of {available}")
        self.requested = requested
        self.available = available


class InsufficientClues(BoardError):
    """Une catégorie n'a pas assez d'indices pour remplir sa colonne."""

    def __init__(self, requested: int, available: int, category_id=None):
        super().__init__(
            f"category {category_id!r} has {available} clues, {requested} required"
            if category_id is not None
            else f"{available} clues available, {requested} required"
        )
        self.requested = requested
        self.available = available
        self.category_id = category_id


class DataSourceUnavailable(BoardError):
    """Erreur encapsulant un échec de communication avec la source trivia."""


class InvalidCoordinate(BoardError):
    """Coordonnées (catégorie, ligne) hors plateau."""

    def __init__(self, category_index: int, row_index: int):
        super().__init__(f"no clue at ({category_index}, {row_index})")
        self.category_index = category_index
        self.row_index = row_index


class LoadingInProgress(BoardError):
    """Un chargement est déjà en cours ; la demande de redémarrage est ignorée."""
