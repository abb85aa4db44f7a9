"""
Implementation SQLModel du store de favoris et d'avis.

Implemente l'interface IFavoritesStore pour la persistance locale dans la
base de donnees SQLite via SQLModel. Toutes les methodes sont synchrones et
bloquantes : CatalogService les execute sur son worker en arriere-plan.
"""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from sqlmodel import func, select

from src.core.entities.media import CatalogItem, PersonalReview
from src.core.ports.repositories import IFavoritesStore
from src.infrastructure.persistence.database import SessionFactory
from src.infrastructure.persistence.models import FavoriteModel, UserReviewModel
from src.utils.observable import LiveValue


class SQLModelFavoritesStore(IFavoritesStore):
    """
    Store SQLModel pour les favoris et les avis personnels.

    Implemente IFavoritesStore avec conversion bidirectionnelle entre les
    entites (CatalogItem, PersonalReview) et les modeles (FavoriteModel,
    UserReviewModel). Apres chaque mutation de favori, la liste triee est
    re-emise sur `favorites` depuis le thread qui a effectue l'ecriture.
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        """
        Initialise le store avec une fabrique de sessions.

        Args :
            session_factory : Ouvre une session SQLModel par operation
        """
        self._session_factory = session_factory
        self._favorites: LiveValue[list[CatalogItem]] = LiveValue([])

    @property
    def favorites(self) -> LiveValue[list[CatalogItem]]:
        return self._favorites

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def _to_entity(self, model: FavoriteModel) -> CatalogItem:
        """Convertit un modele DB en entite domaine."""
        return CatalogItem(
            id=model.id,
            title=model.title,
            overview=model.overview,
            poster_path=model.poster_path,
            release_date=model.release_date,
            vote_average=model.vote_average,
            backdrop_path=model.backdrop_path,
            genres=tuple(model.genres),
            original_language=model.original_language,
            saved_at=_as_utc(model.saved_at),
        )

    def _to_model(self, entity: CatalogItem, saved_at: datetime) -> FavoriteModel:
        """Convertit une entite domaine en modele DB."""
        model = FavoriteModel(
            id=entity.id,
            title=entity.title,
            overview=entity.overview,
            poster_path=entity.poster_path,
            backdrop_path=entity.backdrop_path,
            release_date=entity.release_date,
            vote_average=entity.vote_average,
            original_language=entity.original_language,
            saved_at=saved_at,
        )
        model.genres = list(entity.genres)
        return model

    @staticmethod
    def _review_to_entity(model: UserReviewModel) -> PersonalReview:
        return PersonalReview(
            movie_id=model.movie_id,
            rating=model.rating,
            comment=model.comment,
            created_at=_as_utc(model.created_at),
        )

    # ------------------------------------------------------------------
    # Favoris
    # ------------------------------------------------------------------

    def upsert_favorite(self, item: CatalogItem) -> CatalogItem:
        """Insere ou remplace un favori (cle = id)."""
        saved_at = datetime.now(timezone.utc)
        with self._session_factory() as session:
            # merge: insertion ou remplacement de la ligne portant le meme id
            model = session.merge(self._to_model(item, saved_at))
            session.commit()
            session.refresh(model)
            saved = self._to_entity(model)

        logger.debug(f"Favori enregistre: {saved.title} ({saved.id})")
        self._publish()
        return saved

    def remove_favorite(self, item_id: int) -> bool:
        """Supprime un favori par son id."""
        with self._session_factory() as session:
            model = session.get(FavoriteModel, item_id)
            if model is None:
                return False
            session.delete(model)
            session.commit()

        logger.debug(f"Favori supprime: {item_id}")
        self._publish()
        return True

    def is_favorite(self, item_id: int) -> bool:
        with self._session_factory() as session:
            return session.get(FavoriteModel, item_id) is not None

    def get_favorite(self, item_id: int) -> Optional[CatalogItem]:
        """Recupere la copie hors-ligne d'un favori."""
        with self._session_factory() as session:
            model = session.get(FavoriteModel, item_id)
            if model:
                return self._to_entity(model)
            return None

    def list_favorites(self) -> list[CatalogItem]:
        """Liste les favoris tries par titre croissant."""
        with self._session_factory() as session:
            statement = select(FavoriteModel).order_by(FavoriteModel.title)
            models = session.exec(statement).all()
            return [self._to_entity(model) for model in models]

    def count_favorites(self) -> int:
        with self._session_factory() as session:
            return session.exec(select(func.count()).select_from(FavoriteModel)).one()

    def _publish(self) -> None:
        """Re-emet la liste complete apres une mutation."""
        self._favorites.set_value(self.list_favorites())

    # ------------------------------------------------------------------
    # Avis personnels
    # ------------------------------------------------------------------

    def upsert_review(self, review: PersonalReview) -> PersonalReview:
        """Insere ou remplace l'avis d'un film."""
        with self._session_factory() as session:
            model = session.get(UserReviewModel, review.movie_id)
            if model is None:
                model = UserReviewModel(movie_id=review.movie_id)
            model.rating = review.rating
            model.comment = review.comment
            model.created_at = _as_utc(review.created_at)
            session.add(model)
            session.commit()
            session.refresh(model)
            saved = self._review_to_entity(model)

        logger.debug(f"Avis enregistre pour le film {review.movie_id}")
        return saved

    def get_review(self, movie_id: int) -> Optional[PersonalReview]:
        with self._session_factory() as session:
            model = session.get(UserReviewModel, movie_id)
            if model:
                return self._review_to_entity(model)
            return None

    def delete_review(self, movie_id: int) -> bool:
        """Supprime l'avis d'un film."""
        with self._session_factory() as session:
            model = session.get(UserReviewModel, movie_id)
            if model is None:
                return False
            session.delete(model)
            session.commit()

        logger.debug(f"Avis supprime pour le film {movie_id}")
        return True



def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite rend des datetimes naifs : ils sont stockes en UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
