"""
Tests pour DetailsController.

Verifie la machine a etats de la fiche (distante, hors-ligne, indisponible),
le sous-flux du casting, le basculement des favoris et les avis personnels.
"""

import asyncio

import pytest

from src.core.entities.media import CatalogItem
from src.core.exceptions import EmptyReviewError, MediaExplorerError
from src.core.ports.api_clients import Failure, FailureKind
from src.core.value_objects.catalog import CastMember
from src.services.catalog import CatalogService
from src.services.details import CastState, DetailsController, DetailsState
from src.utils.constants import OFFLINE_UNAVAILABLE

TIMEOUT = Failure(kind=FailureKind.TRANSPORT, detail="timed out")
CAST = [
    CastMember(id=6193, name="Leonardo DiCaprio", character="Dom Cobb"),
    CastMember(id=24045, name="Joseph Gordon-Levitt", character="Arthur"),
]


@pytest.fixture
def details(catalog: CatalogService) -> DetailsController:
    return DetailsController(catalog)


class TestLoadDetails:

    @pytest.mark.asyncio
    async def test_remote_details_and_cast(
        self, details: DetailsController, mock_client, inception: CatalogItem
    ):
        mock_client.fetch_details.return_value = inception
        mock_client.fetch_credits.return_value = CAST
        states = []
        details.state.observe(states.append)

        await details.load_details(inception.id)

        assert details.item.value == inception
        assert details.cast.value == CAST
        assert details.cast_state.value is CastState.CAST_POPULATED
        assert details.is_loading.value is False
        assert details.error.value is None
        assert states == [DetailsState.AWAITING_REMOTE, DetailsState.POPULATED]

    @pytest.mark.asyncio
    async def test_empty_cast(self, details: DetailsController, mock_client, inception: CatalogItem):
        mock_client.fetch_details.return_value = inception
        mock_client.fetch_credits.return_value = []

        await details.load_details(inception.id)

        assert details.state.value is DetailsState.POPULATED
        assert details.cast_state.value is CastState.CAST_EMPTY

    @pytest.mark.asyncio
    async def test_cast_failure_leaves_details_populated(
        self, details: DetailsController, mock_client, inception: CatalogItem
    ):
        mock_client.fetch_details.return_value = inception
        mock_client.fetch_credits.return_value = TIMEOUT

        await details.load_details(inception.id)

        assert details.state.value is DetailsState.POPULATED
        assert details.cast.value == []
        assert details.cast_state.value is CastState.CAST_EMPTY

    @pytest.mark.asyncio
    async def test_offline_favorite(
        self, details: DetailsController, store, mock_client, inception: CatalogItem
    ):
        """Scenario : favori sauvegarde, reseau coupe -> copie locale, casting vide, pas d'erreur."""
        store.upsert_favorite(inception)
        mock_client.fetch_details.return_value = TIMEOUT
        states = []
        details.state.observe(states.append)

        await details.load_details(inception.id)

        assert details.item.value.title == "Inception"
        assert details.item.value.backdrop_path == inception.backdrop_path
        assert details.cast.value == []
        assert details.error.value is None
        assert details.is_loading.value is False
        assert states == [
            DetailsState.AWAITING_REMOTE,
            DetailsState.AWAITING_LOCAL,
            DetailsState.POPULATED_OFFLINE,
        ]
        mock_client.fetch_credits.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unavailable_offline(self, details: DetailsController, mock_client):
        mock_client.fetch_details.return_value = TIMEOUT

        await details.load_details(42)

        assert details.item.value is None
        assert details.state.value is DetailsState.UNAVAILABLE
        assert details.error.value == OFFLINE_UNAVAILABLE
        assert details.is_loading.value is False

    @pytest.mark.asyncio
    async def test_newer_load_wins(
        self,
        details: DetailsController,
        mock_client,
        inception: CatalogItem,
        avatar: CatalogItem,
    ):
        gate = asyncio.Event()

        async def fetch_details(item_id, language):
            if item_id == inception.id:
                await gate.wait()
                return inception
            return avatar

        mock_client.fetch_details.side_effect = fetch_details

        first = asyncio.create_task(details.load_details(inception.id))
        await asyncio.sleep(0)
        await details.load_details(avatar.id)
        gate.set()
        await first

        assert details.item.value == avatar
        assert details.item_id == avatar.id


class TestFavoriteToggle:

    @pytest.mark.asyncio
    async def test_toggle_adds_then_removes(
        self, details: DetailsController, store, mock_client, inception: CatalogItem
    ):
        mock_client.fetch_details.return_value = inception
        await details.load_details(inception.id)

        assert await details.toggle_favorite() is True
        assert await details.refresh_favorite_state() is True
        assert store.is_favorite(inception.id)

        assert await details.toggle_favorite() is False
        assert await details.refresh_favorite_state() is False
        assert details.is_favorite.value is False

    @pytest.mark.asyncio
    async def test_toggle_without_item(self, details: DetailsController):
        assert await details.toggle_favorite() is False

    @pytest.mark.asyncio
    async def test_refresh_without_item(self, details: DetailsController):
        assert await details.refresh_favorite_state() is False


class TestReviews:

    @pytest.mark.asyncio
    async def test_save_load_delete(
        self, details: DetailsController, catalog: CatalogService, mock_client, inception
    ):
        mock_client.fetch_details.return_value = inception
        await details.load_details(inception.id)

        saved = details.save_review(4.5, "  Great  ")
        assert saved.comment == "Great"
        assert details.review.value == saved

        loaded = await details.load_review()
        assert loaded.rating == 4.5

        details.delete_review()
        await catalog.drain()
        assert details.review.value is None
        assert await details.load_review() is None

    @pytest.mark.asyncio
    async def test_empty_review_rejected(self, details: DetailsController, mock_client, inception):
        mock_client.fetch_details.return_value = inception
        await details.load_details(inception.id)

        with pytest.raises(EmptyReviewError):
            details.save_review(0.0, "   ")
        assert details.review.value is None

    def test_review_requires_loaded_item(self, details: DetailsController):
        with pytest.raises(MediaExplorerError):
            details.save_review(3.0, "ok")
