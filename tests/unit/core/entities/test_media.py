"""
Tests pour les entites CatalogItem et PersonalReview.
"""

import pytest

from src.core.entities.media import CatalogItem, PersonalReview
from src.core.exceptions import EmptyReviewError, MediaExplorerError


class TestCatalogItem:

    def test_defaults(self):
        item = CatalogItem(id=1)
        assert item.title == ""
        assert item.vote_average == 0.0
        assert item.genres == ()
        assert item.saved_at is None

    @pytest.mark.parametrize(
        "release_date,year",
        [("2010-07-15", 2010), ("1999", 1999), ("", None), ("20", None), ("abcd-01-01", None)],
    )
    def test_year(self, release_date, year):
        assert CatalogItem(id=1, release_date=release_date).year == year

    def test_equality_by_value(self):
        assert CatalogItem(id=1, title="A") == CatalogItem(id=1, title="A")


class TestPersonalReview:

    @pytest.mark.parametrize(
        "rating,comment,empty",
        [
            (0.0, "", True),
            (0.0, "  ", True),
            (3.5, "", False),
            (0.0, "Just a note", False),
        ],
    )
    def test_is_empty(self, rating, comment, empty):
        assert PersonalReview(movie_id=1, rating=rating, comment=comment).is_empty is empty


class TestExceptions:

    def test_empty_review_error_is_value_error(self):
        error = EmptyReviewError(27205)
        assert isinstance(error, ValueError)
        assert isinstance(error, MediaExplorerError)
        assert error.movie_id == 27205
        assert "27205" in str(error)
