"""
Exceptions du domaine Media Explorer.

Les echecs reseau ne sont jamais leves : le client catalogue les convertit en
valeurs Failure. Les exceptions ci-dessous couvrent les erreurs d'usage
detectees avant tout appel.
"""


class MediaExplorerError(Exception):
    """Classe de base des erreurs applicatives."""


class EmptyReviewError(MediaExplorerError, ValueError):
    """
    Levee quand un avis n'a ni note ni commentaire.

    Attributes:
        movie_id: Film concerne par l'avis rejete
    """

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(
            f"Review for movie {movie_id} needs a rating or a comment"
        )
