"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- CatalogItem: A browsable media entry, also the favorites record
- PersonalReview: The user's own rating/comment for an item
"""

from src.core.entities.media import CatalogItem, PersonalReview

__all__ = [
    "CatalogItem",
    "PersonalReview",
]
