"""
Album listing filter composition.

Turns UI filter state (genre, release year, sort key) into a SQLAlchemy
query over the albums table: equality predicates for each non-empty
filter plus a single descending order clause.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Query construction for the album listing and its snapshots
"""

import enum
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, select

from backend.boundary.db.models.album_model import AlbumModel
from backend.core.exceptions import ValidationError

GENRES: tuple[str, ...] = (
    "Rock",
    "Pop",
    "Hip Hop",
    "Jazz",
    "Classical",
    "Electronic",
    "Folk",
    "Blues",
    "Country",
    "Metal",
    "Indie",
    "R&B",
    "Soul",
    "Reggae",
    "World",
)

MIN_RELEASE_YEAR = 1960
MAX_RELEASE_YEAR = 2025


class SortKey(str, enum.Enum):
    """
    Listing sort options, all descending.

    RATING: avg_rating (default)
    REVIEW: num_ratings
    YEAR: release_year
    """

    RATING = "Rating"
    REVIEW = "Review"
    YEAR = "Year"


_ORDER_COLUMNS = {
    SortKey.RATING: AlbumModel.avg_rating,
    SortKey.REVIEW: AlbumModel.num_ratings,
    SortKey.YEAR: AlbumModel.release_year,
}


@dataclass(frozen=True)
class AlbumFilters:
    """Normalized listing filters. None means "no filter"."""

    genre: str | None = None
    release_year: int | None = None
    sort: SortKey = SortKey.RATING

    @classmethod
    def from_raw(
        cls,
        genre: str | None = None,
        release_year: Any = None,
        sort: str | SortKey | None = None,
    ) -> "AlbumFilters":
        """
        Normalize raw filter values from a query string or form.

        Empty strings mean "All". Years may arrive as strings.

        Raises:
            ValidationError: If the year is not an integer or the sort key is unknown
        """
        genre = genre.strip() if isinstance(genre, str) else genre
        return cls(
            genre=genre or None,
            release_year=_parse_year(release_year),
            sort=_parse_sort(sort),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "genre": self.genre,
            "release_year": self.release_year,
            "sort": self.sort.value,
        }


def _parse_year(raw: Any) -> int | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValidationError("Release year must be an integer", field="release_year")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValidationError(
            f"Release year must be an integer, got {raw!r}",
            field="release_year",
        ) from None


def _parse_sort(raw: str | SortKey | None) -> SortKey:
    if raw is None or raw == "":
        return SortKey.RATING
    try:
        return SortKey(raw)
    except ValueError:
        raise ValidationError(
            f"Unknown sort key {raw!r}; expected one of "
            f"{', '.join(key.value for key in SortKey)}",
            field="sort",
        ) from None


def apply_query_filters(stmt: Select, filters: AlbumFilters) -> Select:
    """
    Add filter predicates and the order clause to an album select.

    Args:
        stmt: Select over AlbumModel
        filters: Normalized filters

    Returns:
        Select: Filtered and ordered statement
    """
    if filters.genre:
        stmt = stmt.where(AlbumModel.genre == filters.genre)
    if filters.release_year is not None:
        stmt = stmt.where(AlbumModel.release_year == filters.release_year)
    return stmt.order_by(_ORDER_COLUMNS[filters.sort].desc())


def build_album_query(filters: AlbumFilters | None = None) -> Select:
    """
    Build the album listing query.

    Args:
        filters: Normalized filters (defaults: no predicates, rating order)

    Returns:
        Select: Query returning AlbumModel rows
    """
    return apply_query_filters(select(AlbumModel), filters or AlbumFilters())
