# -*- coding: utf-8 -*-
"""Fixed, ordered collection of artworks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from artspace.models.artwork import ArtworkRecord


class GalleryError(ValueError):
    """Raised when a gallery cannot be built from the given records."""


class Gallery:
    """Immutable ordered sequence of artwork records with at least one entry."""

    def __init__(self, records: Sequence[ArtworkRecord]) -> None:
        if not records:
            raise GalleryError("A gallery needs at least one artwork")
        self._records: tuple[ArtworkRecord, ...] = tuple(records)

    @classmethod
    def from_columns(
        cls,
        titles: Sequence[str],
        artist_names: Sequence[str],
        years: Sequence[str],
        image_refs: Sequence[str],
    ) -> Gallery:
        """Build a gallery from parallel lists of fields."""
        lengths = {len(titles), len(artist_names), len(years), len(image_refs)}
        if len(lengths) != 1:
            raise GalleryError(
                "Column lengths differ: "
                f"titles={len(titles)}, artists={len(artist_names)}, "
                f"years={len(years)}, images={len(image_refs)}"
            )
        return cls(
            [
                ArtworkRecord(title=title, artist_name=artist, year=year, image_ref=image_ref)
                for title, artist, year, image_ref in zip(titles, artist_names, years, image_refs)
            ]
        )

    @property
    def last_index(self) -> int:
        return len(self._records) - 1

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ArtworkRecord:
        return self._records[index]

    def __iter__(self) -> Iterator[ArtworkRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Gallery({len(self._records)} artworks)"


def default_gallery() -> Gallery:
    """Return the five artworks shipped with the application."""
    return Gallery.from_columns(
        titles=[
            "Девушка с жемчужной сережкой",
            "Звездная ночь",
            "Черный квадрат",
            "Девочка с персиками",
            "Постоянство памяти",
        ],
        artist_names=[
            "Ян Вермеер",
            "Винсент Ван Гог",
            "Казимир Малевич",
            "Валентин Серов",
            "Сальвадор Дали",
        ],
        years=["1665", "1889", "1915", "1899", "1931"],
        image_refs=["image_1", "image_2", "image_3", "image_4", "image_5"],
    )
