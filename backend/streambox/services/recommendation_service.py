"""Related-video selection for the video page."""

from typing import Iterable

from streambox.config import settings
from streambox.models.video import Video


class RecommendationService:
    """
    Ranks catalog videos by relevance to a watched video.

    A candidate in the same category earns ``category_weight``; each tag it
    shares with the watched video (case-insensitive) earns ``tag_weight``.
    Ties go to the more viewed video, then to the lower id. Candidates with
    no signal sort after every relevant one by views, which fills any
    remaining slots with popular content.

    Stateless: the same inputs always give the same ordered output.
    """

    def __init__(
        self,
        limit: int | None = None,
        category_weight: int | None = None,
        tag_weight: int | None = None,
    ):
        self.limit = settings.recommendation_limit if limit is None else limit
        self.category_weight = (
            settings.recommendation_category_weight
            if category_weight is None
            else category_weight
        )
        self.tag_weight = (
            settings.recommendation_tag_weight if tag_weight is None else tag_weight
        )

        if self.limit < 0:
            raise ValueError("limit must not be negative")
        if self.category_weight < 0 or self.tag_weight < 0:
            raise ValueError("weights must not be negative")

    def score(self, reference: Video, candidate: Video) -> int:
        """Relevance of a candidate to the reference video."""
        score = 0
        if candidate.category_id == reference.category_id:
            score += self.category_weight

        shared_tags = _normalized_tags(reference) & _normalized_tags(candidate)
        score += self.tag_weight * len(shared_tags)
        return score

    def recommend(
        self, reference: Video, catalog: Iterable[Video], limit: int | None = None
    ) -> list[Video]:
        """
        Select related videos for a watched video.

        Args:
            reference: The video being watched; it never appears in the result
            catalog: Every video available for recommendation
            limit: Maximum number of results (defaults to the configured limit)

        Returns:
            At most ``limit`` videos, most relevant first
        """
        if limit is None:
            limit = self.limit
        if limit < 0:
            raise ValueError("limit must not be negative")

        scored: dict[int, tuple[tuple[int, int, int], Video]] = {}
        for candidate in catalog:
            if candidate.id == reference.id or candidate.id in scored:
                continue

            score = self.score(reference, candidate)
            scored[candidate.id] = ((-score, -candidate.views, candidate.id), candidate)

        ranked = sorted(scored.values(), key=lambda item: item[0])
        return [video for _, video in ranked[:limit]]


def _normalized_tags(video: Video) -> set[str]:
    return {tag.lower() for tag in video.tags or []}
