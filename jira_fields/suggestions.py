"""Field-name suggestions built on the static field catalogs.

Two entry points:

* :meth:`SuggestionEngine.suggest` answers "did you mean?" for one requested
  field: an exact hit in the entity's typo table becomes ``corrected``; the
  ``alternatives`` are catalog fields ordered by usage frequency class, then
  by their position in the contextual-suggestion list.
* :meth:`SuggestionEngine.rank` produces scored candidates mixing string
  similarity, usage frequency, availability and a small boost for the
  fields callers ask for most.

Both are pure functions of their inputs and the (immutable) catalog.
"""

from __future__ import annotations

import logging
from difflib import SequenceMatcher

from pydantic import BaseModel, ConfigDict

from jira_fields.catalog import EntityFieldCatalog, FieldCatalog
from jira_fields.catalog.models import Frequency
from jira_fields.entity_types import EntityType

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
SIMILARITY_CUTOFF = 0.6
MIN_CONTAINMENT_LENGTH = 3

PREFIX_BOOST = 0.3
CONTEXTUAL_BOOST = 0.1
FREQUENCY_SCORE: dict[str, float] = {"high": 0.8, "medium": 0.6, "low": 0.4}
HIGH_PRIORITY_FIELDS = (
    "summary",
    "status",
    "assignee",
    "description",
    "project",
    "issuetype",
    "key",
    "name",
    "displayName",
    "emailAddress",
)


class Suggestion(BaseModel):
    """Outcome of a single "did you mean" lookup."""

    model_config = ConfigDict(frozen=True)

    corrected: str | None = None
    alternatives: list[str] = []


class ScoredSuggestion(BaseModel):
    """Ranked candidate with the factors that produced its score."""

    model_config = ConfigDict(frozen=True)

    field: str
    score: float
    similarity: float
    frequency: Frequency
    availability: float
    is_typo_correction: bool = False
    contextual_boost: float = 0.0


def _normalise(text: str) -> str:
    return text.strip().lower()


class SuggestionEngine:
    """Suggest catalog fields for unresolved or misspelled field names."""

    def __init__(self, catalog: FieldCatalog):
        self.catalog = catalog

    # Public API ------------------------------------------------------------
    def suggest(
        self,
        entity_type: EntityType | str,
        requested_field: str,
        limit: int = DEFAULT_LIMIT,
    ) -> Suggestion:
        """Return a typo correction (if known) plus ordered alternatives.

        Raises:
            CatalogNotFoundError: ``entity_type`` has no catalog.
        """
        entity = self.catalog.lookup(entity_type)
        needle = _normalise(requested_field)
        corrected = entity.typo_corrections.get(needle) if needle else None
        if corrected == requested_field.strip():
            # Case-only typo keys also match the correctly spelled name
            corrected = None
        if limit <= 0:
            return Suggestion(corrected=corrected)

        excluded = {requested_field, corrected}
        pool = [f for f in self._similar_fields(entity, needle) if f not in excluded]
        if not pool:
            pool = [f for f in entity.contextual_suggestions if f not in excluded]

        alternatives = self._order_by_usage(entity, pool)[:limit]
        logger.debug(
            "Suggestions for %s field %r: corrected=%r alternatives=%s",
            entity.entity_type.value,
            requested_field,
            corrected,
            alternatives,
        )
        return Suggestion(corrected=corrected, alternatives=alternatives)

    def rank(
        self,
        entity_type: EntityType | str,
        text: str,
        max_suggestions: int = 10,
        min_similarity: float = 0.2,
        use_contextual_boost: bool = True,
    ) -> list[ScoredSuggestion]:
        """Score catalog fields against ``text``.

        ``score = similarity*0.5 + frequency*0.2 + availability*0.2 + boost``,
        capped at 1.0. Typo-table hits enter with similarity 1.0. Results are
        ordered by score (two decimals), typo corrections first on ties, then
        availability, then name.
        """
        entity = self.catalog.lookup(entity_type)
        needle = _normalise(text)
        if not needle or max_suggestions <= 0:
            return []

        candidates: dict[str, tuple[float, bool]] = {}
        typo = entity.typo_corrections.get(needle)
        if typo:
            candidates[typo] = (1.0, True)

        similar = [
            (field, self._boosted_similarity(needle, field))
            for field in entity.known_fields()
        ]
        similar = [item for item in similar if item[1] > min_similarity]
        similar.sort(key=lambda item: -item[1])
        for field, similarity in similar[: max_suggestions * 2]:
            candidates.setdefault(field, (similarity, False))

        ranked = []
        for field, (similarity, is_typo) in candidates.items():
            stat = entity.statistic(field)
            frequency = stat.frequency if stat else "medium"
            availability = stat.availability if stat else 0.5
            boost = self._contextual_boost(field) if use_contextual_boost else 0.0
            score = min(
                1.0,
                similarity * 0.5
                + FREQUENCY_SCORE[frequency] * 0.2
                + availability * 0.2
                + boost,
            )
            if score < min_similarity:
                continue
            ranked.append(
                ScoredSuggestion(
                    field=field,
                    score=score,
                    similarity=similarity,
                    frequency=frequency,
                    availability=availability,
                    is_typo_correction=is_typo,
                    contextual_boost=boost,
                )
            )

        ranked.sort(
            key=lambda s: (
                -round(s.score, 2),
                not s.is_typo_correction,
                -s.availability,
                s.field,
            )
        )
        return ranked[:max_suggestions]

    @staticmethod
    def similarity(a: str, b: str) -> float:
        """Case-insensitive similarity ratio in ``[0, 1]``."""
        left, right = _normalise(a), _normalise(b)
        if left == right:
            return 1.0
        if not left or not right:
            return 0.0
        return SequenceMatcher(None, left, right).ratio()

    # Helpers ---------------------------------------------------------------
    def _boosted_similarity(self, needle: str, field: str) -> float:
        similarity = self.similarity(needle, field)
        if field.lower().startswith(needle):
            similarity = min(1.0, similarity + PREFIX_BOOST)
        return similarity

    def _similar_fields(self, entity: EntityFieldCatalog, needle: str) -> list[str]:
        if not needle:
            return []
        similar = []
        for field in entity.known_fields():
            lowered = field.lower()
            if self.similarity(needle, field) >= SIMILARITY_CUTOFF:
                similar.append(field)
            elif len(needle) >= MIN_CONTAINMENT_LENGTH and needle in lowered:
                similar.append(field)
            elif len(lowered) >= MIN_CONTAINMENT_LENGTH and lowered in needle:
                similar.append(field)
        return similar

    @staticmethod
    def _order_by_usage(entity: EntityFieldCatalog, fields: list[str]) -> list[str]:
        contextual = {name: i for i, name in enumerate(entity.contextual_suggestions)}
        catalog_order = {name: i for i, name in enumerate(entity.known_fields())}
        offset = len(contextual)

        def key(field: str) -> tuple[int, int]:
            position = contextual.get(field)
            if position is None:
                position = offset + catalog_order.get(field, len(catalog_order))
            return (-entity.frequency_rank(field), position)

        unique = list(dict.fromkeys(fields))
        return sorted(unique, key=key)

    @staticmethod
    def _contextual_boost(field: str) -> float:
        if any(priority in field for priority in HIGH_PRIORITY_FIELDS):
            return CONTEXTUAL_BOOST
        return 0.0


__all__ = ["ScoredSuggestion", "Suggestion", "SuggestionEngine"]
