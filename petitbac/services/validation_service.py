# petitbac/services/validation_service.py
import logging
from typing import Any, Dict

from petitbac.core.normalization import normalize_input
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.cache_service import CacheService
from petitbac.services.categorization_engine import CategorizationEngine, default_validators
from petitbac.services.validators.local_cache import LocalCacheValidator

logger = logging.getLogger("petitbac.services.validation_service")  # Logger for this module

SERVICE_SOURCE = "SERVICE"
# Only a fresh fixed-list match carries full confidence
DETERMINISTIC_CONFIDENCE = 1.0

def resolve_category(identifier: str | None) -> Category | None:
    """
    Maps a user-facing category identifier to a Category.
    Exact match on the enum name or display label first, then substring
    containment in either direction on the display label.
    """
    normalized = normalize_input(identifier)
    if not normalized:
        return None

    for category in Category:
        if normalize_input(category.name) == normalized or normalize_input(category.display_name) == normalized:
            return category

    for category in Category:
        label = normalize_input(category.display_name)
        if normalized in label or label in normalized:
            return category
    return None

class ValidationService:
    """
    Entry point for word validation: normalizes input, resolves the category,
    runs the categorization pipeline and feeds deterministic matches back into
    the cache. Safe to call from any thread.
    """

    def __init__(self, engine: CategorizationEngine | None = None, cache_service: CacheService | None = None):
        self.cache_service = cache_service or CacheService()
        if engine is None:
            validators = default_validators()
            # The cache validator reads from the same store this service writes to
            validators[0] = LocalCacheValidator(self.cache_service)
            engine = CategorizationEngine(validators)
        self._engine = engine

    @property
    def engine(self) -> CategorizationEngine:
        return self._engine

    def validate_word(self, category: str | None, word: str | None) -> ValidationOutcome:
        if word is None or not word.strip():
            return ValidationOutcome(
                status=ValidationStatus.INVALID, confidence=0.0, source=SERVICE_SOURCE, details="Empty word"
            )
        if category is None:
            return ValidationOutcome(
                status=ValidationStatus.ERROR, confidence=0.0, source=SERVICE_SOURCE, details="Category is null"
            )

        normalized_word = normalize_input(word)
        category_enum = resolve_category(category)
        if category_enum is None:
            logger.warning(f"Unknown category '{category}' requested for word '{normalized_word}'.")
            return ValidationOutcome(
                status=ValidationStatus.ERROR, confidence=0.0, source=SERVICE_SOURCE,
                details=f"Unknown category: {category}",
            )

        outcome = self._engine.validate(normalized_word, category_enum)
        logger.info(
            f"Validated '{normalized_word}' for {category_enum.name}: {outcome.status.value} "
            f"({outcome.confidence:.2f}) from {outcome.source}",
            extra={"word": normalized_word, "category": category_enum.name, "source": outcome.source},
        )

        # Heuristic (web) matches are never cached at full trust, cache hits are already stored
        if outcome.is_valid() and outcome.confidence == DETERMINISTIC_CONFIDENCE:
            self.cache_service.insert_if_absent(normalized_word, category_enum)
        return outcome

    def validate_word_boolean(self, category: str | None, word: str | None) -> bool:
        return self.validate_word(category, word).is_valid()

    def validation_stats(self) -> Dict[str, Any]:
        return {
            "available_validators": self._engine.available_validators(),
            "confidence_threshold": self._engine.confidence_threshold,
            "cached_words": self.cache_service.count(),
        }

    def clear_cache(self) -> int:
        deleted = self.cache_service.clear()
        logger.info(f"Validation cache cleared ({deleted} entries).")
        return deleted
