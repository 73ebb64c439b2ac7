# petitbac/services/validators/local_cache.py
import logging

from petitbac.core.config import settings
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.cache_service import CacheService
from petitbac.services.validators.base import CategoryValidator

logger = logging.getLogger("petitbac.services.validators.local_cache")

class LocalCacheValidator(CategoryValidator):
    """First pipeline step: confirms previously validated words, never rejects."""

    def __init__(self, cache_service: CacheService | None = None, confidence: float = settings.LOCAL_CACHE_CONFIDENCE):
        self.cache_service = cache_service or CacheService()
        self.confidence = confidence

    @property
    def source_name(self) -> str:
        return "LOCAL_DB"

    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        if word is None or not word.strip():
            return self._outcome(ValidationStatus.UNCERTAIN, 0.0, "Empty word")

        # exists() already degrades storage errors to False; a miss carries no evidence either way
        if self.cache_service.exists(word, category):
            logger.debug(f"Cache hit for '{word}' ({category.name}).")
            return self._outcome(ValidationStatus.VALID, self.confidence, "Previously validated word (local cache)")
        return self._outcome(ValidationStatus.UNCERTAIN, 0.0, "Word not found in cache")
