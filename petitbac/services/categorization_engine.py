# petitbac/services/categorization_engine.py
import logging
import time
from typing import List, Sequence, Tuple

from petitbac.core.config import settings
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.validators.base import CategoryValidator
from petitbac.services.validators.fixed_list import FixedListValidator
from petitbac.services.validators.local_cache import LocalCacheValidator
from petitbac.services.validators.semantic_ai import SemanticAiValidator
from petitbac.services.validators.web_dictionary import WebDictionaryValidator

logger = logging.getLogger("petitbac.services.categorization_engine")  # Logger for this module

ENGINE_SOURCE = "ENGINE"
CONFIDENT_STATUSES = (ValidationStatus.VALID, ValidationStatus.INVALID)

def default_validators() -> List[CategoryValidator]:
    """Cheap and previously confirmed first, curated lists next, network heuristics, then the semantic slot."""
    return [
        LocalCacheValidator(),
        FixedListValidator(),
        WebDictionaryValidator(),
        SemanticAiValidator(),
    ]

class CategorizationEngine:
    """
    Runs the validators in their declared order. The first confident verdict
    (VALID or INVALID) wins and stops the chain; no voting between sources.
    When nobody is confident, the last abstention is returned unchanged.
    """

    def __init__(
        self,
        validators: Sequence[CategoryValidator] | None = None,
        confidence_threshold: float = settings.CONFIDENCE_THRESHOLD,
    ):
        self._validators: Tuple[CategoryValidator, ...] = tuple(
            validators if validators is not None else default_validators()
        )
        self.confidence_threshold = confidence_threshold

    @property
    def validators(self) -> Tuple[CategoryValidator, ...]:
        return self._validators

    def available_validators(self) -> List[str]:
        return [validator.source_name for validator in self._validators if validator.is_available()]

    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        if word is None or not word.strip():
            return ValidationOutcome(
                status=ValidationStatus.INVALID, confidence=0.0, source=ENGINE_SOURCE, details="Empty word"
            )

        last_outcome: ValidationOutcome | None = None
        for validator in self._validators:
            if not validator.is_available():
                continue

            started = time.perf_counter()
            outcome = self._run_validator(validator, word, category)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(
                f"{validator.source_name} -> {outcome.status.value} ({outcome.confidence:.2f}) "
                f"for '{word}' in {category.name} [{elapsed_ms:.1f} ms]"
            )

            if outcome.status in CONFIDENT_STATUSES:
                return outcome
            last_outcome = outcome

        if last_outcome is None:
            logger.warning(f"No validator available for '{word}' ({category.name}).")
            return ValidationOutcome(
                status=ValidationStatus.UNCERTAIN, confidence=0.0, source=ENGINE_SOURCE,
                details="No validators available",
            )
        return last_outcome

    def _run_validator(self, validator: CategoryValidator, word: str, category: Category) -> ValidationOutcome:
        # Validators must not raise; one that does is reported as ERROR and the chain moves on
        try:
            return validator.validate(word, category)
        except Exception as e:
            logger.exception(f"Validator {validator.source_name} raised for '{word}' ({category.name}): {e}")
            return ValidationOutcome(
                status=ValidationStatus.ERROR, confidence=0.0, source=validator.source_name,
                details=f"Validator failure: {e}",
            )
