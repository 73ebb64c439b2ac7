# petitbac/services/validators/base.py
from abc import ABC, abstractmethod

from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome

class CategoryValidator(ABC):
    """
    One oracle in the validation pipeline.

    `validate` must not raise for malformed input: it answers with an
    UNCERTAIN or ERROR outcome instead. Implementations keep no per-call
    mutable state, so a single instance can serve concurrent callers.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Stable identifier used in outcomes, stats and logs."""

    @abstractmethod
    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        ...

    def is_available(self) -> bool:
        return True

    def _outcome(self, status: ValidationStatus, confidence: float, details: str) -> ValidationOutcome:
        return ValidationOutcome(status=status, confidence=confidence, source=self.source_name, details=details)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={self.source_name!r}, available={self.is_available()})"
