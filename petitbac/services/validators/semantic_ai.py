# petitbac/services/validators/semantic_ai.py
from petitbac.core.config import settings
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.validators import semantic_anchors
from petitbac.services.validators.base import CategoryValidator

class SemanticAiValidator(CategoryValidator):
    """
    Reserved pipeline slot for a semantic (embedding based) validator.
    No model is wired in yet: it always abstains and is disabled by default.
    """

    def __init__(self, enabled: bool = settings.SEMANTIC_VALIDATOR_ENABLED):
        self.enabled = enabled

    @property
    def source_name(self) -> str:
        return "AI"

    def is_available(self) -> bool:
        return self.enabled

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def anchors(self, category: Category) -> set[str]:
        """Anchor words the future model will compare submissions against."""
        return semantic_anchors.get_anchors(category)

    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        if word is None or not word.strip():
            return self._outcome(ValidationStatus.INVALID, 0.0, "Empty word")
        return self._outcome(ValidationStatus.UNCERTAIN, 0.0, "Semantic AI validation not yet implemented")
