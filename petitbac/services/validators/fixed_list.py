from typing import Dict, FrozenSet, Iterable

from petitbac.core.normalization import normalize_input
from petitbac.data.word_lists import get_word_list
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.validators.base import CategoryValidator

class FixedListValidator(CategoryValidator):
    """Exact membership test against the curated word lists. A miss is not proof of invalidity."""

    def __init__(self, word_lists: Dict[Category, Iterable[str]] | None = None):
        # None means the bundled lists from petitbac.data.word_lists
        self._custom_lists: Dict[Category, FrozenSet[str]] | None = None
        if word_lists is not None:
            self._custom_lists = {
                category: frozenset(normalize_input(word) for word in words)
                for category, words in word_lists.items()
            }

    @property
    def source_name(self) -> str:
        return "FIXED_LIST"

    def words_for(self, category: Category) -> FrozenSet[str]:
        if self._custom_lists is None:
            return get_word_list(category)
        return self._custom_lists.get(category, frozenset())

    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        normalized = normalize_input(word)
        if not normalized:
            return self._outcome(ValidationStatus.UNCERTAIN, 0.0, "Empty word")

        if normalized in self.words_for(category):
            return self._outcome(ValidationStatus.VALID, 1.0, f"'{normalized}' is in the {category.display_name} list")
        return self._outcome(ValidationStatus.UNCERTAIN, 0.0, f"'{normalized}' is not in the {category.display_name} list")
