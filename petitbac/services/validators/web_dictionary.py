# petitbac/services/validators/web_dictionary.py
import logging
from typing import Dict, FrozenSet
from urllib.parse import quote

import httpx

from petitbac.core.config import settings
from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import ValidationOutcome
from petitbac.services.validators.base import CategoryValidator

logger = logging.getLogger("petitbac.services.validators.web_dictionary")

# English keywords expected in a dictionary definition of a word that belongs to the category.
# An empty set (or no entry) means this validator does not cover the category.
CATEGORY_KEYWORDS: Dict[Category, FrozenSet[str]] = {
    Category.ANIMAL: frozenset({
        "animal", "mammal", "bird", "fish", "reptile", "insect", "creature", "pet",
        "domesticated", "wildlife", "species", "vertebrate", "invertebrate",
    }),
    Category.FRUIT: frozenset({
        "fruit", "berry", "citrus", "tropical", "edible", "sweet", "juicy", "vitamin",
        "nutritious", "organic", "fresh", "ripe",
    }),
    Category.PAYS: frozenset({
        "country", "nation", "republic", "kingdom", "state", "territory", "sovereign",
        "government", "capital", "continent", "border", "citizenship",
    }),
    Category.VILLE: frozenset({
        "city", "town", "municipality", "urban", "metropolitan", "capital", "district",
        "borough", "settlement", "population", "downtown", "suburb",
    }),
    Category.PRENOM: frozenset(),
    Category.METIER: frozenset(),
    Category.OBJET: frozenset(),
}

MAX_WEB_CONFIDENCE = 0.85
BASE_WEB_CONFIDENCE = 0.75
CONFIDENCE_PER_KEYWORD = 0.02
# Transport problems are no evidence either way
FAILURE_CONFIDENCE = 0.5
UNSUPPORTED_CATEGORY_CONFIDENCE = 0.6

def keyword_confidence(match_count: int) -> float:
    """More corroborating keywords raise confidence, capped below certainty."""
    return min(MAX_WEB_CONFIDENCE, BASE_WEB_CONFIDENCE + CONFIDENCE_PER_KEYWORD * match_count)

class WebDictionaryValidator(CategoryValidator):
    """
    Looks the word up in a remote English dictionary and infers category
    membership from keywords found in the returned definitions.

    Outcomes:
      - timeout / transport error / unexpected status -> UNCERTAIN (0.5)
      - 404 -> INVALID, the word is unknown
      - definitions without any category keyword -> INVALID
      - n >= 1 keywords -> VALID, confidence min(0.85, 0.75 + 0.02 * n)
      - category without keywords -> UNCERTAIN (0.6)
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = settings.DICTIONARY_API_URL,
        timeout_seconds: float = settings.DICTIONARY_API_TIMEOUT_SECONDS,
        enabled: bool = settings.WEB_VALIDATOR_ENABLED,
        category_keywords: Dict[Category, FrozenSet[str]] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.enabled = enabled
        self.category_keywords = category_keywords if category_keywords is not None else CATEGORY_KEYWORDS
        # httpx.Client is safe to share between threads
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_seconds), follow_redirects=True)

    @property
    def source_name(self) -> str:
        return "WEB_VALIDATOR"

    def is_available(self) -> bool:
        return self.enabled

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def close(self) -> None:
        self._client.close()

    def validate(self, word: str | None, category: Category) -> ValidationOutcome:
        if not self.enabled:
            return self._outcome(ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE, "Validator disabled")

        if word is None or not word.strip():
            return self._outcome(ValidationStatus.INVALID, 0.0, "Empty word")

        try:
            return self._validate_with_dictionary(word.strip(), category)
        except Exception as e:
            logger.exception(f"Unexpected error while validating '{word}' ({category.name}) online: {e}")
            return self._outcome(ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE, f"API validation failed: {e}")

    def _validate_with_dictionary(self, word: str, category: Category) -> ValidationOutcome:
        url = f"{self.base_url}/{quote(word.lower(), safe='')}"
        try:
            response = self._client.get(url, timeout=self.timeout_seconds)
        except httpx.TimeoutException as e:
            logger.warning(f"Dictionary API timed out after {self.timeout_seconds}s for '{word}': {e}")
            return self._outcome(
                ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE,
                f"Dictionary API timeout after {self.timeout_seconds}s: {e}",
            )
        except httpx.HTTPError as e:
            logger.warning(f"Dictionary API transport error for '{word}': {e}")
            return self._outcome(ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE, f"Dictionary API error: {e}")

        if response.status_code == 404:
            return self._outcome(ValidationStatus.INVALID, 0.0, f"Word '{word}' not found in dictionary")
        if not response.is_success:
            logger.warning(f"Dictionary API answered HTTP {response.status_code} for '{word}'.")
            return self._outcome(
                ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE,
                f"Dictionary API error: HTTP {response.status_code}",
            )
        return self._analyze_response(response.text, word, category)

    def _analyze_response(self, body: str, word: str, category: Category) -> ValidationOutcome:
        if not body or not body.strip():
            return self._outcome(ValidationStatus.UNCERTAIN, FAILURE_CONFIDENCE, "Empty API response")

        # A text-level scan is enough: only keyword presence matters, not the structure
        lower_body = body.lower()
        if '"word"' not in lower_body or '"meanings"' not in lower_body:
            return self._outcome(ValidationStatus.INVALID, 0.0, "Word not recognized by dictionary API")

        keywords = self.category_keywords.get(category)
        if not keywords:
            return self._outcome(
                ValidationStatus.UNCERTAIN, UNSUPPORTED_CATEGORY_CONFIDENCE,
                f"Category '{category.display_name}' is not covered by the dictionary validator",
            )

        matches = sorted(keyword for keyword in keywords if keyword.lower() in lower_body)
        if not matches:
            return self._outcome(
                ValidationStatus.INVALID, 0.0,
                f"Word '{word}' exists but doesn't match {category.display_name} category",
            )

        logger.debug(f"'{word}' matched {category.name} keywords: {matches}")
        return self._outcome(
            ValidationStatus.VALID, keyword_confidence(len(matches)),
            f"Word '{word}' matches {category.display_name} category ({len(matches)} keyword matches)",
        )
