# tests/services/test_validation_service.py
import json

import httpx
import pytest

from petitbac.models.enums import Category, ValidationStatus
from petitbac.services.categorization_engine import CategorizationEngine
from petitbac.services.validation_service import ValidationService, resolve_category
from petitbac.services.validators.fixed_list import FixedListValidator
from petitbac.services.validators.local_cache import LocalCacheValidator
from petitbac.services.validators.semantic_ai import SemanticAiValidator
from petitbac.services.validators.web_dictionary import WebDictionaryValidator

def online_service(cache_service, handler) -> ValidationService:
    """Full pipeline with the dictionary API answered by `handler`."""
    web_validator = WebDictionaryValidator(
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        base_url="https://dictionary.test/api/v2/entries/en",
        enabled=True,
    )
    engine = CategorizationEngine([
        LocalCacheValidator(cache_service),
        FixedListValidator(),
        web_validator,
        SemanticAiValidator(),
    ])
    return ValidationService(engine=engine, cache_service=cache_service)

def definition(word: str, text: str) -> httpx.Response:
    return httpx.Response(200, text=json.dumps([{
        "word": word, "meanings": [{"definitions": [{"definition": text}]}],
    }]))

def test_fixed_list_match_is_cached_then_served_from_cache(validation_service, cache_service):
    first = validation_service.validate_word("ANIMAL", "chien")

    assert first.status == ValidationStatus.VALID
    assert first.source == "FIXED_LIST"
    assert first.confidence == 1.0
    assert cache_service.exists("chien", Category.ANIMAL)

    second = validation_service.validate_word("ANIMAL", "chien")

    assert second.status == ValidationStatus.VALID
    assert second.source == "LOCAL_DB"
    assert second.confidence == pytest.approx(0.90)

def test_input_is_normalized_before_lookup(validation_service, cache_service):
    result = validation_service.validate_word("Animal", "  ÉLÉPHANT ")

    assert result.status == ValidationStatus.VALID
    assert result.source == "FIXED_LIST"
    assert cache_service.exists("elephant", Category.ANIMAL)

@pytest.mark.parametrize("word", [None, "", "   "])
def test_empty_word_is_invalid(validation_service, word):
    result = validation_service.validate_word("ANIMAL", word)

    assert result.status == ValidationStatus.INVALID
    assert result.source == "SERVICE"
    assert result.details == "Empty word"

def test_null_category_is_an_error(validation_service):
    result = validation_service.validate_word(None, "chien")

    assert result.status == ValidationStatus.ERROR
    assert result.details == "Category is null"

def test_unknown_category_is_an_error(validation_service, cache_service):
    result = validation_service.validate_word("UNKNOWNCAT", "chien")

    assert result.status == ValidationStatus.ERROR
    assert result.source == "SERVICE"
    assert result.details == "Unknown category: UNKNOWNCAT"
    assert cache_service.count() == 0

@pytest.mark.parametrize("identifier, expected", [
    ("ANIMAL", Category.ANIMAL),
    ("animal", Category.ANIMAL),
    (" Pays ", Category.PAYS),
    ("Métier", Category.METIER),
    ("metier", Category.METIER),
    ("Fruit/Légume", Category.FRUIT),
    ("fruit", Category.FRUIT),
    ("légume", Category.FRUIT),
    ("CELEBRITE", Category.CELEBRITE),
    ("Célébrité", Category.CELEBRITE),
])
def test_resolve_category(identifier, expected):
    assert resolve_category(identifier) is expected

@pytest.mark.parametrize("identifier", [None, "", "   ", "UNKNOWNCAT"])
def test_resolve_category_unknown(identifier):
    assert resolve_category(identifier) is None

def test_offline_miss_stays_uncertain(validation_service, cache_service):
    result = validation_service.validate_word("OBJET", "xylophone-quantique")

    assert result.status == ValidationStatus.UNCERTAIN
    assert result.is_valid() is False
    assert cache_service.count() == 0

def test_dictionary_rejection_wins_over_later_sources(cache_service):
    service = online_service(cache_service, lambda request: definition("apple", "The round fruit of a tree."))

    result = service.validate_word("ANIMAL", "apple")

    assert result.status == ValidationStatus.INVALID
    assert result.source == "WEB_VALIDATOR"

def test_heuristic_match_is_not_cached(cache_service):
    service = online_service(cache_service, lambda request: definition("lynx", "A wild cat, a mammal of the forest."))

    result = service.validate_word("ANIMAL", "lynx")

    assert result.status == ValidationStatus.VALID
    assert result.source == "WEB_VALIDATOR"
    assert result.confidence < 1.0
    assert not cache_service.exists("lynx", Category.ANIMAL)

def test_dictionary_outage_is_uncertain(cache_service):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    result = online_service(cache_service, handler).validate_word("ANIMAL", "lynx")

    assert result.status == ValidationStatus.UNCERTAIN
    assert result.source == "WEB_VALIDATOR"
    assert not cache_service.exists("lynx", Category.ANIMAL)

def test_ambiguous_word_is_checked_per_category(validation_service):
    assert validation_service.validate_word_boolean("METIER", "avocat") is True
    assert validation_service.validate_word_boolean("FRUIT", "avocat") is True
    assert validation_service.validate_word_boolean("ANIMAL", "avocat") is False

def test_stats_and_clear(validation_service):
    validation_service.validate_word("PAYS", "France")
    validation_service.validate_word("VILLE", "Paris")

    stats = validation_service.validation_stats()
    assert stats["available_validators"] == ["LOCAL_DB", "FIXED_LIST"]
    assert stats["cached_words"] == 2
    assert 0.0 <= stats["confidence_threshold"] <= 1.0

    assert validation_service.clear_cache() == 2
    assert validation_service.validation_stats()["cached_words"] == 0

def test_default_service_shares_its_cache(cache_service):
    service = ValidationService(cache_service=cache_service)

    first_validator = service.engine.validators[0]
    assert isinstance(first_validator, LocalCacheValidator)
    assert first_validator.cache_service is cache_service
