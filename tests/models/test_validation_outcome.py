# tests/models/test_validation_outcome.py
import pytest
from pydantic import ValidationError

from petitbac.models.enums import Category, ValidationStatus
from petitbac.models.validation import CategoryPublic, ValidationOutcome

def test_predicates():
    valid = ValidationOutcome(status=ValidationStatus.VALID, confidence=1.0, source="FIXED_LIST", details="hit")
    uncertain = ValidationOutcome(status=ValidationStatus.UNCERTAIN, confidence=0.0, source="LOCAL_DB")

    assert valid.is_valid() and not valid.is_uncertain()
    assert uncertain.is_uncertain() and not uncertain.is_valid()

def test_outcome_is_immutable():
    outcome = ValidationOutcome(status=ValidationStatus.INVALID, confidence=0.0, source="WEB_VALIDATOR")
    with pytest.raises(ValidationError):
        outcome.status = ValidationStatus.VALID

def test_valid_outcome_requires_positive_confidence():
    with pytest.raises(ValidationError):
        ValidationOutcome(status=ValidationStatus.VALID, confidence=0.0, source="FIXED_LIST")

@pytest.mark.parametrize("confidence", [-0.1, 1.01])
def test_confidence_must_stay_in_unit_interval(confidence):
    with pytest.raises(ValidationError):
        ValidationOutcome(status=ValidationStatus.UNCERTAIN, confidence=confidence, source="ENGINE")

def test_outcome_serializes_status_as_string():
    outcome = ValidationOutcome(status=ValidationStatus.ERROR, confidence=0.0, source="SERVICE", details="Category is null")
    assert outcome.model_dump(mode="json") == {
        "status": "ERROR", "confidence": 0.0, "source": "SERVICE", "details": "Category is null",
    }

def test_category_carries_label_icon_and_hint():
    assert Category.FRUIT.display_name == "Fruit/Légume"
    assert Category.ANIMAL.hint == "Un animal"
    assert len(list(Category)) == 8

    public = CategoryPublic.from_category(Category.METIER)
    assert public.name == "METIER"
    assert public.display_name == "Métier"
