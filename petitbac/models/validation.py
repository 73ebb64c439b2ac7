from pydantic import BaseModel, ConfigDict, Field, model_validator

from petitbac.models.enums import Category, ValidationStatus

class ValidationOutcome(BaseModel):
    """The verdict of one validator (or of the whole pipeline) for a (word, category) pair."""
    model_config = ConfigDict(frozen=True)

    status: ValidationStatus
    confidence: float = Field(ge=0.0, le=1.0)
    source: str  # LOCAL_DB, FIXED_LIST, WEB_VALIDATOR, AI, ENGINE or SERVICE
    details: str = ""

    @model_validator(mode="after")
    def _valid_needs_confidence(self) -> "ValidationOutcome":
        if self.status == ValidationStatus.VALID and self.confidence <= 0.0:
            raise ValueError("A VALID outcome must carry a confidence above 0")
        return self

    def is_valid(self) -> bool:
        return self.status == ValidationStatus.VALID

    def is_uncertain(self) -> bool:
        return self.status == ValidationStatus.UNCERTAIN

class CategoryPublic(BaseModel):
    name: str
    display_name: str
    icon: str
    hint: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryPublic":
        return cls(name=category.name, display_name=category.display_name, icon=category.icon, hint=category.hint)

class ValidationStats(BaseModel):
    available_validators: list[str]
    confidence_threshold: float
    cached_words: int

class LiveValidationRequest(BaseModel):
    field: str = Field(description="Client-side input the word was typed into, e.g. the category row.")
    category: str
    word: str = ""
