# petitbac/api/validation.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from petitbac.api import deps
from petitbac.models.enums import Category
from petitbac.models.validation import CategoryPublic, ValidationOutcome, ValidationStats
from petitbac.services.validation_service import ValidationService

logger = logging.getLogger("petitbac.api.validation")  # Logger for this module
router = APIRouter()

@router.get("/validate", response_model=ValidationOutcome)
async def validate_word_api(
    category: str | None = Query(None, description="Category name or label, e.g. 'ANIMAL' or 'Fruit/Légume'."),
    word: str | None = Query(None, description="The word submitted by the player."),
    service: ValidationService = Depends(deps.get_validation_service),
):
    """
    Validates a word for a category. Always answers 200: the verdict, including
    ERROR for a malformed request, is carried in the body.
    """
    # The pipeline blocks on network and storage I/O
    return await run_in_threadpool(service.validate_word, category, word)

@router.get("/categories", response_model=List[CategoryPublic])
def list_categories():
    return [CategoryPublic.from_category(category) for category in Category]

@router.get("/stats", response_model=ValidationStats)
def get_validation_stats(service: ValidationService = Depends(deps.get_validation_service)):
    return ValidationStats(**service.validation_stats())

@router.delete("/cache")
def clear_validation_cache(service: ValidationService = Depends(deps.get_validation_service)):
    deleted = service.clear_cache()
    logger.info(f"Validation cache cleared through the API ({deleted} entries).")
    return {"deleted": deleted}
