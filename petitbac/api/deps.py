# petitbac/api/deps.py
import logging
from functools import lru_cache

from petitbac.services.validation_service import ValidationService

logger = logging.getLogger("petitbac.api.deps")  # Logger for this module

@lru_cache()
def _validation_service_singleton() -> ValidationService:
    logger.info("Building the validation pipeline.")
    return ValidationService()

def get_validation_service() -> ValidationService:
    """One pipeline per process; the validators hold no per-call state."""
    return _validation_service_singleton()
