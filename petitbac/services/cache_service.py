# petitbac/services/cache_service.py
import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from petitbac.core.normalization import normalize_input
from petitbac.crud import crud_validated_word
from petitbac.db.session import SessionLocal
from petitbac.models.enums import Category

logger = logging.getLogger("petitbac.services.cache_service")  # Logger for this module

def category_key(category: Category | str) -> str:
    """Cache rows are keyed by the category's enum name, e.g. "ANIMAL"."""
    if isinstance(category, Category):
        return category.name
    return str(category).strip().upper()

class CacheService:
    """
    Durable store of (word, category) pairs already confirmed by a deterministic source.

    Every operation opens its own session so the service can be shared between
    worker threads. Storage failures are logged and degrade to "not cached";
    they never reach the caller.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def exists(self, word: str, category: Category | str) -> bool:
        normalized_word = normalize_input(word)
        if not normalized_word:
            return False
        db = self._session_factory()
        try:
            return crud_validated_word.is_word_validated(db, normalized_word, category_key(category))
        except SQLAlchemyError as e:
            logger.error(f"Cache lookup failed for '{normalized_word}' ({category_key(category)}): {e}")
            return False
        finally:
            db.close()

    def insert_if_absent(self, word: str, category: Category | str) -> bool:
        normalized_word = normalize_input(word)
        if not normalized_word:
            return False
        db = self._session_factory()
        try:
            inserted = crud_validated_word.insert_validated_word_if_absent(db, normalized_word, category_key(category))
            if inserted:
                logger.info(f"Cached validated word '{normalized_word}' for {category_key(category)}.")
            return inserted
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Cache insert failed for '{normalized_word}' ({category_key(category)}): {e}")
            return False
        finally:
            db.close()

    def count(self, category: Category | str | None = None) -> int:
        db = self._session_factory()
        try:
            return crud_validated_word.count_validated_words(db, category_key(category) if category else None)
        except SQLAlchemyError as e:
            logger.error(f"Cache count failed: {e}")
            return 0
        finally:
            db.close()

    def clear(self) -> int:
        db = self._session_factory()
        try:
            return crud_validated_word.delete_all_validated_words(db)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Cache clear failed: {e}")
            return 0
        finally:
            db.close()
