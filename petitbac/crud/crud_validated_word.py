# petitbac/crud/crud_validated_word.py
import logging
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petitbac.schemas.validated_word import ValidatedWord

logger = logging.getLogger("petitbac.crud.validated_word")  # Logger for this module

_UPSERT_INSERTS = {"sqlite": sqlite_insert, "postgresql": pg_insert}

def is_word_validated(db: Session, word: str, category: str) -> bool:
    return (
        db.query(ValidatedWord.id)
        .filter(ValidatedWord.word == word, ValidatedWord.category == category)
        .first()
        is not None
    )

def insert_validated_word_if_absent(db: Session, word: str, category: str) -> bool:
    """
    Inserts (word, category) unless it is already there.
    Returns True when a row was written, False when the pair already existed.
    """
    insert_fn = _UPSERT_INSERTS.get(db.get_bind().dialect.name)
    if insert_fn is not None:
        stmt = (
            insert_fn(ValidatedWord)
            .values(word=word, category=category)
            .on_conflict_do_nothing(index_elements=["word", "category"])
        )
        result = db.execute(stmt)
        db.commit()
        return result.rowcount > 0

    # Other dialects: plain insert, a concurrent duplicate surfaces as IntegrityError
    if is_word_validated(db, word, category):
        return False
    db.add(ValidatedWord(word=word, category=category))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.debug(f"Concurrent insert of '{word}' ({category}) lost the race; keeping the existing row.")
        return False
    return True

def count_validated_words(db: Session, category: str | None = None) -> int:
    query = db.query(ValidatedWord)
    if category:
        query = query.filter(ValidatedWord.category == category)
    return query.count()

def delete_all_validated_words(db: Session) -> int:
    deleted = db.query(ValidatedWord).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted {deleted} cached validated words.")
    return deleted
