# petitbac/schemas/validated_word.py
from sqlalchemy import Column, String, Integer, DateTime, Index, UniqueConstraint
from sqlalchemy.sql import func

from petitbac.db.base_class import Base

class ValidatedWord(Base):
    """A (word, category) pair that a deterministic source has already confirmed."""
    __tablename__ = "validated_words"

    id = Column(Integer, primary_key=True, index=True)
    word = Column(String, nullable=False)  # Normalized: trimmed, lowercased, accents stripped
    category = Column(String, nullable=False)  # Category enum name, e.g. "ANIMAL"
    validated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("word", "category", name="_word_category_uc"),
        Index("idx_word_category", "word", "category"),
    )
