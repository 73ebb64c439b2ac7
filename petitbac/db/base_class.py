# petitbac/db/base_class.py
from sqlalchemy.orm import DeclarativeBase, declared_attr

class Base(DeclarativeBase):
    # Default table name is the lowercased class name; models may override it
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return cls.__name__.lower()
