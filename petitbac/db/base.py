# petitbac/db/base.py
# Import all the models, so that Base has them before create_all() is called
from petitbac.db.base_class import Base
from petitbac.schemas.validated_word import ValidatedWord
