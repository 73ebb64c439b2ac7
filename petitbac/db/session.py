# petitbac/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from petitbac.core.config import settings

# SQLite connections are shared with the worker threads that run validations
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
