from .base import Base
from .session import async_session_factory, build_engine, build_session_factory, engine
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "SQLAlchemyUnitOfWork",
]
