# app/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.config import settings

Base = declarative_base()

def create_db_engine(db_url: str):
    if not db_url:
        raise ValueError("DATABASE_URL não está definido ou está vazio.")
    if db_url.startswith("sqlite"):
        # SQLite em memória precisa de uma única conexão compartilhada
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(
                db_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(db_url, connect_args={"check_same_thread": False})
    return create_engine(db_url, pool_pre_ping=True)

# Engine principal, criado uma única vez por processo
engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
