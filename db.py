from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from core.config import settings


def build_engine():
    database_url = settings.database_url
    if settings.is_sqlite:
        return create_engine(
            database_url,
            echo=settings.debug,
            connect_args={"check_same_thread": False}
        )

    # Production Postgres: connection pooling and SSL
    return create_engine(
        database_url,
        echo=settings.debug,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args={
            "sslmode": "require",
            "connect_timeout": 10
        }
    )


engine = build_engine()

Base = declarative_base()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection():
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
            print(f"Connected to {engine.url.render_as_string(hide_password=True)}")
    except Exception as e:
        print("Connection failed:")
        print(e)


if __name__ == "__main__":
    check_connection()
