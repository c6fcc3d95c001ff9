from db import SessionLocal


def get_db():
    """
    FastAPI dependency: one session per request, closed afterwards.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
