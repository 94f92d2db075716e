from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Generator

from ..core.database import Database

def get_database(request: Request) -> Database:
    """Return the storage handle opened for this application."""
    return request.app.state.database

def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """Get a database session scoped to one request."""
    db = database.session()
    try:
        yield db
    finally:
        db.close()
