import logging
from datetime import datetime, UTC
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from trailstudy.models.session_record import SessionRecord

logger = logging.getLogger(__name__)


class SessionStorage:
    """Key-value persistence for the logged-in session record."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db = self.session_factory()
        try:
            record = db.get(SessionRecord, key)
            return record.value if record else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self.session_factory()
        try:
            record = db.get(SessionRecord, key)
            if record:
                record.value = value
                record.updated_at = datetime.now(UTC)
            else:
                db.add(SessionRecord(key=key, value=value))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to persist session record {key}: {str(e)}")
            raise
        finally:
            db.close()

    def delete(self, key: str) -> bool:
        db = self.session_factory()
        try:
            record = db.get(SessionRecord, key)
            if not record:
                return False
            db.delete(record)
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete session record {key}: {str(e)}")
            raise
        finally:
            db.close()
