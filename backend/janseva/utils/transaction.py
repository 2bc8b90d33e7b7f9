from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from janseva.extensions import db
from janseva.domain.errors import StoreFailure

@contextmanager
def transactional():
    """
    Commit everything done inside the block as one unit of work.

    Domain errors roll back and propagate unchanged; store errors roll back,
    are logged, and surface as StoreFailure.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Store failure, transaction rolled back")
        raise StoreFailure() from exc
    except Exception:
        db.session.rollback()
        raise
