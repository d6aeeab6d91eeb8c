from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from portfolio.extensions import db
from portfolio.domain.exceptions import MutationFailed

@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


@contextmanager
def mutation(action: str):
    """
    Run store writes as one transaction.

    A rejected write rolls back everything done inside the block and
    surfaces as MutationFailed.
    """
    try:
        with transactional():
            yield
    except SQLAlchemyError as exc:
        current_app.logger.error("%s failed: %s", action, exc)
        raise MutationFailed(f"{action} failed; no changes were saved") from exc

    current_app.logger.info("%s committed", action)
