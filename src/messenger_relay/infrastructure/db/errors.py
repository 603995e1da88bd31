from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from messenger_relay.application.exceptions import StorageError


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise SQLAlchemy failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"{type(exc).__name__}: {exc}") from exc
