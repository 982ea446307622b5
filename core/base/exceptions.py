"""
Core Base Exceptions

Domain error taxonomy shared by all HR services.

    - ValidationError: django.core.exceptions.ValidationError (re-exported).
      Malformed or constraint-violating payload. Not retried.
    - NotFoundError: referenced employee or record is absent. Not retried.
    - ConflictError: unique-constraint violation or a lost race on a
      conditional update. Not retried.
    - StoreUnavailableError: transient database failure. Safe for the caller
      to retry with backoff; services never retry on their own.

Usage:
    from core.base.exceptions import NotFoundError, store_errors

    with store_errors():
        record.save()
"""

import logging
from contextlib import contextmanager

from django.core.exceptions import ValidationError
from django.db import IntegrityError, InterfaceError, OperationalError

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the service layer."""

    default_message = 'Request could not be completed'

    def __init__(self, message=None, field_errors=None):
        self.message = message or self.default_message
        self.field_errors = field_errors or {}
        super().__init__(self.message)

    def __str__(self):
        return self.message


class NotFoundError(DomainError):
    default_message = 'Record not found'


class ConflictError(DomainError):
    default_message = 'Record conflicts with existing data'


class StoreUnavailableError(DomainError):
    default_message = 'Record store is temporarily unavailable'


@contextmanager
def store_errors(conflict_message=None):
    """
    Translate database driver failures into the domain taxonomy.

    IntegrityError -> ConflictError
    OperationalError / InterfaceError -> StoreUnavailableError

    The enclosing atomic block is exited by the translated error, so the
    failed transaction or savepoint is rolled back.
    """
    try:
        yield
    except IntegrityError as e:
        raise ConflictError(conflict_message or str(e)) from e
    except (OperationalError, InterfaceError) as e:
        logger.error("Record store unavailable: %s", e)
        raise StoreUnavailableError() from e


__all__ = [
    'ValidationError',
    'DomainError',
    'NotFoundError',
    'ConflictError',
    'StoreUnavailableError',
    'store_errors',
]
