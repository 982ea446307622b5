"""
Core Base Module

Provides shared base classes, mixins, and utilities for all HR modules.

**Architecture:**
Each feature is a separate mixin that can be composed together.

Exports:
    Basic Utilities:
        - StatusChoices: Standard ACTIVE/INACTIVE/TERMINATED status choices

    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at, created_by, updated_by
        - CurrentRecordMixin: Adds effective_from, effective_to, is_current

    Managers & QuerySets:
        - BaseQuerySet: Base queryset with filter_by_search_params
        - CurrentRecordQuerySet: QuerySet with current()/active_on()/history_for()
        - CurrentRecordManager: Manager for CurrentRecordMixin models

    Errors:
        - NotFoundError, ConflictError, StoreUnavailableError, store_errors

Usage Examples:

    from core.base import AuditMixin, CurrentRecordMixin
    from core.base.managers import CurrentRecordManager

    class EmployeeCompensation(CurrentRecordMixin, AuditMixin, models.Model):
        basic_salary = models.DecimalField(max_digits=12, decimal_places=2)
        objects = CurrentRecordManager()
"""

# Import from local modules
from core.base.models import (
    StatusChoices,
    AuditMixin,
    CurrentRecordMixin,
)

from core.base.managers import (
    BaseQuerySet,
    CurrentRecordQuerySet,
    CurrentRecordManager,
)

from core.base.exceptions import (
    NotFoundError,
    ConflictError,
    StoreUnavailableError,
    store_errors,
)

__all__ = [
    # Basic Utilities
    'StatusChoices',

    # Individual Feature Mixins
    'AuditMixin',
    'CurrentRecordMixin',

    # Managers & QuerySets
    'BaseQuerySet',
    'CurrentRecordQuerySet',
    'CurrentRecordManager',

    # Errors
    'NotFoundError',
    'ConflictError',
    'StoreUnavailableError',
    'store_errors',
]
