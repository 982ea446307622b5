"""
Core Base Managers Module

Provides custom managers and querysets for base models.

**Architecture:**
- BaseQuerySet: Generic filtering (status/search)
- CurrentRecordQuerySet: For models with effective_from/effective_to/is_current

Exports:
    QuerySets:
        - BaseQuerySet: filter_by_search_params
        - CurrentRecordQuerySet: current(), active_on(), history_for()

    Managers:
        - CurrentRecordManager: For CurrentRecordMixin models

Usage:
    from core.base import CurrentRecordMixin
    from core.base.managers import CurrentRecordManager

    class JobAssignmentRecord(CurrentRecordMixin, models.Model):
        objects = CurrentRecordManager()

    JobAssignmentRecord.objects.current().filter(employee_id=5).first()
"""

from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Subclasses list the columns a free-text search should hit in
    `search_fields`.
    """

    search_fields = ()

    def filter_by_search_params(self, query_params):
        """
        Apply standard status/search filters from query parameters.

        Args:
            query_params: QueryDict or dict with optional keys:
                - status: Exact match
                - search: Contains match across search_fields

        Returns:
            Filtered QuerySet
        """
        queryset = self

        status = query_params.get('status')
        if status:
            queryset = queryset.filter(status=status)

        search = query_params.get('search')
        if search and self.search_fields:
            condition = Q()
            for field_name in self.search_fields:
                condition |= Q(**{f'{field_name}__icontains': search})
            queryset = queryset.filter(condition)

        return queryset


class CurrentRecordQuerySet(BaseQuerySet):
    """
    QuerySet for CurrentRecordMixin models.

    Methods:
        - current(): Rows flagged is_current=True
        - active_on(date): Rows authoritative on a specific date
        - history_for(**owner): All rows of one owner, oldest first
    """

    def current(self):
        """Return only current records."""
        return self.filter(is_current=True)

    def active_on(self, reference_date):
        """
        Return records authoritative on a specific date.

        effective_to is inclusive.
        """
        return self.filter(
            effective_from__lte=reference_date
        ).filter(
            Q(effective_to__isnull=True) |
            Q(effective_to__gte=reference_date)
        )

    def history_for(self, **owner_filter):
        """
        Return every record of one owner ordered by effective_from.

        Example:
            JobAssignmentRecord.objects.history_for(employee_id=5)
        """
        return self.filter(**owner_filter).order_by('effective_from', 'created_at', 'pk')


class CurrentRecordManager(models.Manager.from_queryset(CurrentRecordQuerySet)):
    """
    Manager for CurrentRecordMixin models.

    Usage:
        JobAssignmentRecord.objects.current()
        JobAssignmentRecord.objects.active_on(date.today())
    """
    pass
