from datetime import date, timedelta
from django.db import models
from django.core.exceptions import ValidationError
from django.conf import settings


class StatusChoices(models.TextChoices):
    """
    Standard lifecycle status for employees and job assignments.

    Use this instead of defining custom status choices in each model.
    """
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'
    TERMINATED = 'terminated', 'Terminated'


class AuditMixin(models.Model):
    """
    Adds audit fields to track creation and modification metadata.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified
        - created_by: User who created the record (optional)
        - updated_by: User who last modified the record (optional)

    Usage:
        class MyModel(AuditMixin):
            name = models.CharField(max_length=100)

    Note: created_by and updated_by are set by the service layer.
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_created',
        help_text="User who created this record"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_updated',
        help_text="User who last updated this record"
    )

    class Meta:
        abstract = True


class CurrentRecordMixin(models.Model):
    """
    Mixin for per-employee histories where exactly one row is "current".

    Unlike a pure date-computed status, the current row is flagged
    explicitly so the store can index (and uniquely constrain) it.

    Fields:
        - effective_from: First day this record is authoritative
        - effective_to: Last day this record was authoritative (inclusive).
          NULL = open-ended
        - is_current: Whether this is the owner's present record

    Invariants (checked in clean()):
        - effective_to >= effective_from
        - is_current implies effective_to is NULL

    Methods:
        - active_on(reference_date): Check if authoritative on a date
        - close(end_date, **extra): Conditionally end-date a current record
        - closing_date_for(next_start): Day-before boundary for a successor

    Usage:
        class Compensation(CurrentRecordMixin, models.Model):
            employee = models.ForeignKey(Employee, ...)
            objects = CurrentRecordManager()
    """
    effective_from = models.DateField(
        help_text="Date this record becomes authoritative"
    )
    effective_to = models.DateField(
        null=True,
        blank=True,
        help_text="Last day this record is authoritative. NULL = open-ended"
    )
    is_current = models.BooleanField(
        default=True,
        help_text="Whether this is the current record for its owner"
    )

    class Meta:
        abstract = True
        ordering = ['effective_from']

    def active_on(self, reference_date):
        """
        Check if this record is authoritative on a specific date.

        Args:
            reference_date: Date to check against

        Returns:
            bool: True if active on that date, False otherwise
        """
        if self.effective_from > reference_date:
            return False

        # effective_to is inclusive
        if self.effective_to and self.effective_to < reference_date:
            return False

        return True

    @staticmethod
    def closing_date_for(next_start):
        """The closed record ends the day before its successor starts."""
        return next_start - timedelta(days=1)

    def close(self, end_date=None, **extra):
        """
        End-date this record only if it is still current.

        Issues a single-row compare-and-update so two callers racing to
        close the same record cannot both succeed.

        Args:
            end_date: Last day of the period. Defaults to yesterday and is
                      never earlier than effective_from.
            **extra: Additional columns to write in the same update
                     (e.g. updated_by).

        Returns:
            bool: True if this call closed the record, False if it was
                  already closed by someone else.
        """
        if end_date is None:
            end_date = date.today() - timedelta(days=1)

        # Prevent start > end error
        if end_date < self.effective_from:
            end_date = self.effective_from

        updated = type(self).objects.filter(pk=self.pk, is_current=True).update(
            is_current=False,
            effective_to=end_date,
            **extra
        )
        if updated:
            self.is_current = False
            self.effective_to = end_date
            for field_name, value in extra.items():
                setattr(self, field_name, value)
        return bool(updated)

    def clean(self):
        """Validate date ranges and the open-period rule."""
        super().clean()

        if self.effective_to and self.effective_from and self.effective_from > self.effective_to:
            raise ValidationError({
                'effective_to': 'Effective to date must not be before effective from date'
            })

        if self.is_current and self.effective_to is not None:
            raise ValidationError({
                'effective_to': 'A current record must be open-ended'
            })
