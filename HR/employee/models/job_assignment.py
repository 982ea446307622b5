from datetime import timedelta
from django.db import models
from django.core.exceptions import ValidationError
from django.db.models import Q, UniqueConstraint
from dateutil.relativedelta import relativedelta
from core.base.models import CurrentRecordMixin, AuditMixin, StatusChoices
from core.base.managers import CurrentRecordQuerySet
from .employee import Employee


class JobAssignmentQuerySet(CurrentRecordQuerySet):
    search_fields = ('designation', 'department')


class JobAssignmentManager(models.Manager.from_queryset(JobAssignmentQuerySet)):
    pass


class JobAssignmentRecord(CurrentRecordMixin, AuditMixin, models.Model):
    """
    One period of an employee's role.

    Uses CurrentRecordMixin for the explicit current flag and effective
    period. At most one row per employee is current; the partial unique
    constraint below makes the store reject a second one.
    """
    TIME_TYPE_CHOICES = [
        ('full_time', 'Full Time'),
        ('contract', 'Contract'),
    ]

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='job_history',
        help_text="Employee this assignment belongs to"
    )

    designation = models.CharField(max_length=100)
    department = models.CharField(max_length=100)

    reporting_to = models.ForeignKey(
        Employee,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='direct_report_assignments',
        help_text="Manager for this assignment"
    )

    joining_date = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE
    )
    time_type = models.CharField(max_length=20, choices=TIME_TYPE_CHOICES, null=True, blank=True)
    location = models.CharField(max_length=200, null=True, blank=True)

    # Organizational attributes
    legal_entity = models.CharField(max_length=100, null=True, blank=True)
    business_unit = models.CharField(max_length=100, null=True, blank=True)
    worker_type = models.CharField(max_length=50, null=True, blank=True)
    probation_policy = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Probation duration, e.g. '2 Weeks' or '3 Months'"
    )
    notice_period = models.CharField(max_length=100, null=True, blank=True)

    secondary_job_titles = models.JSONField(default=list, blank=True)

    objects = JobAssignmentManager()

    class Meta:
        db_table = 'hr_job_assignment'
        verbose_name = 'Job Assignment Record'
        verbose_name_plural = 'Job Assignment Records'
        ordering = ['employee', 'effective_from']
        indexes = [
            models.Index(fields=['employee', 'is_current'], name='hr_job_emp_current_idx'),
            models.Index(fields=['designation'], name='hr_job_designation_idx'),
            models.Index(fields=['department'], name='hr_job_department_idx'),
            models.Index(fields=['reporting_to'], name='hr_job_reporting_to_idx'),
        ]
        constraints = [
            UniqueConstraint(
                fields=['employee'],
                condition=Q(is_current=True),
                name='job_assignment_one_current_per_employee'
            ),
        ]

    def __str__(self):
        return f"{self.employee_id}: {self.designation} ({self.effective_from})"

    @property
    def probation_end_date(self):
        """
        End of probation computed from probation_policy.

        Expected names: '2 Weeks', '1 Month', '3 Months', '6 Months'.
        Counted from joining_date, falling back to effective_from.
        """
        start = self.joining_date or self.effective_from
        if not start or not self.probation_policy:
            return None

        name = self.probation_policy.lower()
        try:
            amount = int(name.split()[0])
        except (ValueError, IndexError):
            return None

        if 'week' in name:
            return start + timedelta(weeks=amount)
        if 'month' in name:
            return start + relativedelta(months=amount)
        return None

    def clean(self):
        super().clean()

        if self.reporting_to_id and self.reporting_to_id == self.employee_id:
            raise ValidationError({'reporting_to': 'Employee cannot report to themselves'})

        if not isinstance(self.secondary_job_titles, list):
            raise ValidationError({'secondary_job_titles': 'Secondary job titles must be a list'})

        for title in self.secondary_job_titles:
            if not isinstance(title, str) or not title.strip():
                raise ValidationError({'secondary_job_titles': 'Secondary job titles must be non-empty strings'})
            if len(title.strip()) > 100:
                raise ValidationError({'secondary_job_titles': 'Secondary job title must be less than 100 characters'})
