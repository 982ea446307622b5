from django.db import models
from django.core.exceptions import ValidationError
from django.conf import settings
from core.base.models import CurrentRecordMixin, AuditMixin
from core.base.managers import CurrentRecordManager
from .employee import Employee


class EmployeeCompensation(CurrentRecordMixin, AuditMixin, models.Model):
    """
    Salary record for an employee.

    Shares the current-record shape of job history: a new current
    compensation closes the previous one.
    """
    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='compensations'
    )
    basic_salary = models.DecimalField(max_digits=12, decimal_places=2)
    ot_hourly_rate = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='approved_compensations'
    )
    approved_at = models.DateTimeField(null=True, blank=True)

    objects = CurrentRecordManager()

    class Meta:
        db_table = 'hr_employee_compensation'
        ordering = ['employee', 'effective_from']
        indexes = [
            models.Index(fields=['employee', 'is_current'], name='hr_comp_emp_current_idx'),
        ]

    def __str__(self):
        return f"{self.employee_id}: {self.basic_salary} from {self.effective_from}"

    def clean(self):
        super().clean()
        if self.basic_salary is not None and self.basic_salary < 0:
            raise ValidationError({'basic_salary': 'Basic salary must be positive'})
        if self.ot_hourly_rate is not None and self.ot_hourly_rate < 0:
            raise ValidationError({'ot_hourly_rate': 'OT hourly rate must be positive'})
