from datetime import date
from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from .employee import Employee
from .document import EmployeeDocument


def validate_completion_year(value):
    """Completion years run from 1900 to ten years ahead of today."""
    if value is None:
        return
    if value < 1900:
        raise ValidationError('Completion year must be after 1900')
    if value > date.today().year + 10:
        raise ValidationError('Completion year must be realistic')


class EmployeeQualification(AuditMixin, models.Model):
    """Academic qualification of an employee."""
    VERIFICATION_STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('verified', 'Verified'),
        ('rejected', 'Rejected'),
    ]

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='qualifications'
    )
    degree = models.CharField(max_length=255)
    major = models.CharField(max_length=255, null=True, blank=True)
    institution = models.CharField(max_length=255)
    completion_year = models.PositiveIntegerField(validators=[validate_completion_year])
    document = models.ForeignKey(
        EmployeeDocument,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='qualifications'
    )
    verification_status = models.CharField(
        max_length=20,
        choices=VERIFICATION_STATUS_CHOICES,
        default='pending'
    )

    class Meta:
        db_table = 'hr_employee_qualification'
        ordering = ['employee', '-completion_year']
        indexes = [
            models.Index(fields=['employee'], name='hr_qual_emp_idx'),
            models.Index(fields=['verification_status'], name='hr_qual_verification_idx'),
        ]

    def __str__(self):
        return f"{self.degree} - {self.institution}"
