from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from .employee import Employee
from .document import EmployeeDocument


class EmployeeCertification(AuditMixin, models.Model):
    """Professional certification held by an employee."""
    CERTIFICATION_TYPE_CHOICES = [
        ('new', 'New'),
        ('renewal', 'Renewal'),
    ]

    OWNERSHIP_CHOICES = [
        ('company', 'Company'),
        ('employee', 'Employee'),
    ]

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='certifications'
    )
    certification_name = models.CharField(max_length=255)
    certification_type = models.CharField(max_length=20, choices=CERTIFICATION_TYPE_CHOICES, default='new')
    issue_date = models.DateField()
    expiry_date = models.DateField(null=True, blank=True)
    ownership = models.CharField(max_length=20, choices=OWNERSHIP_CHOICES, default='employee')
    document = models.ForeignKey(
        EmployeeDocument,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='certifications'
    )
    is_active = models.BooleanField(default=True)
    reminder_sent = models.BooleanField(default=False)

    class Meta:
        db_table = 'hr_employee_certification'
        ordering = ['employee', '-issue_date']
        indexes = [
            models.Index(fields=['employee', 'is_active'], name='hr_cert_emp_active_idx'),
            models.Index(fields=['expiry_date'], name='hr_cert_expiry_idx'),
        ]

    def __str__(self):
        return self.certification_name

    def clean(self):
        super().clean()
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            raise ValidationError({'expiry_date': 'Expiry date must not be before issue date'})
