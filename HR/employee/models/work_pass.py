from django.db import models
from django.core.exceptions import ValidationError
from django.db.models import Q, UniqueConstraint
from core.base.models import AuditMixin
from .employee import Employee


class EmployeeWorkPass(AuditMixin, models.Model):
    """
    Work permit held by an employee.

    work_permit_number and fin_number are optional but unique when present.
    """
    STATUS_CHOICES = [
        ('new', 'New'),
        ('renewal', 'Renewal'),
        ('cancelled', 'Cancelled'),
    ]

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='work_passes'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES)
    work_permit_number = models.CharField(max_length=50, null=True, blank=True)
    fin_number = models.CharField(max_length=50, null=True, blank=True)
    application_date = models.DateField(null=True, blank=True)
    issuance_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    medical_date = models.DateField(null=True, blank=True)
    is_current = models.BooleanField(default=True)

    class Meta:
        db_table = 'hr_employee_work_pass'
        ordering = ['employee', '-created_at']
        indexes = [
            models.Index(fields=['employee', 'is_current'], name='hr_pass_emp_current_idx'),
            models.Index(fields=['expiry_date'], name='hr_pass_expiry_idx'),
        ]
        constraints = [
            UniqueConstraint(
                fields=['work_permit_number'],
                condition=Q(work_permit_number__isnull=False),
                name='work_pass_unique_permit_number'
            ),
            UniqueConstraint(
                fields=['fin_number'],
                condition=Q(fin_number__isnull=False),
                name='work_pass_unique_fin_number'
            ),
        ]

    def __str__(self):
        return f"{self.employee_id} - {self.work_permit_number or self.fin_number or self.status}"

    def clean(self):
        super().clean()
        if self.issuance_date and self.expiry_date and self.expiry_date < self.issuance_date:
            raise ValidationError({'expiry_date': 'Expiry date must not be before issuance date'})
