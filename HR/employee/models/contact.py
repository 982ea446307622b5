from datetime import date
from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from .employee import Employee


class EmployeeContact(AuditMixin, models.Model):
    """
    Contact details of an employee valid over a period.

    Fields:
    - contact_type: primary, secondary, emergency, work, personal, emergency_contact
    - phone / alternate_phone / email
    - address_line1/2, city, postal_code, country
    - is_current, valid_from, valid_to
    """
    CONTACT_TYPE_CHOICES = [
        ('primary', 'Primary'),
        ('secondary', 'Secondary'),
        ('emergency', 'Emergency'),
        ('work', 'Work'),
        ('personal', 'Personal'),
        ('emergency_contact', 'Emergency Contact'),
    ]

    CONTACT_FIELDS = (
        'phone', 'alternate_phone', 'email', 'address_line1', 'address_line2',
        'city', 'postal_code', 'country', 'emergency_contact_name',
        'emergency_contact_number',
    )

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='contacts'
    )
    contact_type = models.CharField(max_length=20, choices=CONTACT_TYPE_CHOICES)

    phone = models.CharField(max_length=20, null=True, blank=True)
    alternate_phone = models.CharField(max_length=20, null=True, blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True)
    emergency_contact_name = models.CharField(max_length=100, null=True, blank=True)
    emergency_contact_number = models.CharField(max_length=20, null=True, blank=True)

    address_line1 = models.CharField(max_length=255, null=True, blank=True)
    address_line2 = models.CharField(max_length=255, null=True, blank=True)
    city = models.CharField(max_length=100, null=True, blank=True)
    postal_code = models.CharField(max_length=20, null=True, blank=True)
    country = models.CharField(max_length=100, null=True, blank=True)

    is_current = models.BooleanField(default=True)
    valid_from = models.DateField(default=date.today)
    valid_to = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_contact'
        ordering = ['employee', '-valid_from']
        indexes = [
            models.Index(fields=['employee', 'is_current'], name='hr_contact_emp_current_idx'),
        ]

    def __str__(self):
        return f"{self.employee_id} - {self.contact_type}"

    def clean(self):
        super().clean()
        if self.valid_to and self.valid_from and self.valid_to < self.valid_from:
            raise ValidationError({'valid_to': 'Valid to date must not be before valid from date'})
        if self.email:
            self.email = self.email.strip().lower()
