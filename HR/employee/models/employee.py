import re
from django.db import models
from django.conf import settings
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin, StatusChoices
from core.base.managers import BaseQuerySet


GENDER_CHOICES = [
    ('male', 'Male'),
    ('female', 'Female'),
    ('other', 'Other'),
]


class EmployeeQuerySet(BaseQuerySet):
    search_fields = ('first_name', 'last_name', 'employee_code')


class EmployeeManager(models.Manager.from_queryset(EmployeeQuerySet)):
    pass


def next_employee_code():
    """
    Next code in the EMP0001, EMP0002, ... sequence.

    Follows the highest numeric suffix among existing codes with the
    configured prefix. Uniqueness is ultimately enforced by the column
    constraint.
    """
    config = getattr(settings, 'HR_RECORDS', {})
    prefix = config.get('EMPLOYEE_CODE_PREFIX', 'EMP')
    digits = config.get('EMPLOYEE_CODE_DIGITS', 4)

    highest = 0
    for code in Employee.objects.filter(employee_code__startswith=prefix).values_list('employee_code', flat=True):
        match = re.search(r'(\d+)$', code)
        if match:
            highest = max(highest, int(match.group(1)))

    return f"{prefix}{highest + 1:0{digits}d}"


class Employee(AuditMixin, models.Model):
    """
    Employee master record.

    Every dependent record (job history, contacts, compensation, documents,
    work passes, qualifications, certifications, profiles) references this
    row by foreign key.

    employee_code is system-assigned on first save; any supplied value is
    replaced by the service layer.
    """

    MARITAL_STATUS_CHOICES = [
        ('single', 'Single'),
        ('married', 'Married'),
        ('divorced', 'Divorced'),
        ('widowed', 'Widowed'),
    ]

    employee_code = models.CharField(
        max_length=50,
        unique=True,
        blank=True,
        help_text="Globally unique employee identifier (auto-generated: EMP0001)"
    )

    # Identity
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, null=True, blank=True)
    last_name = models.CharField(max_length=100)
    display_name = models.CharField(max_length=100, null=True, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, null=True, blank=True)
    date_of_birth = models.DateField()
    marital_status = models.CharField(max_length=10, choices=MARITAL_STATUS_CHOICES, null=True, blank=True)
    nationality = models.CharField(max_length=100, null=True, blank=True)
    blood_group = models.CharField(max_length=10, null=True, blank=True)

    # Contact shortcuts
    work_email = models.EmailField(max_length=255, null=True, blank=True)
    personal_email = models.EmailField(max_length=255, null=True, blank=True)
    mobile_number = models.CharField(max_length=20, null=True, blank=True)
    work_number = models.CharField(max_length=20, null=True, blank=True)

    profile_photo_path = models.CharField(max_length=500, null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE
    )
    termination_date = models.DateField(null=True, blank=True)

    objects = EmployeeManager()

    class Meta:
        db_table = 'hr_employee'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='hr_emp_status_idx'),
            models.Index(fields=['last_name', 'first_name'], name='hr_emp_name_idx'),
        ]

    def __str__(self):
        return f"{self.employee_code} - {self.full_name}"

    @property
    def full_name(self):
        parts = [self.first_name, self.middle_name, self.last_name]
        return ' '.join(p for p in parts if p)

    def clean(self):
        super().clean()

        for field_name in ('work_email', 'personal_email'):
            value = getattr(self, field_name)
            if value:
                setattr(self, field_name, value.strip().lower())

        if self.status == StatusChoices.TERMINATED and not self.termination_date:
            raise ValidationError({'termination_date': 'Termination date is required for terminated employees'})

    def save(self, *args, **kwargs):
        """Auto-generate employee_code for new records"""
        if not self.pk and not self.employee_code:
            self.employee_code = next_employee_code()
        super().save(*args, **kwargs)
