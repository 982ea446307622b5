from django.db import models
from django.core.exceptions import ValidationError
from django.utils import timezone
from core.base.models import AuditMixin
from .employee import Employee


class EmployeeDocument(AuditMixin, models.Model):
    """
    Reference to a stored employee document.

    file_path is an opaque reference produced by the upload service; this
    model never touches file contents.
    """
    DOCUMENT_TYPE_CHOICES = [
        ('passport', 'Passport'),
        ('certificate', 'Certificate'),
        ('work_pass', 'Work Pass'),
        ('qualification', 'Qualification'),
        ('other', 'Other'),
    ]

    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='documents'
    )
    document_type = models.CharField(max_length=20, choices=DOCUMENT_TYPE_CHOICES, default='other')
    document_name = models.CharField(max_length=255)
    file_path = models.CharField(max_length=500)
    issue_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    uploaded_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'hr_employee_document'
        ordering = ['employee', '-uploaded_at']
        indexes = [
            models.Index(fields=['employee', 'document_type'], name='hr_doc_emp_type_idx'),
            models.Index(fields=['expiry_date'], name='hr_doc_expiry_idx'),
        ]

    def __str__(self):
        return f"{self.document_name} ({self.document_type})"

    def clean(self):
        super().clean()
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            raise ValidationError({'expiry_date': 'Expiry date must not be before issue date'})
