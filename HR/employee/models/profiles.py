"""
Satellite profiles: 1:1 extensions of Employee.

Each profile is unique per employee, independently timestamped and carries
only field-level constraints. No cross-record rules live here.
"""

from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxLengthValidator
from core.base.models import AuditMixin
from .employee import Employee, GENDER_CHOICES
from .qualification import validate_completion_year


class EmployeeProfile(AuditMixin, models.Model):
    """Base for 1:1 profiles. Subclasses name their reverse accessor."""

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self._meta.verbose_name} of {self.employee_id}"


class EmployeeAddress(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='address_profile')
    home_town = models.CharField(max_length=100, null=True, blank=True)
    current_city = models.CharField(max_length=100, null=True, blank=True)
    current_state = models.CharField(max_length=100, null=True, blank=True)
    current_pincode = models.CharField(max_length=20, null=True, blank=True)
    permanent_city = models.CharField(max_length=100, null=True, blank=True)
    permanent_state = models.CharField(max_length=100, null=True, blank=True)
    permanent_pincode = models.CharField(max_length=20, null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_address'


class EmployeeEducation(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='education_profile')

    # Post-graduation
    pg_degree = models.CharField(max_length=255, null=True, blank=True)
    pg_specialization = models.CharField(max_length=255, null=True, blank=True)
    pg_grade = models.CharField(max_length=50, null=True, blank=True)
    pg_university = models.CharField(max_length=255, null=True, blank=True)
    pg_completion_year = models.PositiveIntegerField(null=True, blank=True, validators=[validate_completion_year])

    # Graduation
    graduation_degree = models.CharField(max_length=255, null=True, blank=True)
    graduation_specialization = models.CharField(max_length=255, null=True, blank=True)
    graduation_grade = models.CharField(max_length=50, null=True, blank=True)
    graduation_college = models.CharField(max_length=255, null=True, blank=True)
    graduation_completion_year = models.PositiveIntegerField(null=True, blank=True, validators=[validate_completion_year])

    # Intermediate / 12th
    inter_grade = models.CharField(max_length=50, null=True, blank=True)
    inter_school = models.CharField(max_length=255, null=True, blank=True)
    inter_completion_year = models.PositiveIntegerField(null=True, blank=True, validators=[validate_completion_year])

    class Meta:
        db_table = 'hr_employee_education'


class EmployeeExperience(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='experience_profile')
    total_experience = models.DecimalField(
        max_digits=5, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(0)],
        help_text="Years"
    )
    relevant_experience = models.DecimalField(
        max_digits=5, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(0)],
        help_text="Years"
    )

    organization1_name = models.CharField(max_length=255, null=True, blank=True)
    organization1_start_date = models.DateField(null=True, blank=True)
    organization1_end_date = models.DateField(null=True, blank=True)
    organization1_designation = models.CharField(max_length=255, null=True, blank=True)
    organization1_reason_for_leaving = models.CharField(max_length=500, null=True, blank=True)

    organization2_name = models.CharField(max_length=255, null=True, blank=True)
    organization2_start_date = models.DateField(null=True, blank=True)
    organization2_end_date = models.DateField(null=True, blank=True)
    organization2_designation = models.CharField(max_length=255, null=True, blank=True)
    organization2_reason_for_leaving = models.CharField(max_length=500, null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_experience'

    def clean(self):
        super().clean()
        for prefix in ('organization1', 'organization2'):
            start = getattr(self, f'{prefix}_start_date')
            end = getattr(self, f'{prefix}_end_date')
            if start and end and end < start:
                raise ValidationError({f'{prefix}_end_date': 'End date must not be before start date'})


class EmployeeFamily(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='family_profile')
    father_dob = models.DateField(null=True, blank=True)
    mother_dob = models.DateField(null=True, blank=True)
    spouse_gender = models.CharField(max_length=10, choices=GENDER_CHOICES, null=True, blank=True)
    spouse_dob = models.DateField(null=True, blank=True)
    kid1_name = models.CharField(max_length=100, null=True, blank=True)
    kid1_gender = models.CharField(max_length=10, choices=GENDER_CHOICES, null=True, blank=True)
    kid1_dob = models.DateField(null=True, blank=True)
    kid2_name = models.CharField(max_length=100, null=True, blank=True)
    kid2_gender = models.CharField(max_length=10, choices=GENDER_CHOICES, null=True, blank=True)
    kid2_dob = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_family'
        verbose_name_plural = 'employee families'


class EmployeeIdentity(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='identity_profile')
    aadhar_number = models.CharField(max_length=20, null=True, blank=True)
    pan_number = models.CharField(max_length=20, null=True, blank=True)
    uan_number = models.CharField(max_length=20, null=True, blank=True)
    driving_license_number = models.CharField(max_length=50, null=True, blank=True)
    passport_name = models.CharField(max_length=100, null=True, blank=True)
    passport_number = models.CharField(max_length=50, null=True, blank=True)
    passport_valid_upto = models.DateField(null=True, blank=True)
    visa_type = models.CharField(max_length=100, null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_identity'
        verbose_name_plural = 'employee identities'


class EmployeeSkills(EmployeeProfile):
    employee = models.OneToOneField(Employee, on_delete=models.CASCADE, related_name='skills_profile')
    professional_summary = models.TextField(null=True, blank=True, validators=[MaxLengthValidator(2000)])
    languages_read = models.JSONField(default=list, blank=True)
    languages_write = models.JSONField(default=list, blank=True)
    languages_speak = models.JSONField(default=list, blank=True)
    special_academic_achievements = models.TextField(null=True, blank=True, validators=[MaxLengthValidator(1000)])
    certifications_details = models.TextField(null=True, blank=True, validators=[MaxLengthValidator(1000)])
    hobbies = models.CharField(max_length=500, null=True, blank=True)
    interests = models.CharField(max_length=500, null=True, blank=True)
    professional_institution_member = models.BooleanField(default=False)
    professional_institution_details = models.CharField(max_length=500, null=True, blank=True)
    social_organization_member = models.BooleanField(default=False)
    social_organization_details = models.CharField(max_length=500, null=True, blank=True)

    class Meta:
        db_table = 'hr_employee_skills'
        verbose_name_plural = 'employee skills'

    def clean(self):
        super().clean()
        for field_name in ('languages_read', 'languages_write', 'languages_speak'):
            value = getattr(self, field_name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValidationError({field_name: 'Must be a list of language names'})
