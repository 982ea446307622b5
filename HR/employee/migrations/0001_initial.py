import datetime

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import HR.employee.models.qualification


def audit_fields():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
        ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
    ]


def audit_user_fields(model_name):
    return [
        migrations.AddField(
            model_name=model_name,
            name='created_by',
            field=models.ForeignKey(
                blank=True, null=True, help_text='User who created this record',
                on_delete=django.db.models.deletion.SET_NULL,
                related_name='%(app_label)s_%(class)s_created',
                to=settings.AUTH_USER_MODEL,
            ),
        ),
        migrations.AddField(
            model_name=model_name,
            name='updated_by',
            field=models.ForeignKey(
                blank=True, null=True, help_text='User who last updated this record',
                on_delete=django.db.models.deletion.SET_NULL,
                related_name='%(app_label)s_%(class)s_updated',
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def current_record_fields():
    return [
        ('effective_from', models.DateField(help_text='Date this record becomes authoritative')),
        ('effective_to', models.DateField(blank=True, null=True, help_text='Last day this record is authoritative. NULL = open-ended')),
        ('is_current', models.BooleanField(default=True, help_text='Whether this is the current record for its owner')),
    ]


def employee_link(related_name):
    return models.OneToOneField(
        on_delete=django.db.models.deletion.CASCADE,
        related_name=related_name,
        to='employee.employee',
    )


GENDER_CHOICES = [('male', 'Male'), ('female', 'Female'), ('other', 'Other')]
STATUS_CHOICES = [('active', 'Active'), ('inactive', 'Inactive'), ('terminated', 'Terminated')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Employee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('employee_code', models.CharField(blank=True, help_text='Globally unique employee identifier (auto-generated: EMP0001)', max_length=50, unique=True)),
                ('first_name', models.CharField(max_length=100)),
                ('middle_name', models.CharField(blank=True, max_length=100, null=True)),
                ('last_name', models.CharField(max_length=100)),
                ('display_name', models.CharField(blank=True, max_length=100, null=True)),
                ('gender', models.CharField(blank=True, choices=GENDER_CHOICES, max_length=10, null=True)),
                ('date_of_birth', models.DateField()),
                ('marital_status', models.CharField(blank=True, choices=[('single', 'Single'), ('married', 'Married'), ('divorced', 'Divorced'), ('widowed', 'Widowed')], max_length=10, null=True)),
                ('nationality', models.CharField(blank=True, max_length=100, null=True)),
                ('blood_group', models.CharField(blank=True, max_length=10, null=True)),
                ('work_email', models.EmailField(blank=True, max_length=255, null=True)),
                ('personal_email', models.EmailField(blank=True, max_length=255, null=True)),
                ('mobile_number', models.CharField(blank=True, max_length=20, null=True)),
                ('work_number', models.CharField(blank=True, max_length=20, null=True)),
                ('profile_photo_path', models.CharField(blank=True, max_length=500, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, default='active', max_length=20)),
                ('termination_date', models.DateField(blank=True, null=True)),
            ],
            options={
                'db_table': 'hr_employee',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='hr_emp_status_idx'),
                    models.Index(fields=['last_name', 'first_name'], name='hr_emp_name_idx'),
                ],
            },
        ),
        *audit_user_fields('employee'),

        migrations.CreateModel(
            name='JobAssignmentRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *current_record_fields(),
                *audit_fields(),
                ('designation', models.CharField(max_length=100)),
                ('department', models.CharField(max_length=100)),
                ('joining_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, default='active', max_length=20)),
                ('time_type', models.CharField(blank=True, choices=[('full_time', 'Full Time'), ('contract', 'Contract')], max_length=20, null=True)),
                ('location', models.CharField(blank=True, max_length=200, null=True)),
                ('legal_entity', models.CharField(blank=True, max_length=100, null=True)),
                ('business_unit', models.CharField(blank=True, max_length=100, null=True)),
                ('worker_type', models.CharField(blank=True, max_length=50, null=True)),
                ('probation_policy', models.CharField(blank=True, help_text="Probation duration, e.g. '2 Weeks' or '3 Months'", max_length=100, null=True)),
                ('notice_period', models.CharField(blank=True, max_length=100, null=True)),
                ('secondary_job_titles', models.JSONField(blank=True, default=list)),
                ('employee', models.ForeignKey(help_text='Employee this assignment belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='job_history', to='employee.employee')),
                ('reporting_to', models.ForeignKey(blank=True, help_text='Manager for this assignment', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='direct_report_assignments', to='employee.employee')),
            ],
            options={
                'verbose_name': 'Job Assignment Record',
                'verbose_name_plural': 'Job Assignment Records',
                'db_table': 'hr_job_assignment',
                'ordering': ['employee', 'effective_from'],
                'indexes': [
                    models.Index(fields=['employee', 'is_current'], name='hr_job_emp_current_idx'),
                    models.Index(fields=['designation'], name='hr_job_designation_idx'),
                    models.Index(fields=['department'], name='hr_job_department_idx'),
                    models.Index(fields=['reporting_to'], name='hr_job_reporting_to_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('is_current', True)), fields=('employee',), name='job_assignment_one_current_per_employee'),
                ],
            },
        ),
        *audit_user_fields('jobassignmentrecord'),

        migrations.CreateModel(
            name='EmployeeContact',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('contact_type', models.CharField(choices=[('primary', 'Primary'), ('secondary', 'Secondary'), ('emergency', 'Emergency'), ('work', 'Work'), ('personal', 'Personal'), ('emergency_contact', 'Emergency Contact')], max_length=20)),
                ('phone', models.CharField(blank=True, max_length=20, null=True)),
                ('alternate_phone', models.CharField(blank=True, max_length=20, null=True)),
                ('email', models.EmailField(blank=True, max_length=255, null=True)),
                ('emergency_contact_name', models.CharField(blank=True, max_length=100, null=True)),
                ('emergency_contact_number', models.CharField(blank=True, max_length=20, null=True)),
                ('address_line1', models.CharField(blank=True, max_length=255, null=True)),
                ('address_line2', models.CharField(blank=True, max_length=255, null=True)),
                ('city', models.CharField(blank=True, max_length=100, null=True)),
                ('postal_code', models.CharField(blank=True, max_length=20, null=True)),
                ('country', models.CharField(blank=True, max_length=100, null=True)),
                ('is_current', models.BooleanField(default=True)),
                ('valid_from', models.DateField(default=datetime.date.today)),
                ('valid_to', models.DateField(blank=True, null=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contacts', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_contact',
                'ordering': ['employee', '-valid_from'],
                'indexes': [
                    models.Index(fields=['employee', 'is_current'], name='hr_contact_emp_current_idx'),
                ],
            },
        ),
        *audit_user_fields('employeecontact'),

        migrations.CreateModel(
            name='EmployeeCompensation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *current_record_fields(),
                *audit_fields(),
                ('basic_salary', models.DecimalField(decimal_places=2, max_digits=12)),
                ('ot_hourly_rate', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='approved_compensations', to=settings.AUTH_USER_MODEL)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='compensations', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_compensation',
                'ordering': ['employee', 'effective_from'],
                'indexes': [
                    models.Index(fields=['employee', 'is_current'], name='hr_comp_emp_current_idx'),
                ],
            },
        ),
        *audit_user_fields('employeecompensation'),

        migrations.CreateModel(
            name='EmployeeDocument',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('document_type', models.CharField(choices=[('passport', 'Passport'), ('certificate', 'Certificate'), ('work_pass', 'Work Pass'), ('qualification', 'Qualification'), ('other', 'Other')], default='other', max_length=20)),
                ('document_name', models.CharField(max_length=255)),
                ('file_path', models.CharField(max_length=500)),
                ('issue_date', models.DateField(blank=True, null=True)),
                ('expiry_date', models.DateField(blank=True, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('uploaded_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_document',
                'ordering': ['employee', '-uploaded_at'],
                'indexes': [
                    models.Index(fields=['employee', 'document_type'], name='hr_doc_emp_type_idx'),
                    models.Index(fields=['expiry_date'], name='hr_doc_expiry_idx'),
                ],
            },
        ),
        *audit_user_fields('employeedocument'),

        migrations.CreateModel(
            name='EmployeeWorkPass',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('status', models.CharField(choices=[('new', 'New'), ('renewal', 'Renewal'), ('cancelled', 'Cancelled')], max_length=20)),
                ('work_permit_number', models.CharField(blank=True, max_length=50, null=True)),
                ('fin_number', models.CharField(blank=True, max_length=50, null=True)),
                ('application_date', models.DateField(blank=True, null=True)),
                ('issuance_date', models.DateField(blank=True, null=True)),
                ('expiry_date', models.DateField(blank=True, null=True)),
                ('medical_date', models.DateField(blank=True, null=True)),
                ('is_current', models.BooleanField(default=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='work_passes', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_work_pass',
                'ordering': ['employee', '-created_at'],
                'indexes': [
                    models.Index(fields=['employee', 'is_current'], name='hr_pass_emp_current_idx'),
                    models.Index(fields=['expiry_date'], name='hr_pass_expiry_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('work_permit_number__isnull', False)), fields=('work_permit_number',), name='work_pass_unique_permit_number'),
                    models.UniqueConstraint(condition=models.Q(('fin_number__isnull', False)), fields=('fin_number',), name='work_pass_unique_fin_number'),
                ],
            },
        ),
        *audit_user_fields('employeeworkpass'),

        migrations.CreateModel(
            name='EmployeeQualification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('degree', models.CharField(max_length=255)),
                ('major', models.CharField(blank=True, max_length=255, null=True)),
                ('institution', models.CharField(max_length=255)),
                ('completion_year', models.PositiveIntegerField(validators=[HR.employee.models.qualification.validate_completion_year])),
                ('verification_status', models.CharField(choices=[('pending', 'Pending'), ('verified', 'Verified'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('document', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='qualifications', to='employee.employeedocument')),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='qualifications', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_qualification',
                'ordering': ['employee', '-completion_year'],
                'indexes': [
                    models.Index(fields=['employee'], name='hr_qual_emp_idx'),
                    models.Index(fields=['verification_status'], name='hr_qual_verification_idx'),
                ],
            },
        ),
        *audit_user_fields('employeequalification'),

        migrations.CreateModel(
            name='EmployeeCertification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('certification_name', models.CharField(max_length=255)),
                ('certification_type', models.CharField(choices=[('new', 'New'), ('renewal', 'Renewal')], default='new', max_length=20)),
                ('issue_date', models.DateField()),
                ('expiry_date', models.DateField(blank=True, null=True)),
                ('ownership', models.CharField(choices=[('company', 'Company'), ('employee', 'Employee')], default='employee', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('reminder_sent', models.BooleanField(default=False)),
                ('document', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='certifications', to='employee.employeedocument')),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='certifications', to='employee.employee')),
            ],
            options={
                'db_table': 'hr_employee_certification',
                'ordering': ['employee', '-issue_date'],
                'indexes': [
                    models.Index(fields=['employee', 'is_active'], name='hr_cert_emp_active_idx'),
                    models.Index(fields=['expiry_date'], name='hr_cert_expiry_idx'),
                ],
            },
        ),
        *audit_user_fields('employeecertification'),

        # 1:1 profiles
        migrations.CreateModel(
            name='EmployeeAddress',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('home_town', models.CharField(blank=True, max_length=100, null=True)),
                ('current_city', models.CharField(blank=True, max_length=100, null=True)),
                ('current_state', models.CharField(blank=True, max_length=100, null=True)),
                ('current_pincode', models.CharField(blank=True, max_length=20, null=True)),
                ('permanent_city', models.CharField(blank=True, max_length=100, null=True)),
                ('permanent_state', models.CharField(blank=True, max_length=100, null=True)),
                ('permanent_pincode', models.CharField(blank=True, max_length=20, null=True)),
                ('employee', employee_link('address_profile')),
            ],
            options={
                'db_table': 'hr_employee_address',
            },
        ),
        *audit_user_fields('employeeaddress'),

        migrations.CreateModel(
            name='EmployeeEducation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('pg_degree', models.CharField(blank=True, max_length=255, null=True)),
                ('pg_specialization', models.CharField(blank=True, max_length=255, null=True)),
                ('pg_grade', models.CharField(blank=True, max_length=50, null=True)),
                ('pg_university', models.CharField(blank=True, max_length=255, null=True)),
                ('pg_completion_year', models.PositiveIntegerField(blank=True, null=True, validators=[HR.employee.models.qualification.validate_completion_year])),
                ('graduation_degree', models.CharField(blank=True, max_length=255, null=True)),
                ('graduation_specialization', models.CharField(blank=True, max_length=255, null=True)),
                ('graduation_grade', models.CharField(blank=True, max_length=50, null=True)),
                ('graduation_college', models.CharField(blank=True, max_length=255, null=True)),
                ('graduation_completion_year', models.PositiveIntegerField(blank=True, null=True, validators=[HR.employee.models.qualification.validate_completion_year])),
                ('inter_grade', models.CharField(blank=True, max_length=50, null=True)),
                ('inter_school', models.CharField(blank=True, max_length=255, null=True)),
                ('inter_completion_year', models.PositiveIntegerField(blank=True, null=True, validators=[HR.employee.models.qualification.validate_completion_year])),
                ('employee', employee_link('education_profile')),
            ],
            options={
                'db_table': 'hr_employee_education',
            },
        ),
        *audit_user_fields('employeeeducation'),

        migrations.CreateModel(
            name='EmployeeExperience',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('total_experience', models.DecimalField(blank=True, decimal_places=1, help_text='Years', max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('relevant_experience', models.DecimalField(blank=True, decimal_places=1, help_text='Years', max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('organization1_name', models.CharField(blank=True, max_length=255, null=True)),
                ('organization1_start_date', models.DateField(blank=True, null=True)),
                ('organization1_end_date', models.DateField(blank=True, null=True)),
                ('organization1_designation', models.CharField(blank=True, max_length=255, null=True)),
                ('organization1_reason_for_leaving', models.CharField(blank=True, max_length=500, null=True)),
                ('organization2_name', models.CharField(blank=True, max_length=255, null=True)),
                ('organization2_start_date', models.DateField(blank=True, null=True)),
                ('organization2_end_date', models.DateField(blank=True, null=True)),
                ('organization2_designation', models.CharField(blank=True, max_length=255, null=True)),
                ('organization2_reason_for_leaving', models.CharField(blank=True, max_length=500, null=True)),
                ('employee', employee_link('experience_profile')),
            ],
            options={
                'db_table': 'hr_employee_experience',
            },
        ),
        *audit_user_fields('employeeexperience'),

        migrations.CreateModel(
            name='EmployeeFamily',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('father_dob', models.DateField(blank=True, null=True)),
                ('mother_dob', models.DateField(blank=True, null=True)),
                ('spouse_gender', models.CharField(blank=True, choices=GENDER_CHOICES, max_length=10, null=True)),
                ('spouse_dob', models.DateField(blank=True, null=True)),
                ('kid1_name', models.CharField(blank=True, max_length=100, null=True)),
                ('kid1_gender', models.CharField(blank=True, choices=GENDER_CHOICES, max_length=10, null=True)),
                ('kid1_dob', models.DateField(blank=True, null=True)),
                ('kid2_name', models.CharField(blank=True, max_length=100, null=True)),
                ('kid2_gender', models.CharField(blank=True, choices=GENDER_CHOICES, max_length=10, null=True)),
                ('kid2_dob', models.DateField(blank=True, null=True)),
                ('employee', employee_link('family_profile')),
            ],
            options={
                'db_table': 'hr_employee_family',
                'verbose_name_plural': 'employee families',
            },
        ),
        *audit_user_fields('employeefamily'),

        migrations.CreateModel(
            name='EmployeeIdentity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('aadhar_number', models.CharField(blank=True, max_length=20, null=True)),
                ('pan_number', models.CharField(blank=True, max_length=20, null=True)),
                ('uan_number', models.CharField(blank=True, max_length=20, null=True)),
                ('driving_license_number', models.CharField(blank=True, max_length=50, null=True)),
                ('passport_name', models.CharField(blank=True, max_length=100, null=True)),
                ('passport_number', models.CharField(blank=True, max_length=50, null=True)),
                ('passport_valid_upto', models.DateField(blank=True, null=True)),
                ('visa_type', models.CharField(blank=True, max_length=100, null=True)),
                ('employee', employee_link('identity_profile')),
            ],
            options={
                'db_table': 'hr_employee_identity',
                'verbose_name_plural': 'employee identities',
            },
        ),
        *audit_user_fields('employeeidentity'),

        migrations.CreateModel(
            name='EmployeeSkills',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *audit_fields(),
                ('professional_summary', models.TextField(blank=True, null=True, validators=[django.core.validators.MaxLengthValidator(2000)])),
                ('languages_read', models.JSONField(blank=True, default=list)),
                ('languages_write', models.JSONField(blank=True, default=list)),
                ('languages_speak', models.JSONField(blank=True, default=list)),
                ('special_academic_achievements', models.TextField(blank=True, null=True, validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('certifications_details', models.TextField(blank=True, null=True, validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('hobbies', models.CharField(blank=True, max_length=500, null=True)),
                ('interests', models.CharField(blank=True, max_length=500, null=True)),
                ('professional_institution_member', models.BooleanField(default=False)),
                ('professional_institution_details', models.CharField(blank=True, max_length=500, null=True)),
                ('social_organization_member', models.BooleanField(default=False)),
                ('social_organization_details', models.CharField(blank=True, max_length=500, null=True)),
                ('employee', employee_link('skills_profile')),
            ],
            options={
                'db_table': 'hr_employee_skills',
                'verbose_name_plural': 'employee skills',
            },
        ),
        *audit_user_fields('employeeskills'),
    ]
