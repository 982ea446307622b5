from datetime import date
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.core.exceptions import ValidationError

from core.base.test_utils import create_test_user
from HR.employee.models import Employee, JobAssignmentRecord, EmployeeCompensation
from HR.employee.models.employee import next_employee_code
from HR.employee.models.qualification import validate_completion_year


class JobAssignmentRecordModelTest(TestCase):
    """Test JobAssignmentRecord model behaviour"""

    @classmethod
    def setUpTestData(cls):
        cls.employee = Employee.objects.create(
            first_name='Jane',
            last_name='Doe',
            date_of_birth=date(1990, 1, 1),
        )

    def make_record(self, **overrides):
        data = {
            'employee': self.employee,
            'designation': 'Engineer',
            'department': 'R&D',
            'effective_from': date(2024, 1, 1),
        }
        data.update(overrides)
        return JobAssignmentRecord.objects.create(**data)

    def test_probation_end_date_months(self):
        record = JobAssignmentRecord(
            joining_date=date(2024, 1, 31), effective_from=date(2024, 1, 31), probation_policy='1 Month'
        )
        self.assertEqual(record.probation_end_date, date(2024, 2, 29))

    def test_probation_end_date_weeks(self):
        record = JobAssignmentRecord(
            joining_date=date(2024, 1, 31), effective_from=date(2024, 1, 31), probation_policy='2 Weeks'
        )
        self.assertEqual(record.probation_end_date, date(2024, 2, 14))

    def test_probation_counts_from_effective_from_without_joining_date(self):
        record = JobAssignmentRecord(effective_from=date(2024, 3, 1), probation_policy='3 Months')
        self.assertEqual(record.probation_end_date, date(2024, 6, 1))

    def test_probation_unknown_policy(self):
        record = JobAssignmentRecord(effective_from=date(2024, 3, 1), probation_policy='Until confirmed')
        self.assertIsNone(record.probation_end_date)
        record.probation_policy = None
        self.assertIsNone(record.probation_end_date)

    def test_active_on_is_inclusive(self):
        record = JobAssignmentRecord(
            effective_from=date(2024, 1, 1), effective_to=date(2024, 12, 31), is_current=False
        )
        self.assertTrue(record.active_on(date(2024, 1, 1)))
        self.assertTrue(record.active_on(date(2024, 12, 31)))
        self.assertFalse(record.active_on(date(2023, 12, 31)))
        self.assertFalse(record.active_on(date(2025, 1, 1)))

    def test_open_record_active_after_start(self):
        record = JobAssignmentRecord(effective_from=date(2024, 1, 1))
        self.assertTrue(record.active_on(date(2030, 1, 1)))

    def test_current_record_must_be_open(self):
        record = JobAssignmentRecord(
            effective_from=date(2024, 1, 1), effective_to=date(2024, 6, 30), is_current=True
        )
        with self.assertRaises(ValidationError):
            record.clean()

    def test_end_before_start_rejected(self):
        record = JobAssignmentRecord(
            effective_from=date(2024, 1, 1), effective_to=date(2023, 6, 30), is_current=False
        )
        with self.assertRaises(ValidationError):
            record.clean()

    def test_secondary_job_titles_must_be_strings(self):
        record = JobAssignmentRecord(effective_from=date(2024, 1, 1), secondary_job_titles=['Mentor', ''])
        with self.assertRaises(ValidationError):
            record.clean()

    def test_close_only_succeeds_once(self):
        record = self.make_record()

        self.assertTrue(record.close(end_date=date(2024, 6, 30)))
        self.assertFalse(record.is_current)
        self.assertEqual(record.effective_to, date(2024, 6, 30))

        stale = JobAssignmentRecord.objects.get(pk=record.pk)
        stale.is_current = True
        self.assertFalse(stale.close(end_date=date(2024, 7, 31)))

        record.refresh_from_db()
        self.assertEqual(record.effective_to, date(2024, 6, 30))

    def test_close_never_ends_before_start(self):
        record = self.make_record(effective_from=date(2024, 5, 1))
        record.close(end_date=date(2024, 4, 30))
        record.refresh_from_db()
        self.assertEqual(record.effective_to, date(2024, 5, 1))

    def test_queryset_active_on(self):
        closed = self.make_record(is_current=False, effective_to=date(2024, 6, 30))
        current = self.make_record(designation='Lead', effective_from=date(2024, 7, 1))

        on_june = JobAssignmentRecord.objects.active_on(date(2024, 6, 30))
        self.assertEqual(list(on_june), [closed])

        on_july = JobAssignmentRecord.objects.active_on(date(2024, 7, 1))
        self.assertEqual(list(on_july), [current])


class EmployeeModelTest(TestCase):
    """Test Employee model behaviour"""

    def test_code_generated_on_save(self):
        employee = Employee.objects.create(first_name='A', last_name='B', date_of_birth=date(1990, 1, 1))
        self.assertEqual(employee.employee_code, 'EMP0001')

    def test_next_code_follows_highest_suffix(self):
        Employee.objects.create(
            employee_code='EMP0041', first_name='A', last_name='B', date_of_birth=date(1990, 1, 1)
        )
        self.assertEqual(next_employee_code(), 'EMP0042')

    def test_full_name_skips_missing_parts(self):
        employee = Employee(first_name='Jane', middle_name='Q', last_name='Doe')
        self.assertEqual(employee.full_name, 'Jane Q Doe')
        employee.middle_name = None
        self.assertEqual(employee.full_name, 'Jane Doe')

    def test_terminated_requires_date(self):
        employee = Employee(
            employee_code='EMP0100', first_name='A', last_name='B',
            date_of_birth=date(1990, 1, 1), status='terminated'
        )
        with self.assertRaises(ValidationError):
            employee.full_clean()


class CompensationModelTest(TestCase):

    def test_negative_salary_rejected(self):
        user = create_test_user()
        employee = Employee.objects.create(first_name='A', last_name='B', date_of_birth=date(1990, 1, 1))
        compensation = EmployeeCompensation(
            employee=employee, basic_salary=-1, effective_from=date(2024, 1, 1), created_by=user
        )
        with self.assertRaises(ValidationError) as ctx:
            compensation.full_clean()
        self.assertIn('basic_salary', ctx.exception.message_dict)


class CompletionYearValidatorTest(TestCase):

    def test_bounds(self):
        validate_completion_year(1900)
        validate_completion_year(date.today().year + 10)
        with self.assertRaises(ValidationError):
            validate_completion_year(1899)
        with self.assertRaises(ValidationError):
            validate_completion_year(date.today().year + 11)


class MigrationStateTest(TestCase):

    def test_models_match_migrations(self):
        out = StringIO()
        try:
            call_command('makemigrations', 'employee', '--check', '--dry-run', stdout=out)
        except SystemExit:
            self.fail(f"Models have changes not reflected in migrations:\n{out.getvalue()}")
