from datetime import date
from unittest import mock

from django.test import TestCase
from django.core.exceptions import ValidationError
from django.db import IntegrityError, OperationalError, transaction

from core.base.exceptions import NotFoundError, ConflictError, StoreUnavailableError
from core.base.test_utils import create_test_user, employee_payload
from HR.employee.dtos import EmployeeCreateDTO, JobAssignmentDTO
from HR.employee.models import JobAssignmentRecord
from HR.employee.services import EmployeeService, JobHistoryService


class JobHistoryServiceTest(TestCase):
    """Test JobHistoryService business logic"""

    @classmethod
    def setUpTestData(cls):
        cls.user = create_test_user()
        cls.employee = EmployeeService.create(cls.user, EmployeeCreateDTO(**employee_payload()))
        cls.manager = EmployeeService.create(
            cls.user,
            EmployeeCreateDTO(**employee_payload(first_name='Mark', last_name='Lee', work_email='mark@example.com'))
        )

    def initial(self, employee=None, **overrides):
        data = {
            'designation': 'Engineer',
            'department': 'R&D',
            'joining_date': date(2024, 1, 1),
        }
        data.update(overrides)
        employee = employee or self.employee
        return JobHistoryService.create_initial(self.user, employee.pk, JobAssignmentDTO(**data))

    def assertSingleCurrent(self, employee=None):
        employee = employee or self.employee
        self.assertLessEqual(
            JobAssignmentRecord.objects.filter(employee=employee, is_current=True).count(), 1
        )

    def test_create_initial_record(self):
        """Hiring creates one open current record"""
        record = self.initial()

        self.assertTrue(record.is_current)
        self.assertIsNone(record.effective_to)
        self.assertEqual(record.effective_from, date(2024, 1, 1))
        self.assertEqual(record.created_by, self.user)
        self.assertEqual(JobHistoryService.get_current(self.employee.pk).designation, 'Engineer')

    def test_create_initial_defaults_effective_from_to_today(self):
        record = self.initial(joining_date=None)
        self.assertEqual(record.effective_from, date.today())

    def test_create_initial_twice_fails(self):
        self.initial()
        with self.assertRaises(ValidationError):
            self.initial(designation='Architect')
        self.assertEqual(JobAssignmentRecord.objects.filter(employee=self.employee).count(), 1)

    def test_create_initial_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            JobHistoryService.create_initial(self.user, 999999, JobAssignmentDTO(designation='X', department='Y'))

    def test_create_initial_requires_designation_and_department(self):
        with self.assertRaises(ValidationError):
            self.initial(department=None)
        self.assertIsNone(JobHistoryService.get_current(self.employee.pk))

    def test_promote_closes_previous_record(self):
        """Promotion closes the old record the day before and opens a new one"""
        first = self.initial()

        promoted = JobHistoryService.promote(
            self.user, self.employee.pk, JobAssignmentDTO(designation='Senior Engineer'), date(2025, 1, 1)
        )

        history = list(JobHistoryService.get_history(self.employee.pk))
        self.assertEqual(len(history), 2)
        self.assertEqual(history[0].pk, first.pk)
        self.assertFalse(history[0].is_current)
        self.assertEqual(history[0].effective_to, date(2024, 12, 31))
        self.assertLessEqual(history[0].effective_to, date(2025, 1, 1))

        self.assertEqual(history[1].pk, promoted.pk)
        self.assertTrue(history[1].is_current)
        self.assertIsNone(history[1].effective_to)
        self.assertEqual(history[1].designation, 'Senior Engineer')
        self.assertEqual(history[1].effective_from, date(2025, 1, 1))
        self.assertSingleCurrent()

    def test_promote_carries_over_unspecified_fields(self):
        self.initial(location='Singapore', probation_policy='3 Months', reporting_to_id=self.manager.pk)

        promoted = JobHistoryService.promote(
            self.user, self.employee.pk, JobAssignmentDTO(department='Platform'), date(2025, 1, 1)
        )

        self.assertEqual(promoted.designation, 'Engineer')
        self.assertEqual(promoted.department, 'Platform')
        self.assertEqual(promoted.location, 'Singapore')
        self.assertEqual(promoted.reporting_to_id, self.manager.pk)

    def test_promote_without_history_creates_current_record(self):
        record = JobHistoryService.promote(
            self.user, self.employee.pk,
            JobAssignmentDTO(designation='Engineer', department='R&D'), date(2024, 1, 1)
        )
        self.assertTrue(record.is_current)
        self.assertEqual(JobAssignmentRecord.objects.filter(employee=self.employee).count(), 1)

    def test_promote_must_start_after_current_record(self):
        first = self.initial()

        with self.assertRaises(ValidationError):
            JobHistoryService.promote(
                self.user, self.employee.pk, JobAssignmentDTO(designation='Lead'), date(2024, 1, 1)
            )

        first.refresh_from_db()
        self.assertTrue(first.is_current)
        self.assertIsNone(first.effective_to)

    def test_failed_promotion_keeps_current_record_open(self):
        """The close is rolled back when the new record is invalid"""
        first = self.initial()

        with self.assertRaises(ValidationError):
            JobHistoryService.promote(
                self.user, self.employee.pk, JobAssignmentDTO(designation='x' * 101), date(2025, 1, 1)
            )

        first.refresh_from_db()
        self.assertTrue(first.is_current)
        self.assertIsNone(first.effective_to)
        self.assertEqual(JobAssignmentRecord.objects.filter(employee=self.employee).count(), 1)

    def test_promote_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            JobHistoryService.promote(self.user, 999999, JobAssignmentDTO(designation='Lead'), date(2025, 1, 1))

    def test_concurrent_promotion_loser_gets_conflict(self):
        """Two promotions read the same current record; only the first one lands"""
        self.initial()
        stale_current = JobHistoryService.get_current(self.employee.pk)

        JobHistoryService.promote(
            self.user, self.employee.pk, JobAssignmentDTO(designation='Senior Engineer'), date(2025, 1, 1)
        )

        with mock.patch.object(JobHistoryService, 'get_current', return_value=stale_current):
            with self.assertRaises(ConflictError):
                JobHistoryService.promote(
                    self.user, self.employee.pk, JobAssignmentDTO(designation='Staff Engineer'), date(2025, 6, 1)
                )

        self.assertSingleCurrent()
        current = JobAssignmentRecord.objects.get(employee=self.employee, is_current=True)
        self.assertEqual(current.designation, 'Senior Engineer')
        self.assertEqual(JobAssignmentRecord.objects.filter(employee=self.employee).count(), 2)

    def test_locked_store_during_close_is_unavailable(self):
        """A lock timeout while closing the current record surfaces as a retryable error"""
        first = self.initial()

        with mock.patch.object(
            JobAssignmentRecord, 'close', side_effect=OperationalError('database is locked')
        ):
            with self.assertLogs('core.base.exceptions', level='ERROR'):
                with self.assertRaises(StoreUnavailableError):
                    JobHistoryService.promote(
                        self.user, self.employee.pk, JobAssignmentDTO(designation='Lead'), date(2025, 1, 1)
                    )

        first.refresh_from_db()
        self.assertTrue(first.is_current)
        self.assertSingleCurrent()

    def test_second_current_record_rejected_by_store(self):
        """A racing initial create hits the one-current index"""
        self.initial()

        with mock.patch.object(JobHistoryService, 'get_current', return_value=None):
            with self.assertRaises(ConflictError):
                self.initial(designation='Duplicate')

        self.assertSingleCurrent()

    def test_store_index_blocks_direct_insert(self):
        self.initial()
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                JobAssignmentRecord.objects.create(
                    employee=self.employee,
                    designation='Duplicate',
                    department='R&D',
                    effective_from=date(2025, 1, 1),
                )

    def test_history_is_ordered_by_effective_from(self):
        self.initial()
        JobHistoryService.promote(self.user, self.employee.pk, JobAssignmentDTO(designation='B'), date(2025, 1, 1))
        JobHistoryService.promote(self.user, self.employee.pk, JobAssignmentDTO(designation='C'), date(2026, 1, 1))

        history = list(JobHistoryService.get_history(self.employee.pk))
        self.assertEqual([r.designation for r in history], ['Engineer', 'B', 'C'])
        self.assertEqual(
            [r.effective_from for r in history],
            sorted(r.effective_from for r in history)
        )
        self.assertEqual([r.is_current for r in history], [False, False, True])

    def test_get_current_without_history(self):
        self.assertIsNone(JobHistoryService.get_current(self.employee.pk))

    def test_get_current_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            JobHistoryService.get_current(999999)

    def test_set_current_switches_records(self):
        first = self.initial()
        second = JobHistoryService.promote(
            self.user, self.employee.pk, JobAssignmentDTO(designation='Lead'), date(2025, 1, 1)
        )

        result = JobHistoryService.set_current(self.user, first.pk)

        self.assertEqual(result.pk, first.pk)
        self.assertTrue(result.is_current)
        self.assertIsNone(result.effective_to)

        second.refresh_from_db()
        self.assertFalse(second.is_current)
        # Never closed before its own start
        self.assertEqual(second.effective_to, date(2025, 1, 1))
        self.assertSingleCurrent()

    def test_set_current_on_current_record_is_noop(self):
        first = self.initial()
        result = JobHistoryService.set_current(self.user, first.pk)
        self.assertTrue(result.is_current)
        self.assertEqual(JobAssignmentRecord.objects.filter(employee=self.employee).count(), 1)

    def test_set_current_unknown_record(self):
        with self.assertRaises(NotFoundError):
            JobHistoryService.set_current(self.user, 999999)

    def test_reporting_to_self_rejected(self):
        with self.assertRaises(ConflictError):
            JobHistoryService.validate_reporting_to(self.employee.pk, self.employee.pk)

    def test_reporting_to_unknown_manager(self):
        with self.assertRaises(NotFoundError):
            self.initial(reporting_to_id=999999)

    def test_circular_reporting_chain_rejected(self):
        self.initial(employee=self.manager, designation='Lead', reporting_to_id=self.employee.pk)

        with self.assertRaises(ConflictError) as ctx:
            self.initial(reporting_to_id=self.manager.pk)

        self.assertIn('Circular', str(ctx.exception))
        self.assertIsNone(JobHistoryService.get_current(self.employee.pk))

    def test_update_record_keeps_dates_and_flag(self):
        first = self.initial()

        updated = JobHistoryService.update_record(
            self.user, first.pk, JobAssignmentDTO(location='Remote', effective_from=date(2020, 1, 1))
        )

        self.assertEqual(updated.location, 'Remote')
        self.assertEqual(updated.effective_from, date(2024, 1, 1))
        self.assertTrue(updated.is_current)

    def test_delete_record(self):
        first = self.initial()
        JobHistoryService.delete_record(self.user, first.pk)
        self.assertFalse(JobAssignmentRecord.objects.filter(pk=first.pk).exists())

    def test_list_current_filters(self):
        self.initial()
        self.initial(employee=self.manager, designation='Finance Lead', department='Finance')

        records = JobHistoryService.list_current({'department': 'fin'})
        self.assertEqual([r.employee_id for r in records], [self.manager.pk])

        records = JobHistoryService.list_current({'search': 'engineer'})
        self.assertEqual([r.employee_id for r in records], [self.employee.pk])
