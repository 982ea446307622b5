from datetime import date

from django.test import TestCase, override_settings
from django.core.exceptions import ValidationError

from core.base.exceptions import NotFoundError, ConflictError
from core.base.test_utils import create_test_user, employee_payload
from HR.employee.dtos import EmployeeCreateDTO, EmployeeUpdateDTO, ContactCreateDTO, JobAssignmentDTO
from HR.employee.models import Employee, EmployeeAddress
from HR.employee.services import EmployeeService, ContactService, JobHistoryService


class EmployeeServiceTest(TestCase):
    """Test EmployeeService business logic"""

    @classmethod
    def setUpTestData(cls):
        cls.user = create_test_user()

    def create(self, **overrides):
        return EmployeeService.create(self.user, EmployeeCreateDTO(**employee_payload(**overrides)))

    def test_create_employee(self):
        employee = self.create()

        self.assertIsNotNone(employee.pk)
        self.assertEqual(employee.employee_code, 'EMP0001')
        self.assertEqual(employee.full_name, 'Jane Doe')
        self.assertEqual(employee.status, 'active')
        self.assertEqual(employee.created_by, self.user)

    def test_codes_are_sequential(self):
        first = self.create()
        second = self.create(first_name='John', work_email='john@example.com')
        self.assertEqual(first.employee_code, 'EMP0001')
        self.assertEqual(second.employee_code, 'EMP0002')

    def test_supplied_code_is_replaced(self):
        Employee.objects.create(
            employee_code='EMP0041', first_name='A', last_name='B', date_of_birth=date(1990, 1, 1)
        )
        employee = self.create()
        self.assertEqual(employee.employee_code, 'EMP0042')

    def test_job_fields_are_not_stored_on_employee(self):
        employee = self.create(designation='Engineer', department='R&D')
        self.assertIsNone(JobHistoryService.get_current(employee.pk))

    def test_missing_date_of_birth(self):
        with self.assertRaises(ValidationError) as ctx:
            self.create(date_of_birth=None)
        self.assertIn('date_of_birth', ctx.exception.message_dict)
        self.assertEqual(Employee.objects.count(), 0)

    def test_invalid_gender(self):
        with self.assertRaises(ValidationError):
            self.create(gender='unknown')

    def test_email_is_normalized(self):
        employee = self.create(work_email='  Jane.Doe@Example.COM ')
        employee.refresh_from_db()
        self.assertEqual(employee.work_email, 'jane.doe@example.com')

    def test_get_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            EmployeeService.get(999999)

    @override_settings(HR_RECORDS={'MAX_EMPLOYEE_LOOKUP_LIMIT': 2})
    def test_find_caps_limit(self):
        for index in range(3):
            self.create(first_name=f'Person{index}', work_email=f'p{index}@example.com')

        self.assertEqual(len(EmployeeService.find(limit=10)), 2)
        self.assertEqual(len(EmployeeService.find()), 2)
        self.assertEqual(len(EmployeeService.find(limit=1)), 1)

    def test_find_search_is_case_insensitive(self):
        jane = self.create()
        self.create(first_name='Mark', last_name='Lee', work_email='mark@example.com')

        results = EmployeeService.find({'search': 'jAnE'})
        self.assertEqual([e.pk for e in results], [jane.pk])

        results = EmployeeService.find({'search': 'emp000'})
        self.assertEqual(len(results), 2)

    def test_find_newest_first(self):
        first = self.create()
        second = self.create(first_name='Mark', work_email='mark@example.com')
        self.assertEqual([e.pk for e in EmployeeService.find()], [second.pk, first.pk])

    def test_find_by_status(self):
        active = self.create()
        terminated = self.create(first_name='Mark', work_email='mark@example.com')
        EmployeeService.terminate(self.user, terminated.pk, date(2025, 1, 31))

        results = EmployeeService.find({'status': 'active'})
        self.assertEqual([e.pk for e in results], [active.pk])

    def test_partial_update(self):
        employee = self.create()

        updated = EmployeeService.update(
            self.user, EmployeeUpdateDTO(employee_id=employee.pk, last_name='Smith', middle_name='  ')
        )

        self.assertEqual(updated.last_name, 'Smith')
        self.assertEqual(updated.first_name, 'Jane')
        self.assertEqual(updated.date_of_birth, date(1990, 1, 1))
        self.assertIsNone(updated.middle_name)

    def test_update_to_existing_code(self):
        first = self.create()
        second = self.create(first_name='Mark', work_email='mark@example.com')

        with self.assertRaises(ConflictError):
            EmployeeService.update(
                self.user, EmployeeUpdateDTO(employee_id=second.pk, employee_code=first.employee_code)
            )

    def test_update_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            EmployeeService.update(self.user, EmployeeUpdateDTO(employee_id=999999, last_name='X'))

    def test_terminate_defaults_to_today(self):
        employee = self.create()

        terminated = EmployeeService.terminate(self.user, employee.pk)

        terminated.refresh_from_db()
        self.assertEqual(terminated.status, 'terminated')
        self.assertEqual(terminated.termination_date, date.today())
        self.assertTrue(Employee.objects.filter(pk=employee.pk).exists())

    def test_get_with_details(self):
        employee = self.create()
        ContactService.create(self.user, employee.pk, ContactCreateDTO(phone='+6512345678'))
        JobHistoryService.create_initial(
            self.user, employee.pk, JobAssignmentDTO(designation='Engineer', department='R&D')
        )
        EmployeeAddress.objects.create(employee=employee, current_city='Singapore')

        detailed = EmployeeService.get_with_details(employee.pk)

        with self.assertNumQueries(0):
            self.assertEqual(len(detailed.contacts.all()), 1)
            self.assertEqual(len(detailed.job_history.all()), 1)
            self.assertEqual(detailed.address_profile.current_city, 'Singapore')

    def test_get_with_details_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            EmployeeService.get_with_details(999999)
