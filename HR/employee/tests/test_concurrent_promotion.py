import threading
from datetime import date

from django.test import TransactionTestCase
from django.core.exceptions import ValidationError
from django.db import connection

from core.base.exceptions import ConflictError
from core.base.test_utils import create_test_user, employee_payload
from HR.employee.dtos import EmployeeCreateDTO, JobAssignmentDTO
from HR.employee.models import JobAssignmentRecord
from HR.employee.services import EmployeeService, JobHistoryService


def shared_database():
    if connection.vendor == 'postgresql':
        return True
    if connection.vendor == 'sqlite':
        return not connection.is_in_memory_db()
    return False


class ConcurrentPromotionTest(TransactionTestCase):
    """Promotions racing on separate connections keep one current record"""

    def setUp(self):
        if not shared_database():
            self.skipTest('Threads need a database they can all open')
        self.user = create_test_user()
        self.employee = EmployeeService.create(self.user, EmployeeCreateDTO(**employee_payload()))
        JobHistoryService.create_initial(
            self.user, self.employee.pk,
            JobAssignmentDTO(designation='Engineer', department='R&D', joining_date=date(2024, 1, 1))
        )

    def promote_in_threads(self, promotions):
        outcomes = {}

        def run(designation, effective_date):
            try:
                JobHistoryService.promote(
                    self.user, self.employee.pk, JobAssignmentDTO(designation=designation), effective_date
                )
                outcomes[designation] = None
            except Exception as e:
                outcomes[designation] = e
            finally:
                connection.close()

        threads = [threading.Thread(target=run, args=promotion) for promotion in promotions]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)

        return outcomes

    def test_racing_promotions(self):
        outcomes = self.promote_in_threads([
            ('Senior Engineer', date(2025, 1, 1)),
            ('Staff Engineer', date(2025, 6, 1)),
        ])

        self.assertEqual(len(outcomes), 2)
        for designation, error in outcomes.items():
            if error is not None:
                self.assertIsInstance(error, (ConflictError, ValidationError), designation)
        self.assertTrue(any(error is None for error in outcomes.values()))

        current = JobAssignmentRecord.objects.filter(employee=self.employee, is_current=True)
        self.assertEqual(current.count(), 1)
        self.assertIn(current.get().designation, [d for d, error in outcomes.items() if error is None])

    def test_many_racing_promotions(self):
        promotions = [(f'Level {month}', date(2025, month, 1)) for month in range(1, 7)]
        outcomes = self.promote_in_threads(promotions)

        self.assertEqual(len(outcomes), len(promotions))
        self.assertTrue(any(error is None for error in outcomes.values()))
        for error in outcomes.values():
            if error is not None:
                self.assertIsInstance(error, (ConflictError, ValidationError))

        self.assertEqual(
            JobAssignmentRecord.objects.filter(employee=self.employee, is_current=True).count(), 1
        )
        closed = JobAssignmentRecord.objects.filter(employee=self.employee, is_current=False)
        for record in closed:
            self.assertIsNotNone(record.effective_to)
            self.assertGreaterEqual(record.effective_to, record.effective_from)
