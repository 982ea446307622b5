from datetime import date
from decimal import Decimal
from unittest import mock

from django.test import TestCase
from django.core.exceptions import ValidationError
from django.db import OperationalError
from django.utils import timezone

from core.base.exceptions import NotFoundError, ConflictError, StoreUnavailableError
from core.base.test_utils import create_test_user, employee_payload
from HR.employee.dtos import (
    EmployeeCreateDTO,
    ContactCreateDTO,
    CompensationCreateDTO,
    DocumentCreateDTO,
    WorkPassCreateDTO,
    QualificationCreateDTO,
    CertificationCreateDTO,
)
from HR.employee.models import EmployeeCompensation, EmployeeDocument
from HR.employee.services import (
    EmployeeService,
    ContactService,
    CompensationService,
    DocumentService,
    WorkPassService,
    QualificationService,
    CertificationService,
)


class DependentServiceTestBase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = create_test_user()
        cls.employee = EmployeeService.create(cls.user, EmployeeCreateDTO(**employee_payload()))
        cls.other = EmployeeService.create(
            cls.user,
            EmployeeCreateDTO(**employee_payload(first_name='Mark', work_email='mark@example.com'))
        )


class ContactServiceTest(DependentServiceTestBase):

    def test_create_contact(self):
        contact = ContactService.create(
            self.user, self.employee.pk, ContactCreateDTO(phone='+6512345678', email='JANE@EXAMPLE.COM')
        )
        self.assertEqual(contact.contact_type, 'primary')
        self.assertEqual(contact.email, 'jane@example.com')
        self.assertEqual(contact.valid_from, date.today())
        self.assertTrue(contact.is_current)

    def test_unknown_employee(self):
        with self.assertRaises(NotFoundError):
            ContactService.create(self.user, 999999, ContactCreateDTO(phone='+6512345678'))

    def test_valid_to_before_valid_from(self):
        with self.assertRaises(ValidationError):
            ContactService.create(
                self.user, self.employee.pk,
                ContactCreateDTO(phone='1', valid_from=date(2024, 5, 1), valid_to=date(2024, 4, 1))
            )

    def test_list_for_employee(self):
        ContactService.create(self.user, self.employee.pk, ContactCreateDTO(phone='1'))
        ContactService.create(self.user, self.other.pk, ContactCreateDTO(phone='2'))
        contacts = ContactService.list_for_employee(self.employee.pk)
        self.assertEqual([c.phone for c in contacts], ['1'])


class CompensationServiceTest(DependentServiceTestBase):

    def test_new_compensation_closes_previous(self):
        first = CompensationService.create(
            self.user, self.employee.pk,
            CompensationCreateDTO(basic_salary=Decimal('4000'), effective_from=date(2024, 1, 1))
        )
        second = CompensationService.create(
            self.user, self.employee.pk,
            CompensationCreateDTO(basic_salary=Decimal('4500'), effective_from=date(2025, 1, 1))
        )

        first.refresh_from_db()
        self.assertFalse(first.is_current)
        self.assertEqual(first.effective_to, date(2024, 12, 31))
        self.assertTrue(second.is_current)
        self.assertEqual(EmployeeCompensation.objects.current().filter(employee=self.employee).count(), 1)
        self.assertEqual(
            [c.pk for c in CompensationService.list_for_employee(self.employee.pk)],
            [first.pk, second.pk]
        )

    def test_defaults(self):
        compensation = CompensationService.create(
            self.user, self.employee.pk, CompensationCreateDTO(basic_salary=Decimal('4000'))
        )
        self.assertEqual(compensation.effective_from, date.today())
        self.assertTrue(compensation.is_current)
        self.assertIsNone(compensation.approved_by)

    def test_approval_records_user(self):
        compensation = CompensationService.create(
            self.user, self.employee.pk,
            CompensationCreateDTO(basic_salary=Decimal('4000'), approved_at=timezone.now())
        )
        self.assertEqual(compensation.approved_by, self.user)

    def test_invalid_salary_keeps_previous_current(self):
        first = CompensationService.create(
            self.user, self.employee.pk,
            CompensationCreateDTO(basic_salary=Decimal('4000'), effective_from=date(2024, 1, 1))
        )
        with self.assertRaises(ValidationError):
            CompensationService.create(
                self.user, self.employee.pk,
                CompensationCreateDTO(basic_salary=Decimal('-1'), effective_from=date(2025, 1, 1))
            )
        first.refresh_from_db()
        self.assertTrue(first.is_current)

    def test_locked_store_while_closing_previous(self):
        first = CompensationService.create(
            self.user, self.employee.pk,
            CompensationCreateDTO(basic_salary=Decimal('4000'), effective_from=date(2024, 1, 1))
        )
        with mock.patch.object(
            EmployeeCompensation, 'close', side_effect=OperationalError('database is locked')
        ):
            with self.assertLogs('core.base.exceptions', level='ERROR'):
                with self.assertRaises(StoreUnavailableError):
                    CompensationService.create(
                        self.user, self.employee.pk,
                        CompensationCreateDTO(basic_salary=Decimal('4500'), effective_from=date(2025, 1, 1))
                    )
        first.refresh_from_db()
        self.assertTrue(first.is_current)


class DocumentServiceTest(DependentServiceTestBase):

    def test_create_and_list(self):
        document = DocumentService.create(
            self.user, self.employee.pk,
            DocumentCreateDTO(document_name='Passport', file_path='docs/p.pdf', document_type='passport')
        )
        EmployeeDocument.objects.create(
            employee=self.employee, document_name='Old', file_path='docs/old.pdf', is_active=False
        )

        self.assertEqual([d.pk for d in DocumentService.list_for_employee(self.employee.pk)], [document.pk])

    def test_expiry_before_issue(self):
        with self.assertRaises(ValidationError):
            DocumentService.create(
                self.user, self.employee.pk,
                DocumentCreateDTO(
                    document_name='Passport', file_path='docs/p.pdf',
                    issue_date=date(2024, 1, 1), expiry_date=date(2023, 1, 1)
                )
            )


class WorkPassServiceTest(DependentServiceTestBase):

    def test_duplicate_permit_number(self):
        WorkPassService.create(self.user, self.employee.pk, WorkPassCreateDTO(status='new', work_permit_number='WP1'))

        with self.assertRaises(ConflictError):
            WorkPassService.create(self.user, self.other.pk, WorkPassCreateDTO(status='new', work_permit_number='WP1'))

        self.assertEqual(len(WorkPassService.list_for_employee(self.other.pk)), 0)

    def test_passes_without_numbers_do_not_collide(self):
        WorkPassService.create(self.user, self.employee.pk, WorkPassCreateDTO(status='new'))
        WorkPassService.create(self.user, self.other.pk, WorkPassCreateDTO(status='renewal'))
        self.assertEqual(len(WorkPassService.list_for_employee(self.employee.pk)), 1)

    def test_status_required(self):
        with self.assertRaises(ValidationError):
            WorkPassService.create(self.user, self.employee.pk, WorkPassCreateDTO(fin_number='F123'))


class QualificationServiceTest(DependentServiceTestBase):

    def test_create_with_own_document(self):
        document = DocumentService.create(
            self.user, self.employee.pk, DocumentCreateDTO(document_name='Degree', file_path='docs/d.pdf')
        )
        qualification = QualificationService.create(
            self.user, self.employee.pk,
            QualificationCreateDTO(degree='BSc', institution='NUS', completion_year=2012, document_id=document.pk)
        )
        self.assertEqual(qualification.document, document)
        self.assertEqual(qualification.verification_status, 'pending')

    def test_document_of_other_employee_rejected(self):
        document = DocumentService.create(
            self.user, self.other.pk, DocumentCreateDTO(document_name='Degree', file_path='docs/d.pdf')
        )
        with self.assertRaises(ValidationError):
            QualificationService.create(
                self.user, self.employee.pk,
                QualificationCreateDTO(degree='BSc', institution='NUS', completion_year=2012, document_id=document.pk)
            )

    def test_unrealistic_completion_year(self):
        with self.assertRaises(ValidationError):
            QualificationService.create(
                self.user, self.employee.pk,
                QualificationCreateDTO(degree='BSc', institution='NUS', completion_year=1850)
            )


class CertificationServiceTest(DependentServiceTestBase):

    def test_create_certification(self):
        certification = CertificationService.create(
            self.user, self.employee.pk,
            CertificationCreateDTO(certification_name='PMP', issue_date=date(2023, 1, 1))
        )
        self.assertEqual(certification.ownership, 'employee')
        self.assertTrue(certification.is_active)
        self.assertEqual(len(CertificationService.list_for_employee(self.employee.pk)), 1)

    def test_issue_date_required(self):
        with self.assertRaises(ValidationError):
            CertificationService.create(self.user, self.employee.pk, CertificationCreateDTO(certification_name='PMP'))
