from django.db import transaction
from django.core.exceptions import ValidationError

from core.base.exceptions import store_errors
from HR.employee.dtos import QualificationCreateDTO, provided_fields
from HR.employee.models import EmployeeQualification, EmployeeDocument
from HR.employee.services.employee_service import EmployeeService


def validate_employee_document(employee, document_id):
    """A linked document must belong to the same employee"""
    if document_id and not EmployeeDocument.objects.filter(pk=document_id, employee=employee).exists():
        raise ValidationError({'document_id': 'Document not found for this employee'})


class QualificationService:
    """Service layer for academic qualifications"""

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: QualificationCreateDTO) -> EmployeeQualification:
        employee = EmployeeService.get(employee_id)
        validate_employee_document(employee, dto.document_id)

        qualification = EmployeeQualification(
            employee=employee,
            created_by=user,
            updated_by=user,
            **provided_fields(dto)
        )
        qualification.full_clean()

        with store_errors():
            qualification.save()
        return qualification

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeQualification.objects.filter(employee_id=employee_id)
