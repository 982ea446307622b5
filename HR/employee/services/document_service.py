from django.db import transaction

from core.base.exceptions import store_errors
from HR.employee.dtos import DocumentCreateDTO, provided_fields
from HR.employee.models import EmployeeDocument
from HR.employee.services.employee_service import EmployeeService


class DocumentService:
    """Service layer for document references. File storage happens elsewhere."""

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: DocumentCreateDTO) -> EmployeeDocument:
        employee = EmployeeService.get(employee_id)

        document = EmployeeDocument(
            employee=employee,
            created_by=user,
            updated_by=user,
            **provided_fields(dto)
        )
        document.full_clean()

        with store_errors():
            document.save()
        return document

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeDocument.objects.filter(employee_id=employee_id, is_active=True)
