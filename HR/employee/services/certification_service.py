from django.db import transaction

from core.base.exceptions import store_errors
from HR.employee.dtos import CertificationCreateDTO, provided_fields
from HR.employee.models import EmployeeCertification
from HR.employee.services.employee_service import EmployeeService
from HR.employee.services.qualification_service import validate_employee_document


class CertificationService:
    """Service layer for professional certifications"""

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: CertificationCreateDTO) -> EmployeeCertification:
        employee = EmployeeService.get(employee_id)
        validate_employee_document(employee, dto.document_id)

        certification = EmployeeCertification(
            employee=employee,
            created_by=user,
            updated_by=user,
            **provided_fields(dto)
        )
        certification.full_clean()

        with store_errors():
            certification.save()
        return certification

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeCertification.objects.filter(employee_id=employee_id)
