from django.db import transaction

from core.base.exceptions import store_errors
from HR.employee.dtos import WorkPassCreateDTO, provided_fields
from HR.employee.models import EmployeeWorkPass
from HR.employee.services.employee_service import EmployeeService


class WorkPassService:
    """Service layer for work passes"""

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: WorkPassCreateDTO) -> EmployeeWorkPass:
        employee = EmployeeService.get(employee_id)

        work_pass = EmployeeWorkPass(
            employee=employee,
            created_by=user,
            updated_by=user,
            **provided_fields(dto)
        )
        # Permit and FIN uniqueness is left to the database
        work_pass.full_clean(validate_constraints=False)

        with store_errors('Work permit number or FIN number is already registered'):
            work_pass.save()
        return work_pass

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeWorkPass.objects.filter(employee_id=employee_id)
