from django.db import transaction

from core.base.exceptions import store_errors
from HR.employee.dtos import ContactCreateDTO, provided_fields
from HR.employee.models import EmployeeContact
from HR.employee.services.employee_service import EmployeeService


class ContactService:
    """Service layer for employee contact details"""

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: ContactCreateDTO) -> EmployeeContact:
        employee = EmployeeService.get(employee_id)

        contact = EmployeeContact(
            employee=employee,
            created_by=user,
            updated_by=user,
            **provided_fields(dto)
        )
        contact.full_clean()

        with store_errors():
            contact.save()
        return contact

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeContact.objects.filter(employee_id=employee_id).order_by('-valid_from', '-pk')
