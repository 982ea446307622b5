import logging
from datetime import date
from typing import List, Optional

from django.conf import settings
from django.db import transaction

from core.base.exceptions import NotFoundError, ConflictError, store_errors
from core.base.models import StatusChoices
from HR.employee.dtos import EmployeeCreateDTO, EmployeeUpdateDTO, provided_fields
from HR.employee.models import Employee
from HR.employee.models.employee import next_employee_code

logger = logging.getLogger(__name__)

DETAIL_RELATIONS = (
    'contacts', 'compensations', 'documents', 'work_passes',
    'qualifications', 'certifications', 'job_history',
)

PROFILE_RELATIONS = (
    'address_profile', 'education_profile', 'experience_profile',
    'family_profile', 'identity_profile', 'skills_profile',
)


class EmployeeService:
    """Service layer for Employee master records"""

    @staticmethod
    def get(employee_id: int) -> Employee:
        try:
            return Employee.objects.get(pk=employee_id)
        except Employee.DoesNotExist:
            raise NotFoundError(f"Employee {employee_id} not found", {'employee_id': 'Employee not found'})

    @staticmethod
    @transaction.atomic
    def create(user, dto: EmployeeCreateDTO) -> Employee:
        """
        Create a new employee with a system-assigned employee_code.

        Job fields on the DTO are ignored here; see
        EmployeeOnboardingService for the first job record.
        """
        employee = Employee(
            created_by=user,
            updated_by=user,
            **dto.employee_fields()
        )
        employee.employee_code = next_employee_code()
        employee.full_clean()

        with store_errors('Employee code already exists, retry the request'):
            employee.save()

        logger.info("Created employee %s (id=%s)", employee.employee_code, employee.pk)
        return employee

    @staticmethod
    def find(filters=None, limit: Optional[int] = None) -> List[Employee]:
        """
        Simple lookup for pickers such as a manager dropdown.

        Supports `status` and `search`; newest first; `limit` is capped by
        HR_RECORDS['MAX_EMPLOYEE_LOOKUP_LIMIT'].
        """
        cap = getattr(settings, 'HR_RECORDS', {}).get('MAX_EMPLOYEE_LOOKUP_LIMIT', 100)
        if not limit or limit > cap:
            limit = cap

        queryset = Employee.objects.filter_by_search_params(filters or {})
        return list(queryset.order_by('-created_at', '-pk')[:limit])

    @staticmethod
    def list_employees(filters=None):
        """Queryset of employees for paginated listing"""
        return Employee.objects.filter_by_search_params(filters or {}).order_by('-created_at', '-pk')

    @staticmethod
    @transaction.atomic
    def update(user, dto: EmployeeUpdateDTO) -> Employee:
        """Partial update. Only fields set on the DTO are written."""
        employee = EmployeeService.get(dto.employee_id)
        updates = provided_fields(dto, exclude=('employee_id',))

        new_code = updates.get('employee_code')
        if new_code and new_code != employee.employee_code:
            if Employee.objects.filter(employee_code=new_code).exists():
                raise ConflictError(
                    f"Employee code {new_code} is already in use",
                    {'employee_code': 'Employee code already exists'}
                )

        for field_name, value in updates.items():
            setattr(employee, field_name, value)
        employee.updated_by = user
        employee.full_clean(validate_unique=False)

        with store_errors('Employee code already exists'):
            employee.save()
        return employee

    @staticmethod
    @transaction.atomic
    def terminate(user, employee_id: int, termination_date: Optional[date] = None) -> Employee:
        """Soft delete: mark the employee terminated"""
        employee = EmployeeService.get(employee_id)
        employee.status = StatusChoices.TERMINATED
        employee.termination_date = termination_date or date.today()
        employee.updated_by = user
        employee.full_clean(validate_unique=False)

        with store_errors():
            employee.save(update_fields=['status', 'termination_date', 'updated_by', 'updated_at'])

        logger.info("Terminated employee %s effective %s", employee.employee_code, employee.termination_date)
        return employee

    @staticmethod
    def get_with_details(employee_id: int) -> Employee:
        """Employee with dependents and profiles loaded in bulk"""
        employee = (
            Employee.objects
            .select_related(*PROFILE_RELATIONS)
            .prefetch_related(*DETAIL_RELATIONS)
            .filter(pk=employee_id)
            .first()
        )
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found", {'employee_id': 'Employee not found'})
        return employee
