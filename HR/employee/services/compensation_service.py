import logging
from datetime import date

from django.db import transaction
from django.utils import timezone

from core.base.exceptions import store_errors
from core.base.models import CurrentRecordMixin
from HR.employee.dtos import CompensationCreateDTO, provided_fields
from HR.employee.models import EmployeeCompensation
from HR.employee.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


class CompensationService:
    """
    Service layer for compensation records.

    A new current compensation closes the employee's previous current one
    the day before it takes effect.
    """

    @staticmethod
    @transaction.atomic
    def create(user, employee_id: int, dto: CompensationCreateDTO) -> EmployeeCompensation:
        employee = EmployeeService.get(employee_id)

        fields = provided_fields(dto)
        fields.setdefault('effective_from', date.today())
        fields.setdefault('is_current', True)
        if fields.get('approved_at'):
            fields['approved_by'] = user

        compensation = EmployeeCompensation(
            employee=employee,
            created_by=user,
            updated_by=user,
            **fields
        )
        compensation.full_clean()

        if compensation.is_current:
            end_date = CurrentRecordMixin.closing_date_for(compensation.effective_from)
            with store_errors():
                for previous in EmployeeCompensation.objects.current().filter(employee=employee):
                    previous.close(end_date=end_date, updated_by=user, updated_at=timezone.now())
                    logger.info("Closed compensation %s of employee %s", previous.pk, employee.pk)

        with store_errors():
            compensation.save()
        return compensation

    @staticmethod
    def list_for_employee(employee_id: int):
        EmployeeService.get(employee_id)
        return EmployeeCompensation.objects.history_for(employee_id=employee_id)
