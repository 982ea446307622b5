import logging
from datetime import date
from typing import Optional

from django.db import transaction
from django.core.exceptions import ValidationError
from django.utils import timezone

from core.base.exceptions import NotFoundError, ConflictError, store_errors
from core.base.models import CurrentRecordMixin
from HR.employee.dtos import JobAssignmentDTO, provided_fields
from HR.employee.models import Employee, JobAssignmentRecord
from HR.employee.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

# Fields a promotion inherits from the record it replaces
CARRIED_FIELDS = (
    'designation', 'department', 'reporting_to_id', 'joining_date', 'status',
    'time_type', 'location', 'legal_entity', 'business_unit', 'worker_type',
    'probation_policy', 'notice_period', 'secondary_job_titles',
)

CURRENT_CONFLICT = 'Employee already has a current job record'


class JobHistoryService:
    """
    Service layer for per-employee job history.

    At most one record per employee has is_current=True. Closing uses a
    conditional single-row update and the store carries a partial unique
    index, so of two racing transitions exactly one wins and the other
    raises ConflictError.
    """

    @staticmethod
    def get_record(record_id: int) -> JobAssignmentRecord:
        try:
            return JobAssignmentRecord.objects.get(pk=record_id)
        except JobAssignmentRecord.DoesNotExist:
            raise NotFoundError(f"Job record {record_id} not found", {'record_id': 'Job record not found'})

    @staticmethod
    def _save_new_current(user, employee: Employee, fields: dict, effective_from: date) -> JobAssignmentRecord:
        record = JobAssignmentRecord(
            employee=employee,
            effective_from=effective_from,
            effective_to=None,
            is_current=True,
            created_by=user,
            updated_by=user,
            **fields
        )
        # The one-current constraint is left to the database
        record.full_clean(validate_constraints=False)

        with store_errors(CURRENT_CONFLICT):
            record.save()
        return record

    @staticmethod
    def _close(user, record: JobAssignmentRecord, end_date: date):
        with store_errors(CURRENT_CONFLICT):
            closed = record.close(end_date=end_date, updated_by=user, updated_at=timezone.now())
        if not closed:
            logger.warning(
                "Job record %s of employee %s was closed by a concurrent request",
                record.pk, record.employee_id
            )
            raise ConflictError(
                'Current job record was changed by another request',
                {'employee_id': 'Concurrent job history change'}
            )

    @staticmethod
    def validate_reporting_to(employee_id: int, reporting_to_id: Optional[int]):
        """
        Check a reporting manager for an employee.

        The manager must exist, must not be the employee, and following the
        managers' current records must not lead back to the employee.
        """
        if reporting_to_id is None:
            return

        if reporting_to_id == employee_id:
            raise ConflictError(
                'Employee cannot report to themselves',
                {'reporting_to_id': 'Employee cannot report to themselves'}
            )

        if not Employee.objects.filter(pk=reporting_to_id).exists():
            raise NotFoundError(
                f"Reporting manager {reporting_to_id} not found",
                {'reporting_to_id': 'Reporting manager not found'}
            )

        seen = {reporting_to_id}
        manager_id = reporting_to_id
        while manager_id is not None:
            next_manager_id = (
                JobAssignmentRecord.objects.current()
                .filter(employee_id=manager_id)
                .values_list('reporting_to_id', flat=True)
                .first()
            )
            if next_manager_id == employee_id:
                raise ConflictError(
                    'Circular reporting chain detected',
                    {'reporting_to_id': 'Circular reporting chain detected'}
                )
            if next_manager_id in seen:
                # Pre-existing loop that does not involve this employee
                return
            if next_manager_id is not None:
                seen.add(next_manager_id)
            manager_id = next_manager_id

    @staticmethod
    def get_current(employee_id: int) -> Optional[JobAssignmentRecord]:
        """Current record, or None if the employee has no job history yet"""
        EmployeeService.get(employee_id)
        return JobAssignmentRecord.objects.current().filter(employee_id=employee_id).first()

    @staticmethod
    def get_history(employee_id: int):
        """All records of an employee, oldest first"""
        EmployeeService.get(employee_id)
        return JobAssignmentRecord.objects.history_for(employee_id=employee_id).select_related('reporting_to')

    @staticmethod
    def list_current(filters=None):
        """Current records across employees"""
        filters = filters or {}
        queryset = JobAssignmentRecord.objects.current().filter_by_search_params(filters)

        for field_name in ('designation', 'department'):
            value = filters.get(field_name)
            if value:
                queryset = queryset.filter(**{f'{field_name}__icontains': value})

        return queryset.select_related('employee', 'reporting_to').order_by('employee_id')

    @staticmethod
    @transaction.atomic
    def create_initial(user, employee_id: int, dto: JobAssignmentDTO) -> JobAssignmentRecord:
        """
        Create the first job record of an employee.

        effective_from falls back to joining_date, then today.
        """
        employee = EmployeeService.get(employee_id)

        if JobHistoryService.get_current(employee.pk) is not None:
            raise ValidationError({'employee_id': f'{CURRENT_CONFLICT}; use promote instead'})

        JobHistoryService.validate_reporting_to(employee.pk, dto.reporting_to_id)

        effective_from = dto.effective_from or dto.joining_date or date.today()
        fields = provided_fields(dto, exclude=('effective_from',))
        record = JobHistoryService._save_new_current(user, employee, fields, effective_from)

        logger.info("Created initial job record %s for employee %s", record.pk, employee.pk)
        return record

    @staticmethod
    @transaction.atomic
    def promote(user, employee_id: int, dto: JobAssignmentDTO,
                effective_from: Optional[date] = None) -> JobAssignmentRecord:
        """
        Close the current record and open a new one from effective_from.

        The closed record ends the day before effective_from. Fields not set
        on the DTO are carried over from the closed record. Both writes share
        one transaction.
        """
        employee = EmployeeService.get(employee_id)
        effective_from = effective_from or dto.effective_from or date.today()

        JobHistoryService.validate_reporting_to(employee.pk, dto.reporting_to_id)

        current = JobHistoryService.get_current(employee.pk)
        fields = {}
        if current is not None:
            if effective_from <= current.effective_from:
                raise ValidationError({
                    'effective_from': f'Must be after the current record start date ({current.effective_from})'
                })
            fields = {name: getattr(current, name) for name in CARRIED_FIELDS}
            JobHistoryService._close(user, current, CurrentRecordMixin.closing_date_for(effective_from))

        fields.update(provided_fields(dto, exclude=('effective_from',)))
        record = JobHistoryService._save_new_current(user, employee, fields, effective_from)

        logger.info(
            "Promoted employee %s: closed job record %s, opened %s from %s",
            employee.pk, current.pk if current else None, record.pk, effective_from
        )
        return record

    @staticmethod
    @transaction.atomic
    def set_current(user, record_id: int) -> JobAssignmentRecord:
        """
        Make an existing record the current one.

        No date ordering is enforced; the previous current record is closed
        the day before the target starts, never before its own start.
        """
        record = JobHistoryService.get_record(record_id)
        if record.is_current:
            return record

        previous = JobAssignmentRecord.objects.current().filter(employee_id=record.employee_id).first()
        if previous is not None:
            end_date = max(previous.effective_from, CurrentRecordMixin.closing_date_for(record.effective_from))
            JobHistoryService._close(user, previous, end_date)

        with store_errors(CURRENT_CONFLICT):
            updated = JobAssignmentRecord.objects.filter(pk=record.pk, is_current=False).update(
                is_current=True,
                effective_to=None,
                updated_by=user,
                updated_at=timezone.now(),
            )
        if not updated:
            raise ConflictError('Job record was changed by another request')

        record.refresh_from_db()
        logger.info(
            "Set job record %s current for employee %s (previous %s)",
            record.pk, record.employee_id, previous.pk if previous else None
        )
        return record

    @staticmethod
    @transaction.atomic
    def update_record(user, record_id: int, dto: JobAssignmentDTO) -> JobAssignmentRecord:
        """In-place correction. Dates and the current flag are not touched."""
        record = JobHistoryService.get_record(record_id)
        updates = provided_fields(dto, exclude=('effective_from',))

        if 'reporting_to_id' in updates:
            JobHistoryService.validate_reporting_to(record.employee_id, updates['reporting_to_id'])

        for field_name, value in updates.items():
            setattr(record, field_name, value)
        record.updated_by = user
        record.full_clean(validate_constraints=False)

        with store_errors():
            record.save()
        return record

    @staticmethod
    @transaction.atomic
    def delete_record(user, record_id: int):
        """Administrative hard delete. The current-record invariant is not repaired."""
        record = JobHistoryService.get_record(record_id)
        logger.warning(
            "Deleting job record %s of employee %s (current=%s) by %s",
            record.pk, record.employee_id, record.is_current, user
        )
        record.delete()
