"""
Employee onboarding: one employee plus its dependents in a single request.

The employee is created first and any failure there aborts the request.
Dependents are then written concurrently and settle independently: each
one is reported as a success or a failure, none of them rolls back the
employee or its siblings.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, List, Optional

from asgiref.sync import async_to_sync, sync_to_async
from django.core.exceptions import ValidationError

from HR.employee.dtos import EmployeeWithDetailsDTO
from HR.employee.models import Employee
from HR.employee.services.employee_service import EmployeeService
from HR.employee.services.job_history_service import JobHistoryService
from HR.employee.services.contact_service import ContactService
from HR.employee.services.compensation_service import CompensationService
from HR.employee.services.document_service import DocumentService
from HR.employee.services.work_pass_service import WorkPassService
from HR.employee.services.qualification_service import QualificationService
from HR.employee.services.certification_service import CertificationService

logger = logging.getLogger(__name__)

SUCCESS = 'success'
FAILURE = 'failure'


@dataclass
class DependentResult:
    kind: str
    outcome: str
    index: Optional[int] = None
    record: Any = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == SUCCESS


@dataclass
class OnboardingResult:
    employee: Employee
    dependent_results: List[DependentResult] = field(default_factory=list)

    @property
    def failures(self) -> List[DependentResult]:
        return [r for r in self.dependent_results if not r.succeeded]


@dataclass
class DependentJob:
    kind: str
    call: Any
    index: Optional[int] = None


def error_message(exc: BaseException) -> str:
    if isinstance(exc, ValidationError) and hasattr(exc, 'message_dict'):
        return '; '.join(
            f"{name}: {', '.join(messages)}" for name, messages in exc.message_dict.items()
        )
    if isinstance(exc, ValidationError):
        return ', '.join(exc.messages)
    return str(exc)


class EmployeeOnboardingService:

    @staticmethod
    def build_jobs(user, employee: Employee, dto: EmployeeWithDetailsDTO) -> List[DependentJob]:
        """
        Dependent writes for an onboarding request.

        Incomplete payloads are skipped without being reported.
        """
        jobs = []
        skipped = []

        job_assignment = dto.employee.job_assignment()
        if job_assignment.is_complete():
            jobs.append(DependentJob(
                'job_assignment',
                partial(JobHistoryService.create_initial, user, employee.pk, job_assignment)
            ))

        singles = (
            ('contact', dto.contact, ContactService.create),
            ('compensation', dto.compensation, CompensationService.create),
            ('work_pass', dto.work_pass, WorkPassService.create),
        )
        for kind, payload, create in singles:
            if payload is None:
                continue
            if payload.is_complete():
                jobs.append(DependentJob(kind, partial(create, user, employee.pk, payload)))
            else:
                skipped.append(kind)

        lists = (
            ('document', dto.documents, DocumentService.create),
            ('qualification', dto.qualifications, QualificationService.create),
            ('certification', dto.certifications, CertificationService.create),
        )
        for kind, payloads, create in lists:
            for index, payload in enumerate(payloads or []):
                if payload.is_complete():
                    jobs.append(DependentJob(kind, partial(create, user, employee.pk, payload), index))
                else:
                    skipped.append(f'{kind}[{index}]')

        if skipped:
            logger.debug("Skipped incomplete payloads for employee %s: %s", employee.pk, ', '.join(skipped))

        return jobs

    @staticmethod
    async def acreate_employee_with_details(user, dto: EmployeeWithDetailsDTO) -> OnboardingResult:
        employee = await sync_to_async(EmployeeService.create)(user, dto.employee)

        jobs = EmployeeOnboardingService.build_jobs(user, employee, dto)
        outcomes = await asyncio.gather(
            *(sync_to_async(job.call)() for job in jobs),
            return_exceptions=True
        )

        results = []
        for job, outcome in zip(jobs, outcomes):
            if isinstance(outcome, BaseException):
                message = error_message(outcome)
                logger.warning(
                    "Onboarding dependent %s[%s] failed for employee %s: %s",
                    job.kind, job.index, employee.employee_code, message
                )
                results.append(DependentResult(job.kind, FAILURE, index=job.index, error=message))
            else:
                results.append(DependentResult(job.kind, SUCCESS, index=job.index, record=outcome))

        logger.info(
            "Onboarded employee %s with %s dependents (%s failed)",
            employee.employee_code, len(results), sum(1 for r in results if not r.succeeded)
        )
        return OnboardingResult(employee=employee, dependent_results=results)

    @staticmethod
    def create_employee_with_details(user, dto: EmployeeWithDetailsDTO) -> OnboardingResult:
        """Blocking entry point for views and tests"""
        return async_to_sync(EmployeeOnboardingService.acreate_employee_with_details)(user, dto)
