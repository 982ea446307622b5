"""
Data Transfer Objects for Employee Domain

DTOs for service layer operations. Every optional field defaults to None,
and None means "omitted": provided_fields() drops it so the store never
receives an empty-string placeholder.
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal


def provided_fields(dto, exclude=()) -> dict:
    """
    Return the fields explicitly set on a DTO.

    None and blank strings are treated as absent. Strings are stripped.
    """
    data = {}
    for dto_field in fields(dto):
        if dto_field.name in exclude:
            continue
        value = getattr(dto, dto_field.name)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        if value is None:
            continue
        data[dto_field.name] = value
    return data


JOB_FIELDS = (
    'designation', 'department', 'reporting_to_id', 'joining_date', 'time_type',
    'location', 'legal_entity', 'business_unit', 'worker_type',
    'probation_policy', 'notice_period', 'secondary_job_titles',
)


@dataclass
class EmployeeCreateDTO:
    """
    DTO for creating a new employee.

    The job fields are not stored on Employee; they seed the first job
    assignment record during onboarding.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    middle_name: Optional[str] = None
    display_name: Optional[str] = None
    gender: Optional[str] = None
    marital_status: Optional[str] = None
    nationality: Optional[str] = None
    blood_group: Optional[str] = None
    work_email: Optional[str] = None
    personal_email: Optional[str] = None
    mobile_number: Optional[str] = None
    work_number: Optional[str] = None
    profile_photo_path: Optional[str] = None
    status: Optional[str] = None

    # Job fields (initial job assignment)
    designation: Optional[str] = None
    department: Optional[str] = None
    reporting_to_id: Optional[int] = None
    joining_date: Optional[date] = None
    time_type: Optional[str] = None
    location: Optional[str] = None
    legal_entity: Optional[str] = None
    business_unit: Optional[str] = None
    worker_type: Optional[str] = None
    probation_policy: Optional[str] = None
    notice_period: Optional[str] = None
    secondary_job_titles: Optional[List[str]] = None
    job_status: Optional[str] = None

    def employee_fields(self) -> dict:
        return provided_fields(self, exclude=JOB_FIELDS + ('job_status',))

    def job_assignment(self) -> 'JobAssignmentDTO':
        job = {name: getattr(self, name) for name in JOB_FIELDS}
        return JobAssignmentDTO(status=self.job_status, **job)


@dataclass
class EmployeeUpdateDTO:
    """DTO for updating an existing employee"""
    employee_id: int
    employee_code: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    marital_status: Optional[str] = None
    nationality: Optional[str] = None
    blood_group: Optional[str] = None
    work_email: Optional[str] = None
    personal_email: Optional[str] = None
    mobile_number: Optional[str] = None
    work_number: Optional[str] = None
    profile_photo_path: Optional[str] = None
    status: Optional[str] = None


@dataclass
class JobAssignmentDTO:
    """DTO for job assignment records (initial, promotion and corrections)"""
    designation: Optional[str] = None
    department: Optional[str] = None
    reporting_to_id: Optional[int] = None
    joining_date: Optional[date] = None
    status: Optional[str] = None
    time_type: Optional[str] = None
    location: Optional[str] = None
    legal_entity: Optional[str] = None
    business_unit: Optional[str] = None
    worker_type: Optional[str] = None
    probation_policy: Optional[str] = None
    notice_period: Optional[str] = None
    secondary_job_titles: Optional[List[str]] = None
    effective_from: Optional[date] = None

    def is_complete(self) -> bool:
        return bool((self.designation or '').strip() or (self.department or '').strip())


@dataclass
class ContactCreateDTO:
    """DTO for creating an employee contact"""
    contact_type: Optional[str] = 'primary'
    phone: Optional[str] = None
    alternate_phone: Optional[str] = None
    email: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_number: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    is_current: Optional[bool] = None
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None

    def is_complete(self) -> bool:
        contact_values = provided_fields(self, exclude=('contact_type', 'is_current', 'valid_from', 'valid_to'))
        return bool(contact_values)


@dataclass
class CompensationCreateDTO:
    """DTO for creating a compensation record"""
    basic_salary: Optional[Decimal] = None
    ot_hourly_rate: Optional[Decimal] = None
    effective_from: Optional[date] = None
    is_current: Optional[bool] = None
    approved_at: Optional[datetime] = None

    def is_complete(self) -> bool:
        return self.basic_salary is not None


@dataclass
class DocumentCreateDTO:
    """DTO for registering an employee document"""
    document_name: Optional[str] = None
    file_path: Optional[str] = None
    document_type: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None

    def is_complete(self) -> bool:
        return bool((self.document_name or '').strip() or (self.file_path or '').strip())


@dataclass
class WorkPassCreateDTO:
    """DTO for creating a work pass"""
    status: Optional[str] = None
    work_permit_number: Optional[str] = None
    fin_number: Optional[str] = None
    application_date: Optional[date] = None
    issuance_date: Optional[date] = None
    expiry_date: Optional[date] = None
    medical_date: Optional[date] = None

    def is_complete(self) -> bool:
        return bool(provided_fields(self, exclude=('application_date', 'issuance_date', 'expiry_date', 'medical_date')))


@dataclass
class QualificationCreateDTO:
    """DTO for creating a qualification"""
    degree: Optional[str] = None
    institution: Optional[str] = None
    completion_year: Optional[int] = None
    major: Optional[str] = None
    document_id: Optional[int] = None
    verification_status: Optional[str] = None

    def is_complete(self) -> bool:
        return bool((self.degree or '').strip() or (self.institution or '').strip())


@dataclass
class CertificationCreateDTO:
    """DTO for creating a certification"""
    certification_name: Optional[str] = None
    issue_date: Optional[date] = None
    certification_type: Optional[str] = None
    expiry_date: Optional[date] = None
    ownership: Optional[str] = None
    document_id: Optional[int] = None

    def is_complete(self) -> bool:
        return bool((self.certification_name or '').strip())


@dataclass
class EmployeeWithDetailsDTO:
    """
    Onboarding request: one employee plus optional dependents.

    Not persisted. The first job assignment is derived from the job fields
    on `employee`.
    """
    employee: EmployeeCreateDTO
    contact: Optional[ContactCreateDTO] = None
    compensation: Optional[CompensationCreateDTO] = None
    documents: List[DocumentCreateDTO] = field(default_factory=list)
    work_pass: Optional[WorkPassCreateDTO] = None
    qualifications: List[QualificationCreateDTO] = field(default_factory=list)
    certifications: List[CertificationCreateDTO] = field(default_factory=list)
