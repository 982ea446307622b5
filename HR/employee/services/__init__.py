"""
Employee Domain Services

Business logic for employee records.
All writes should go through these services.

Services:
- EmployeeService: Create, update, terminate, lookup
- JobHistoryService: Initial job record, promotions, current record switching
- ContactService, CompensationService, DocumentService, WorkPassService,
  QualificationService, CertificationService: Dependents
- ProfileService: 1:1 satellite profiles
- EmployeeOnboardingService: Employee plus dependents in one request
"""

from .employee_service import EmployeeService
from .job_history_service import JobHistoryService
from .contact_service import ContactService
from .compensation_service import CompensationService
from .document_service import DocumentService
from .work_pass_service import WorkPassService
from .qualification_service import QualificationService
from .certification_service import CertificationService
from .profile_service import ProfileService
from .employee_onboarding_service import EmployeeOnboardingService

__all__ = [
    'EmployeeService',
    'JobHistoryService',
    'ContactService',
    'CompensationService',
    'DocumentService',
    'WorkPassService',
    'QualificationService',
    'CertificationService',
    'ProfileService',
    'EmployeeOnboardingService',
]
