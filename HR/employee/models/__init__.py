"""
Employee Domain Models

Models:
- Employee: Master record with system-assigned employee_code
- JobAssignmentRecord: Job history with a single current record per employee
- EmployeeContact, EmployeeCompensation, EmployeeDocument, EmployeeWorkPass,
  EmployeeQualification, EmployeeCertification: Onboarding dependents
- EmployeeAddress, EmployeeEducation, EmployeeExperience, EmployeeFamily,
  EmployeeIdentity, EmployeeSkills: 1:1 satellite profiles
"""

from .employee import Employee
from .job_assignment import JobAssignmentRecord
from .contact import EmployeeContact
from .compensation import EmployeeCompensation
from .document import EmployeeDocument
from .work_pass import EmployeeWorkPass
from .qualification import EmployeeQualification
from .certification import EmployeeCertification
from .profiles import (
    EmployeeAddress,
    EmployeeEducation,
    EmployeeExperience,
    EmployeeFamily,
    EmployeeIdentity,
    EmployeeSkills,
)

__all__ = [
    'Employee',
    'JobAssignmentRecord',
    'EmployeeContact',
    'EmployeeCompensation',
    'EmployeeDocument',
    'EmployeeWorkPass',
    'EmployeeQualification',
    'EmployeeCertification',
    'EmployeeAddress',
    'EmployeeEducation',
    'EmployeeExperience',
    'EmployeeFamily',
    'EmployeeIdentity',
    'EmployeeSkills',
]
