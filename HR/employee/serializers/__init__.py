"""
Employee Domain Serializers
"""
from .employee_serializers import (
    EmployeeSerializer,
    EmployeeLookupSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer,
)
from .job_history_serializers import (
    JobAssignmentRecordSerializer,
    JobAssignmentWriteSerializer,
    PromoteSerializer,
)
from .dependent_serializers import (
    ContactSerializer,
    ContactCreateSerializer,
    CompensationSerializer,
    CompensationCreateSerializer,
    DocumentSerializer,
    DocumentCreateSerializer,
    WorkPassSerializer,
    WorkPassCreateSerializer,
    QualificationSerializer,
    QualificationCreateSerializer,
    CertificationSerializer,
    CertificationCreateSerializer,
)
from .profile_serializers import PROFILE_SERIALIZERS
from .onboarding_serializers import (
    EmployeeOnboardSerializer,
    EmployeeDetailSerializer,
    onboarding_result_data,
)
