"""
Serializers for onboarding (employee plus dependents) and the detail view
"""
from rest_framework import serializers
from HR.employee.dtos import (
    EmployeeWithDetailsDTO,
    EmployeeCreateDTO,
    ContactCreateDTO,
    CompensationCreateDTO,
    DocumentCreateDTO,
    WorkPassCreateDTO,
    QualificationCreateDTO,
    CertificationCreateDTO,
)
from .employee_serializers import EmployeeSerializer, EmployeeCreateSerializer
from .job_history_serializers import JobAssignmentRecordSerializer
from .dependent_serializers import (
    ContactSerializer, ContactCreateSerializer,
    CompensationSerializer, CompensationCreateSerializer,
    DocumentSerializer, DocumentCreateSerializer,
    WorkPassSerializer, WorkPassCreateSerializer,
    QualificationSerializer, QualificationCreateSerializer,
    CertificationSerializer, CertificationCreateSerializer,
)
from .profile_serializers import PROFILE_SERIALIZERS

RECORD_SERIALIZERS = {
    'job_assignment': JobAssignmentRecordSerializer,
    'contact': ContactSerializer,
    'compensation': CompensationSerializer,
    'document': DocumentSerializer,
    'work_pass': WorkPassSerializer,
    'qualification': QualificationSerializer,
    'certification': CertificationSerializer,
}


class EmployeeOnboardSerializer(serializers.Serializer):
    """Write serializer for onboarding requests"""
    employee = EmployeeCreateSerializer()
    contact = ContactCreateSerializer(required=False, allow_null=True)
    compensation = CompensationCreateSerializer(required=False, allow_null=True)
    documents = DocumentCreateSerializer(many=True, required=False)
    work_pass = WorkPassCreateSerializer(required=False, allow_null=True)
    qualifications = QualificationCreateSerializer(many=True, required=False)
    certifications = CertificationCreateSerializer(many=True, required=False)

    def to_dto(self) -> EmployeeWithDetailsDTO:
        data = self.validated_data

        def single(dto_class, key):
            payload = data.get(key)
            return dto_class(**payload) if payload else None

        return EmployeeWithDetailsDTO(
            employee=EmployeeCreateDTO(**data['employee']),
            contact=single(ContactCreateDTO, 'contact'),
            compensation=single(CompensationCreateDTO, 'compensation'),
            documents=[DocumentCreateDTO(**d) for d in data.get('documents', [])],
            work_pass=single(WorkPassCreateDTO, 'work_pass'),
            qualifications=[QualificationCreateDTO(**q) for q in data.get('qualifications', [])],
            certifications=[CertificationCreateDTO(**c) for c in data.get('certifications', [])],
        )


def dependent_result_data(result):
    record_data = None
    if result.record is not None:
        record_data = RECORD_SERIALIZERS[result.kind](result.record).data
    return {
        'kind': result.kind,
        'index': result.index,
        'outcome': result.outcome,
        'record': record_data,
        'error': result.error,
    }


def onboarding_result_data(result):
    return {
        'employee': EmployeeSerializer(result.employee).data,
        'dependent_results': [dependent_result_data(r) for r in result.dependent_results],
    }


class EmployeeDetailSerializer(EmployeeSerializer):
    """Employee with dependents, job history and profiles"""
    contacts = ContactSerializer(many=True, read_only=True)
    compensations = CompensationSerializer(many=True, read_only=True)
    documents = DocumentSerializer(many=True, read_only=True)
    work_passes = WorkPassSerializer(many=True, read_only=True)
    qualifications = QualificationSerializer(many=True, read_only=True)
    certifications = CertificationSerializer(many=True, read_only=True)
    job_history = JobAssignmentRecordSerializer(many=True, read_only=True)
    profiles = serializers.SerializerMethodField()

    class Meta(EmployeeSerializer.Meta):
        fields = EmployeeSerializer.Meta.fields + [
            'contacts', 'compensations', 'documents', 'work_passes',
            'qualifications', 'certifications', 'job_history', 'profiles',
        ]

    def get_profiles(self, obj):
        profiles = {}
        for kind, serializer_class in PROFILE_SERIALIZERS.items():
            profile = getattr(obj, f'{kind}_profile', None)
            profiles[kind] = serializer_class(profile).data if profile is not None else None
        return profiles
