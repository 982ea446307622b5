"""
Serializers for employee dependents: contacts, compensation, documents,
work passes, qualifications and certifications.
"""
from rest_framework import serializers
from HR.employee.models import (
    EmployeeContact,
    EmployeeCompensation,
    EmployeeDocument,
    EmployeeWorkPass,
    EmployeeQualification,
    EmployeeCertification,
)
from HR.employee.dtos import (
    ContactCreateDTO,
    CompensationCreateDTO,
    DocumentCreateDTO,
    WorkPassCreateDTO,
    QualificationCreateDTO,
    CertificationCreateDTO,
)


class ContactSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeContact
        fields = [
            'id', 'employee', 'contact_type', 'phone', 'alternate_phone', 'email',
            'emergency_contact_name', 'emergency_contact_number',
            'address_line1', 'address_line2', 'city', 'postal_code', 'country',
            'is_current', 'valid_from', 'valid_to', 'created_at', 'updated_at'
        ]


class ContactCreateSerializer(serializers.Serializer):
    contact_type = serializers.ChoiceField(choices=EmployeeContact.CONTACT_TYPE_CHOICES, default='primary')
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    alternate_phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    emergency_contact_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    emergency_contact_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    address_line1 = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    address_line2 = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    is_current = serializers.BooleanField(required=False)
    valid_from = serializers.DateField(required=False, allow_null=True)
    valid_to = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> ContactCreateDTO:
        return ContactCreateDTO(**self.validated_data)


class CompensationSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeCompensation
        fields = [
            'id', 'employee', 'basic_salary', 'ot_hourly_rate',
            'effective_from', 'effective_to', 'is_current',
            'approved_by', 'approved_at', 'created_at', 'updated_at'
        ]


class CompensationCreateSerializer(serializers.Serializer):
    # Sign is checked by the model so onboarding can report it per item
    basic_salary = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    ot_hourly_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)
    effective_from = serializers.DateField(required=False, allow_null=True)
    is_current = serializers.BooleanField(required=False)
    approved_at = serializers.DateTimeField(required=False, allow_null=True)

    def to_dto(self) -> CompensationCreateDTO:
        return CompensationCreateDTO(**self.validated_data)


class DocumentSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeDocument
        fields = [
            'id', 'employee', 'document_type', 'document_name', 'file_path',
            'issue_date', 'expiry_date', 'is_active', 'uploaded_at',
            'created_at', 'updated_at'
        ]


class DocumentCreateSerializer(serializers.Serializer):
    document_name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    file_path = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    document_type = serializers.ChoiceField(choices=EmployeeDocument.DOCUMENT_TYPE_CHOICES, required=False)
    issue_date = serializers.DateField(required=False, allow_null=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> DocumentCreateDTO:
        return DocumentCreateDTO(**self.validated_data)


class WorkPassSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeWorkPass
        fields = [
            'id', 'employee', 'status', 'work_permit_number', 'fin_number',
            'application_date', 'issuance_date', 'expiry_date', 'medical_date',
            'is_current', 'created_at', 'updated_at'
        ]


class WorkPassCreateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=EmployeeWorkPass.STATUS_CHOICES, required=False, allow_null=True)
    work_permit_number = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    fin_number = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    application_date = serializers.DateField(required=False, allow_null=True)
    issuance_date = serializers.DateField(required=False, allow_null=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)
    medical_date = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> WorkPassCreateDTO:
        return WorkPassCreateDTO(**self.validated_data)


class QualificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeQualification
        fields = [
            'id', 'employee', 'degree', 'major', 'institution', 'completion_year',
            'document', 'verification_status', 'created_at', 'updated_at'
        ]


class QualificationCreateSerializer(serializers.Serializer):
    degree = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    institution = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    completion_year = serializers.IntegerField(required=False, allow_null=True)
    major = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    document_id = serializers.IntegerField(required=False, allow_null=True)
    verification_status = serializers.ChoiceField(
        choices=EmployeeQualification.VERIFICATION_STATUS_CHOICES, required=False
    )

    def to_dto(self) -> QualificationCreateDTO:
        return QualificationCreateDTO(**self.validated_data)


class CertificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmployeeCertification
        fields = [
            'id', 'employee', 'certification_name', 'certification_type',
            'issue_date', 'expiry_date', 'ownership', 'document',
            'is_active', 'reminder_sent', 'created_at', 'updated_at'
        ]


class CertificationCreateSerializer(serializers.Serializer):
    certification_name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    issue_date = serializers.DateField(required=False, allow_null=True)
    certification_type = serializers.ChoiceField(
        choices=EmployeeCertification.CERTIFICATION_TYPE_CHOICES, required=False
    )
    expiry_date = serializers.DateField(required=False, allow_null=True)
    ownership = serializers.ChoiceField(choices=EmployeeCertification.OWNERSHIP_CHOICES, required=False)
    document_id = serializers.IntegerField(required=False, allow_null=True)

    def to_dto(self) -> CertificationCreateDTO:
        return CertificationCreateDTO(**self.validated_data)
