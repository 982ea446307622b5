"""
Serializers for Employee model
"""
from rest_framework import serializers
from HR.employee.models import Employee, JobAssignmentRecord
from HR.employee.models.employee import GENDER_CHOICES
from HR.employee.dtos import EmployeeCreateDTO, EmployeeUpdateDTO
from core.base.models import StatusChoices


class EmployeeSerializer(serializers.ModelSerializer):
    """Read serializer for Employee model"""
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Employee
        fields = [
            'id', 'employee_code',
            'first_name', 'middle_name', 'last_name', 'display_name', 'full_name',
            'gender', 'date_of_birth', 'marital_status', 'nationality', 'blood_group',
            'work_email', 'personal_email', 'mobile_number', 'work_number',
            'profile_photo_path', 'status', 'termination_date',
            'created_at', 'updated_at'
        ]


class EmployeeLookupSerializer(serializers.ModelSerializer):
    """Minimal shape for pickers"""
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Employee
        fields = ['id', 'employee_code', 'full_name', 'status']


class EmployeeCreateSerializer(serializers.Serializer):
    """
    Write serializer for creating an employee.

    Also accepts the job fields used to seed the first job record when the
    payload goes through onboarding.
    """
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    date_of_birth = serializers.DateField()
    middle_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    gender = serializers.ChoiceField(choices=GENDER_CHOICES, required=False, allow_null=True)
    marital_status = serializers.ChoiceField(choices=Employee.MARITAL_STATUS_CHOICES, required=False, allow_null=True)
    nationality = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    blood_group = serializers.CharField(max_length=10, required=False, allow_blank=True, allow_null=True)
    work_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    personal_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    mobile_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    work_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    profile_photo_path = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=StatusChoices.choices, required=False)

    # Job fields
    designation = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    reporting_to_id = serializers.IntegerField(required=False, allow_null=True)
    joining_date = serializers.DateField(required=False, allow_null=True)
    time_type = serializers.ChoiceField(choices=JobAssignmentRecord.TIME_TYPE_CHOICES, required=False, allow_null=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    legal_entity = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    business_unit = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    worker_type = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    probation_policy = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    notice_period = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    secondary_job_titles = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, allow_null=True
    )
    job_status = serializers.ChoiceField(choices=StatusChoices.choices, required=False)

    def to_dto(self) -> EmployeeCreateDTO:
        return EmployeeCreateDTO(**self.validated_data)


class EmployeeUpdateSerializer(serializers.Serializer):
    """Write serializer for partial employee updates"""
    employee_code = serializers.CharField(max_length=50, required=False)
    first_name = serializers.CharField(max_length=100, required=False)
    middle_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    last_name = serializers.CharField(max_length=100, required=False)
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    gender = serializers.ChoiceField(choices=GENDER_CHOICES, required=False, allow_null=True)
    date_of_birth = serializers.DateField(required=False)
    marital_status = serializers.ChoiceField(choices=Employee.MARITAL_STATUS_CHOICES, required=False, allow_null=True)
    nationality = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    blood_group = serializers.CharField(max_length=10, required=False, allow_blank=True, allow_null=True)
    work_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    personal_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    mobile_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    work_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    profile_photo_path = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=StatusChoices.choices, required=False)

    def to_dto(self, employee_id: int) -> EmployeeUpdateDTO:
        return EmployeeUpdateDTO(employee_id=employee_id, **self.validated_data)
