"""
Serializers for JobAssignmentRecord model
"""
from rest_framework import serializers
from HR.employee.models import JobAssignmentRecord
from HR.employee.dtos import JobAssignmentDTO
from core.base.models import StatusChoices


class JobAssignmentRecordSerializer(serializers.ModelSerializer):
    """Read serializer for JobAssignmentRecord model"""
    employee = serializers.IntegerField(source='employee.id', read_only=True)
    employee_code = serializers.CharField(source='employee.employee_code', read_only=True)
    reporting_to = serializers.IntegerField(source='reporting_to.id', read_only=True, allow_null=True)
    reporting_to_name = serializers.CharField(source='reporting_to.full_name', read_only=True, allow_null=True)
    probation_end_date = serializers.DateField(read_only=True)

    class Meta:
        model = JobAssignmentRecord
        fields = [
            'id', 'employee', 'employee_code',
            'designation', 'department',
            'reporting_to', 'reporting_to_name',
            'joining_date', 'status', 'time_type', 'location',
            'legal_entity', 'business_unit', 'worker_type',
            'probation_policy', 'probation_end_date', 'notice_period',
            'secondary_job_titles',
            'effective_from', 'effective_to', 'is_current',
            'created_at', 'updated_at'
        ]


class JobAssignmentWriteSerializer(serializers.Serializer):
    """Write serializer for initial records and corrections"""
    designation = serializers.CharField(max_length=100, required=False)
    department = serializers.CharField(max_length=100, required=False)
    reporting_to_id = serializers.IntegerField(required=False, allow_null=True)
    joining_date = serializers.DateField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=StatusChoices.choices, required=False)
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
    effective_from = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> JobAssignmentDTO:
        return JobAssignmentDTO(**self.validated_data)


class PromoteSerializer(JobAssignmentWriteSerializer):
    """Write serializer for promotions; the start date is mandatory"""
    effective_from = serializers.DateField()
