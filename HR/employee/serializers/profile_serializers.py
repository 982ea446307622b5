"""
Serializers for the 1:1 satellite profiles
"""
from rest_framework import serializers
from HR.employee.models import (
    EmployeeAddress,
    EmployeeEducation,
    EmployeeExperience,
    EmployeeFamily,
    EmployeeIdentity,
    EmployeeSkills,
)

AUDIT_FIELDS = ['created_at', 'updated_at', 'created_by', 'updated_by']


class ProfileSerializer(serializers.ModelSerializer):
    """
    Base serializer for profiles.

    Rejects unknown keys instead of silently dropping them. Model-level
    validation runs in ProfileService.
    """

    def validate(self, attrs):
        unknown = sorted(set(self.initial_data) - set(self.fields))
        if unknown:
            raise serializers.ValidationError({name: 'Unknown field' for name in unknown})
        return attrs


class AddressProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeAddress
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


class EducationProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeEducation
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


class ExperienceProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeExperience
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


class FamilyProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeFamily
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


class IdentityProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeIdentity
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


class SkillsProfileSerializer(ProfileSerializer):
    class Meta:
        model = EmployeeSkills
        exclude = AUDIT_FIELDS
        read_only_fields = ['id', 'employee']


PROFILE_SERIALIZERS = {
    'address': AddressProfileSerializer,
    'education': EducationProfileSerializer,
    'experience': ExperienceProfileSerializer,
    'family': FamilyProfileSerializer,
    'identity': IdentityProfileSerializer,
    'skills': SkillsProfileSerializer,
}
