import logging

from django.db import transaction
from django.core.exceptions import ValidationError

from core.base.exceptions import NotFoundError, ConflictError, store_errors
from HR.employee.models import (
    EmployeeAddress,
    EmployeeEducation,
    EmployeeExperience,
    EmployeeFamily,
    EmployeeIdentity,
    EmployeeSkills,
)
from HR.employee.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

PROFILE_MODELS = {
    'address': EmployeeAddress,
    'education': EmployeeEducation,
    'experience': EmployeeExperience,
    'family': EmployeeFamily,
    'identity': EmployeeIdentity,
    'skills': EmployeeSkills,
}

NON_EDITABLE_FIELDS = {'id', 'employee', 'created_at', 'updated_at', 'created_by', 'updated_by'}


def editable_fields(model):
    return {f.name for f in model._meta.concrete_fields} - NON_EDITABLE_FIELDS


class ProfileService:
    """
    Generic service for the 1:1 satellite profiles.

    `kind` is one of PROFILE_MODELS. Each employee has at most one profile
    of each kind.
    """

    @staticmethod
    def model_for(kind: str):
        try:
            return PROFILE_MODELS[kind]
        except KeyError:
            raise NotFoundError(f"Unknown profile type '{kind}'")

    @staticmethod
    def _check_fields(model, data: dict):
        unknown = sorted(set(data) - editable_fields(model))
        if unknown:
            raise ValidationError({name: 'Unknown field' for name in unknown})

    @staticmethod
    @transaction.atomic
    def create(user, kind: str, employee_id: int, data: dict):
        model = ProfileService.model_for(kind)
        ProfileService._check_fields(model, data)
        employee = EmployeeService.get(employee_id)

        if model.objects.filter(employee=employee).exists():
            raise ConflictError(
                f"Employee already has a {kind} profile",
                {'employee_id': f'{kind} profile already exists'}
            )

        profile = model(employee=employee, created_by=user, updated_by=user, **data)
        profile.full_clean(validate_unique=False)

        with store_errors(f"Employee already has a {kind} profile"):
            profile.save()

        logger.info("Created %s profile for employee %s", kind, employee.pk)
        return profile

    @staticmethod
    def get(kind: str, employee_id: int):
        model = ProfileService.model_for(kind)
        profile = model.objects.filter(employee_id=employee_id).first()
        if profile is None:
            raise NotFoundError(f"No {kind} profile for employee {employee_id}")
        return profile

    @staticmethod
    @transaction.atomic
    def update(user, kind: str, employee_id: int, data: dict):
        model = ProfileService.model_for(kind)
        ProfileService._check_fields(model, data)
        profile = ProfileService.get(kind, employee_id)

        for field_name, value in data.items():
            setattr(profile, field_name, value)
        profile.updated_by = user
        profile.full_clean(validate_unique=False)

        with store_errors():
            profile.save()
        return profile
