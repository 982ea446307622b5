from datetime import date
from django.contrib.auth import get_user_model


def create_test_user(username='hr_admin', **extra):
    """Helper to create the acting user for service and API tests"""
    User = get_user_model()
    return User.objects.create_user(
        username=username,
        email=extra.pop('email', f'{username}@example.com'),
        password=extra.pop('password', 'testpass123'),
        **extra
    )


def employee_payload(**overrides):
    """Minimal valid employee field set, suitable for EmployeeCreateDTO(**...)"""
    data = {
        'first_name': 'Jane',
        'last_name': 'Doe',
        'date_of_birth': date(1990, 1, 1),
        'gender': 'female',
        'nationality': 'Singaporean',
        'marital_status': 'single',
        'work_email': 'jane.doe@example.com',
    }
    data.update(overrides)
    return data
