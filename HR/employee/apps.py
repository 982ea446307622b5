"""
Employee App Configuration
"""

from django.apps import AppConfig


class EmployeeConfig(AppConfig):
    """Configuration for the Employee app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.employee'
    label = 'employee'
    verbose_name = 'Employee Records'
