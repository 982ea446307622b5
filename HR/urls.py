"""
HR App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    # Employee Domain URLs
    path('', include('HR.employee.urls')),
]
