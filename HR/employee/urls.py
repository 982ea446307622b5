"""
URL configuration for HR Employee module.
"""
from django.urls import path

from . import views

app_name = 'employee'

urlpatterns = [
    # Employee endpoints
    path('employees/', views.employee_list, name='employee_list'),
    path('employees/lookup/', views.employee_lookup, name='employee_lookup'),
    path('employees/onboard/', views.employee_onboard, name='employee_onboard'),
    path('employees/<int:pk>/', views.employee_detail, name='employee_detail'),

    # Job history endpoints
    path('employees/<int:pk>/job-history/', views.employee_job_history, name='employee_job_history'),
    path('employees/<int:pk>/job-history/current/', views.employee_current_job, name='employee_current_job'),
    path('employees/<int:pk>/job-history/initial/', views.employee_initial_job, name='employee_initial_job'),
    path('job-history/', views.job_history_list, name='job_history_list'),
    path('job-history/<int:pk>/', views.job_record_detail, name='job_record_detail'),
    path('job-history/<int:pk>/set-current/', views.job_record_set_current, name='job_record_set_current'),

    # Dependent endpoints
    path('employees/<int:pk>/contacts/', views.employee_contacts, name='employee_contacts'),
    path('employees/<int:pk>/compensations/', views.employee_compensations, name='employee_compensations'),
    path('employees/<int:pk>/documents/', views.employee_documents, name='employee_documents'),
    path('employees/<int:pk>/work-passes/', views.employee_work_passes, name='employee_work_passes'),
    path('employees/<int:pk>/qualifications/', views.employee_qualifications, name='employee_qualifications'),
    path('employees/<int:pk>/certifications/', views.employee_certifications, name='employee_certifications'),

    # Profile endpoints
    path('employees/<int:pk>/profiles/<str:kind>/', views.employee_profile, name='employee_profile'),
]
