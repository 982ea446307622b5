"""
Employee Domain Views
"""
from .employee_views import (
    employee_list,
    employee_lookup,
    employee_onboard,
    employee_detail,
)
from .job_history_views import (
    employee_job_history,
    employee_current_job,
    employee_initial_job,
    job_history_list,
    job_record_detail,
    job_record_set_current,
)
from .dependent_views import (
    employee_contacts,
    employee_compensations,
    employee_documents,
    employee_work_passes,
    employee_qualifications,
    employee_certifications,
)
from .profile_views import employee_profile
