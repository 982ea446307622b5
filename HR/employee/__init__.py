"""
Employee Domain

Handles all employee-related record keeping including:
- Employee master data and lifecycle status
- Temporally-versioned job assignment history
- Onboarding dependents (contact, compensation, documents, work pass,
  qualifications, certifications)
- 1:1 satellite profiles (address, education, experience, family,
  identity, skills)
"""
