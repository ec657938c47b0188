# ============================================
# issues/choices.py
# ============================================
"""Canonical enumerations shared by models, serializers, statistics and accounts."""
from django.db import models


class Status(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ASSIGNED = 'assigned', 'Assigned'
    IN_PROGRESS = 'in_progress', 'In Progress'
    RESOLVED = 'resolved', 'Resolved'
    REJECTED = 'rejected', 'Rejected'


TERMINAL_STATUSES = frozenset({Status.RESOLVED, Status.REJECTED})


class Priority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'
    URGENT = 'urgent', 'Urgent'


class Category(models.TextChoices):
    ACADEMIC = 'Academic Issue', 'Academic Issue'
    ADMISSION = 'Admission & Registration', 'Admission & Registration'
    FACILITIES = 'Facilities & Infrastructure', 'Facilities & Infrastructure'
    IT = 'IT & Technology', 'IT & Technology'
    LIBRARY = 'Library Services', 'Library Services'
    STUDENT_SERVICES = 'Student Services', 'Student Services'
    TRANSPORTATION = 'Transportation', 'Transportation'
    HOSTEL = 'Hostel/Accommodation', 'Hostel/Accommodation'
    FINANCIAL = 'Financial Services', 'Financial Services'
    HEALTH = 'Health & Safety', 'Health & Safety'
    OTHER = 'Other', 'Other'


class Department(models.TextChoices):
    CSE = 'Computer Science & Engineering', 'Computer Science & Engineering'
    EEE = 'Electrical & Electronic Engineering', 'Electrical & Electronic Engineering'
    CIVIL = 'Civil Engineering', 'Civil Engineering'
    BBA = 'Business Administration', 'Business Administration'
    ECONOMICS = 'Economics', 'Economics'
    ENGLISH = 'English', 'English'
    MATHEMATICS = 'Mathematics', 'Mathematics'
    PHYSICS = 'Physics', 'Physics'
    CHEMISTRY = 'Chemistry', 'Chemistry'
    PHARMACY = 'Pharmacy', 'Pharmacy'
    STUDENT_AFFAIRS = 'Student Affairs', 'Student Affairs'
    ADMISSIONS = 'Admissions Office', 'Admissions Office'
    IT_DEPARTMENT = 'IT Department', 'IT Department'
    FINANCE = 'Finance Office', 'Finance Office'
    LIBRARY = 'Library', 'Library'
    REGISTRAR = 'Registrar Office', 'Registrar Office'
    OTHER = 'Other', 'Other'


# Input limits
TITLE_MIN_LENGTH = 5
DESCRIPTION_MIN_LENGTH = 20
MAX_ATTACHMENTS = 5
