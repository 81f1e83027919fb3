"""HR Engine package.

Pure calculation engine for an HR application, organized by feature modules
(attendance, payroll, shifts) with thin service layers over collaborator
repositories.
"""

from .attendance.classifier import AttendanceClassifier, classify_attendance
from .payroll.settlement import calculate_final_settlement, generate_settlement_report

__all__ = [
    "AttendanceClassifier",
    "calculate_final_settlement",
    "classify_attendance",
    "generate_settlement_report",
]
