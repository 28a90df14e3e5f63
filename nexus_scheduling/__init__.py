"""
Nexus Scheduling - bookable session slots for students and staff.
"""

__version__ = "0.1.0"
