"""
Hospital Management API

A FastAPI-based backend for a hospital: patient and doctor accounts,
appointment booking with a role-checked lifecycle, medication tracking,
adverse drug reaction reports and symptom triage helpers.
"""

__version__ = "1.0.0"
