"""
Test suite for the Hospital Management API.

Integration tests drive the FastAPI app through TestClient; the rule
modules (predictions, ADR detection, early detection) are tested directly.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
