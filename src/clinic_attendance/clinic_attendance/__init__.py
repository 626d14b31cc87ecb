"""Clinic attendance package.

This package is organized by feature modules (staff, attendance, schedules,
reports, ...) with a thin Flask controller layer and service/repository layers.
"""
