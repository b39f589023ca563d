"""GASC Attendance Management package.

This package is organized by feature modules (departments, students,
attendance, reports, ...) with a thin Flask controller layer on top of
service/registry layers that share one record store.
"""
