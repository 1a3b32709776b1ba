"""Attendance Tracker package.

This package is organized by feature modules (users, attendance, metrics)
with a thin Flask controller layer on top of plain service/repository layers.
"""
