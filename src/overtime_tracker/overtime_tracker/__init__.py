"""Overtime Tracker package.

Organized by feature modules (users, weeks, autosave, payroll, ...) with a thin
Flask controller layer over service/repository layers.
"""
