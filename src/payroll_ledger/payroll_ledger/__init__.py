"""Payroll Ledger package.

This package is organized by feature modules (employees, attendance, advances,
payroll, ...) with a thin Flask controller layer and service/repository layers.
"""
