"""Payroll System package.

Organized by feature modules (employees, payroll, ...) with a thin Flask
controller layer over service/repository layers. The payroll calculation
rules live in ``payroll`` and depend on nothing but the standard library.
"""

__version__ = "0.1.0"
