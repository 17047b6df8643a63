"""Rental admin package.

Back office for an equipment rental company, organized by feature modules
(employees, attendance, leaves, payroll, rentals) with a thin Flask
controller layer over service/repository layers.
"""
