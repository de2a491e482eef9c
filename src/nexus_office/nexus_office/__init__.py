"""Nexus Office package.

Organized by feature modules (users, attendance, leaves, payroll, ...) on top of
a browser-style local key-value store, with a thin Flask controller layer and
service/repository layers.
"""
