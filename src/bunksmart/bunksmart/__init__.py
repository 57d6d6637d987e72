"""BunkSmart package.

This package is organized by feature modules (metrics, subjects, users, advisor, ...)
with a thin Flask controller layer over service/repository layers.
"""
