"""Check-in photo validation package.

Organized by feature modules (annotation, scoring, validation, ...) with a
thin Flask controller layer on top of service/repository layers. The
scoring modules are pure and never touch the annotation provider or the
database.
"""
