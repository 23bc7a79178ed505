"""
Django settings package for the Site Counts project.

Selects the appropriate settings module based on DJANGO_SETTINGS_MODULE environment variable.
Defaults to development settings if not specified.
"""
