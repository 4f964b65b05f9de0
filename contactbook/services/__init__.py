# Services package init
"""
Contactbook — Services Layer
=============================

What:  Business logic between the routes (HTTP) and the repositories (storage).
How:   Services accept submitted form data, apply validation and sanitization,
       and return Contact records or raise typed exceptions.

Service Inventory:
    - contact_input: validate_contact_data() and sanitize_contact_data()
    - ContactService: orchestrates validate → sanitize → persist
"""
