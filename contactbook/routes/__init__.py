# Routes package init
"""
Contactbook — Routes Package
=============================

Route Inventory:
    - contacts.py:  /contacts/...   (HTML pages for the contact CRUD surface)
    - health.py:    GET /health     (service health check)

Design Principle:
    Routes stay thin: read the path and form, call ContactService, choose the
    response. Validation, sanitization and error typing live in the service.
"""
