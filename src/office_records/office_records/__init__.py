"""Office Records package.

Feature modules (files, records, forwarding, leaves, employees, ...) each keep
a repository interface, its MySQL implementation, a service holding the
business rules and a thin Flask controller.
"""
