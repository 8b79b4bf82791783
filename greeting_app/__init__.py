"""Greeting application package.

Contains both the HTTP data service (``interfaces.api``) and the page
component that consumes it (``interfaces.web``).
"""
