"""
hostboard - operator dashboard backend for running Ansible playbooks
against inventory hosts.

Subpackages:
- hostboard.core: logging, errors, settings
- hostboard.execution: process runner and operation dispatcher
- hostboard.sources: live and sample data sources
- hostboard.api: FastAPI application
- hostboard.cli: Typer command line
"""

__version__ = "0.1.0"
