"""
Model registration: import every table model here so SQLModel.metadata knows it
before create_all runs.
"""
from apps.departments.models import Department

__all__ = ["Department"]
