"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from gomanctl.core.models import Project, License, Settings, GeneratedFile
"""

from gomanctl.core.models.project import License, Project
from gomanctl.core.models.settings import Settings
from gomanctl.core.models.template import EmissionContext, GeneratedFile

__all__ = [
    # template.py
    "EmissionContext",
    "GeneratedFile",
    # project.py
    "License",
    "Project",
    # settings.py
    "Settings",
]
