# app/routers/__init__.py

from . import billing
from . import projects
from . import workspace
from . import system

__all__ = [
    "billing",
    "projects",
    "workspace",
    "system",
]
