"""Route blueprints for the web application."""

from .projects import projects_bp
from .languages import languages_bp
from .settings import settings_bp

__all__ = [
    "projects_bp",
    "languages_bp",
    "settings_bp",
]
