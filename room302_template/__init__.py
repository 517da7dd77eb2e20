"""
room302-template

Interactive wizard that clones the Room302 Nuxt template, personalizes it
and sets up git, GitHub and dependencies for a new project.
"""

__version__ = "1.2.0"

from room302_template.cli.commands import main
from room302_template.core.pipeline import run_setup

__all__ = [
    "main",
    "run_setup",
]
