"""Setup steps for creating a project from the Nuxt template."""

from room302_template.core.answers import LICENSES, RepoScope, SetupAnswers, UIFramework
from room302_template.core.context import SetupContext
from room302_template.core.pipeline import run_setup
from room302_template.core.step_result import StepResult, StepStatus

__all__ = [
    "LICENSES",
    "RepoScope",
    "SetupAnswers",
    "SetupContext",
    "StepResult",
    "StepStatus",
    "UIFramework",
    "run_setup",
]
