"""Interactive generator for new Angular template projects.

The package prompts for a project name, renders ``package.json`` from a
bundled template and records the choice in a per-project config file. The
pipeline can be driven programmatically or through the ``ngseed`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ConfigStore
from .console import Logger
from .errors import ConfigStoreError, PromptError, ScaffoldError, TemplateRenderingError
from .options import Options, RunState
from .pipeline import PHASE_ORDER, Phase, ScaffoldPipeline
from .prompts import Question, RichPrompter
from .template import TemplateRenderer, WriteStatus

__all__ = [
    "PHASE_ORDER",
    "ConfigStore",
    "ConfigStoreError",
    "Logger",
    "Options",
    "Phase",
    "PromptError",
    "Question",
    "RichPrompter",
    "RunState",
    "ScaffoldError",
    "ScaffoldPipeline",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WriteStatus",
]
