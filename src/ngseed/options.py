"""Run configuration and mutable state for a single generator run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Options", "RunState"]


class Options(BaseModel):
    """Options supplied on the command line, fixed for the whole run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project: str | None = Field(None, description="Project name for the new project.")
    verbose: bool = Field(False, description="Verbosely log progress.")
    debug: bool = Field(False, description="Trace internal state.")
    force: bool = Field(False, description="Overwrite existing files that differ from the template output.")


@dataclass(slots=True)
class RunState:
    """Values resolved while the pipeline runs.

    Attributes
    ----------
    destination_root:
        Directory that receives the generated files. Starts at the directory
        the generator was launched from and moves into a new sub-directory
        when the user asks for one.
    project:
        The resolved project name. ``None`` until the prompting phase ran.
    create_user_config:
        Answer to the user override question. Recorded, nothing acts on it yet.
    """

    destination_root: Path
    project: str | None = None
    create_user_config: bool = False
