"""Phase driven generator that scaffolds a new Angular template project."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable

from .config import ConfigStore
from .console import DEBUG, VERBOSE, VERBOSE_PRIORITY, Logger
from .errors import ScaffoldError
from .options import Options, RunState
from .prompts import NEW_FOLDER, PROJECT_NAME, USER_CONFIG, Prompter, RichPrompter
from .template import TemplateRenderer

__all__ = ["PHASE_ORDER", "Phase", "ScaffoldPipeline"]


LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    """Named steps of a generator run, declared in running order."""

    INITIALIZING = "initializing"
    PROMPTING = "prompting"
    DEFAULT = "default"
    WRITING = "writing"
    CONFLICTS = "conflicts"
    INSTALL = "install"
    END = "end"


PHASE_ORDER: tuple[Phase, ...] = tuple(Phase)


class ScaffoldPipeline:
    """Prompt for a project name and write ``package.json`` for it.

    Phases run strictly in :data:`PHASE_ORDER`. An exception raised by any
    phase stops the run; later phases are not attempted. ``conflicts`` has no
    handler here because the template writer decides what happens to files
    that already exist.
    """

    namespace = "ngseed"

    def __init__(
        self,
        options: Options,
        *,
        prompter: Prompter | None = None,
        renderer: TemplateRenderer | None = None,
        logger: Logger | None = None,
        context_root: Path | str | None = None,
    ) -> None:
        self.options = options
        self.prompter = prompter or RichPrompter()
        self.renderer = renderer or TemplateRenderer(missing="error")
        self.logger = logger or Logger()
        self.context_root = Path(context_root or Path.cwd()).resolve()
        self.state = RunState(destination_root=self.context_root)
        self.completed_phases: list[Phase] = []
        self._config: ConfigStore | None = None
        self._handlers: dict[Phase, Callable[[], None]] = {
            Phase.INITIALIZING: self.initializing,
            Phase.PROMPTING: self.prompting,
            Phase.DEFAULT: self.default,
            Phase.WRITING: self.writing,
            Phase.INSTALL: self.install,
            Phase.END: self.end,
        }

        if options.verbose:
            self.logger.log(VERBOSE_PRIORITY, "Generator constructor.")
        self._log_debug(f"Called with options of: {options.model_dump()!r}")

    @property
    def config(self) -> ConfigStore:
        """Config store for the current destination root."""

        if self._config is None or self._config.root != self.state.destination_root:
            self._config = ConfigStore(self.state.destination_root, self.namespace)
        return self._config

    def destination_path(self, *parts: str) -> Path:
        return self.state.destination_root.joinpath(*parts)

    def run(self) -> RunState:
        """Run every phase in order and return the resolved state."""

        for phase in PHASE_ORDER:
            self.run_phase(phase)
        return self.state

    def run_phase(self, phase: Phase) -> None:
        handler = self._handlers.get(phase)
        if handler is None:
            return
        LOGGER.debug("entering phase %s", phase.value)
        handler()
        self.completed_phases.append(phase)

    def initializing(self) -> None:
        self._log_priority(Phase.INITIALIZING.value)

    def prompting(self) -> None:
        self._log_priority(Phase.PROMPTING.value)

        if self.options.project:
            self.state.project = self.options.project
        elif self.prompter.ask(NEW_FOLDER):
            self.state.project = self.prompter.ask(PROJECT_NAME)
            self.state.destination_root = self.context_root / self.state.project
        else:
            self.state.project = self.context_root.name

        if self.options.verbose:
            self.logger.log(VERBOSE, f"Project destination: {self.state.destination_root}")
        self.config.set("project", self.state.project)

        self.state.create_user_config = bool(self.prompter.ask(USER_CONFIG))

    def default(self) -> None:
        self._log_priority(Phase.DEFAULT.value)
        self._log_debug(str(self.renderer.source_root))

    def writing(self) -> None:
        self._log_priority(Phase.WRITING.value)
        if self.state.project is None:
            raise ScaffoldError("project name must be resolved before writing")

        destination = self.destination_path("package.json")
        status = self.renderer.copy_template(
            "package.json",
            destination,
            {"project": self.state.project},
            force=self.options.force,
        )
        if self.options.verbose:
            self.logger.log(VERBOSE, f"{status.value} {destination}")

        self.config.save()

    def install(self) -> None:
        self._log_priority(Phase.INSTALL.value)

    def end(self) -> None:
        self._log_priority(Phase.END.value)
        self.logger.info("All done!")

    def _log_priority(self, priority: str) -> None:
        if self.options.verbose:
            self.logger.log(VERBOSE_PRIORITY, f"Running {priority} priority.")

    def _log_debug(self, message: str) -> None:
        if self.options.debug:
            self.logger.log(DEBUG, message)
