"""
Build runner for CLI integration.

This module provides BuildRunner, which runs the caller's build command and
then post-processes every artifact it finds. The build's exit status is the
only thing that propagates; post-processing outcomes are logged and reported
but never change it.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..models.config import AppConfig
from ..models.results import ArtifactReport, RunSummary, StepOutcome, StepResult
from ..shrink import SKIPPED_EXIT_STATUS, FallbackChain, file_size, find_artifacts, render_procedure
from ..system import ScratchScript, ToolLocator, run_build_command, run_tool

logger = logging.getLogger(__name__)


class BuildRunner:
    """
    Runs a build command, then shrinks its output binaries.

    The sequence for one run is:

    1. Write the post-processing procedure to a temporary script. This is
       the only step allowed to fail the run; ScratchScriptError propagates
       before the build starts.
    2. Run the build command with inherited streams and record its status.
    3. Find artifacts under the target directory and post-process each one,
       one after another.
    4. Remove the temporary script (on every exit path) and return the
       recorded status.
    """

    def __init__(
        self,
        app_config: AppConfig,
        locator: Optional[ToolLocator] = None,
        cwd: Optional[Path] = None,
    ):
        """
        Args:
            app_config: Validated application configuration
            locator: Tool lookup used by the fallback chain, defaults to PATH
            cwd: Directory the build runs in and relative target paths
                are resolved against, defaults to the current directory
        """
        self.app_config = app_config
        self.locator = locator or ToolLocator()
        self.cwd = Path(cwd) if cwd is not None else None
        self.chain = FallbackChain.from_config(
            app_config.tools,
            app_config.wrapper.min_compress_size,
            locator=self.locator,
        )

    @property
    def target_dir(self) -> Path:
        target_dir = self.app_config.wrapper.target_dir
        if self.cwd is not None and not target_dir.is_absolute():
            return self.cwd / target_dir
        return target_dir

    def run(self, build_command: Sequence[str]) -> RunSummary:
        """
        Run the build and post-process its artifacts.

        Args:
            build_command: Program and arguments, passed through unmodified

        Returns:
            RunSummary with the build's exit status and one report per artifact

        Raises:
            ScratchScriptError: If the temporary script cannot be created
        """
        wrapper = self.app_config.wrapper
        procedure = render_procedure(self.app_config.tools, wrapper.min_compress_size)

        with ScratchScript(procedure) as script:
            exit_status = run_build_command(build_command, cwd=self.cwd)

            reports: List[ArtifactReport] = []
            for artifact in find_artifacts(self.target_dir, wrapper.artifact_names):
                if wrapper.mode == "script":
                    reports.append(self._run_script(script.path, artifact))
                else:
                    reports.append(self.chain.process(artifact))

        return RunSummary(exit_status=exit_status, artifacts=reports)

    def _run_script(self, script_path: Path, artifact: Path) -> ArtifactReport:
        """Post-process one artifact by running the rendered procedure with sh."""
        report = ArtifactReport(path=artifact, size_before=file_size(artifact))

        shell = self.locator.find("sh")
        if shell is None:
            logger.error(f"sh not found, cannot post-process {artifact}")
            report.steps.append(StepResult("script", StepOutcome.UNAVAILABLE, "sh not found"))
            return report

        returncode = run_tool([shell, str(script_path), str(artifact)])
        if returncode == 0:
            report.steps.append(StepResult("script", StepOutcome.SUCCEEDED, "procedure completed"))
            report.winner = "script"
        elif returncode == SKIPPED_EXIT_STATUS:
            report.steps.append(StepResult("script", StepOutcome.SKIPPED, "below the size threshold"))
        else:
            report.steps.append(
                StepResult("script", StepOutcome.FAILED, f"procedure exited with {returncode}")
            )

        report.size_after = file_size(artifact)
        logger.info(report.describe())
        return report
