"""Session-start pipeline: trigger, load, summarize, emit."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from .config import HookConfig, debug_requested, load_config
from .loader import IntelLoader
from .logging import configure_logging, get_logger
from .output import SummaryWriter
from .summary import generate_summary
from .trigger import parse_payload, should_inject


class SessionStartHook:
    """Runs the hook for one invocation.

    ``run`` is the only entrypoint callers need; it never raises and reports
    whether a block was written.
    """

    def __init__(
        self,
        base_dir: Path,
        *,
        config: HookConfig | None = None,
        writer: SummaryWriter | None = None,
        verbose: bool = False,
        manage_logging: bool = False,
    ) -> None:
        self.base_dir = Path(base_dir)
        self._config = config
        self.writer = writer or SummaryWriter()
        self.verbose = verbose
        self.manage_logging = manage_logging
        self.logger = get_logger("hook")

    @property
    def config(self) -> HookConfig:
        if self._config is None:
            self._config = load_config(self.base_dir)
        return self._config

    def run(self, stdin: TextIO, stdout: TextIO) -> bool:
        """Process one invocation; all failures end silently with no output."""
        try:
            if self.manage_logging:
                self._configure_logging()
            payload_text = stdin.read()
            summary = self.render(payload_text)
            return self.writer.emit(summary, stdout)
        except Exception:
            self.logger.debug("Session-start summary suppressed after error", exc_info=True)
            return False

    def render(self, payload_text: str) -> Optional[str]:
        """Return the summary for an invocation payload, or None to stay quiet.

        Errors propagate; ``run`` is where they are contained.
        """
        payload = parse_payload(payload_text)
        if not should_inject(payload):
            return None
        return self.summarize()

    def summarize(self) -> Optional[str]:
        """Load intel from the configured directory and build the summary."""
        loader = IntelLoader(self.base_dir, self.config.intel_dir)
        bundle = loader.load()
        if bundle is None:
            return None
        summary = generate_summary(bundle.index, bundle.conventions)
        if summary is None:
            self.logger.debug("Intel index is empty; nothing to inject")
        return summary

    def _configure_logging(self) -> None:
        # CODEINTEL_DEBUG applies before the config file is read.
        configure_logging(verbose=self.verbose or debug_requested())
        config = self.config
        if config.verbose or config.log_file is not None:
            configure_logging(
                verbose=self.verbose or config.verbose,
                log_file=config.log_file,
            )


__all__ = ["SessionStartHook"]
