"""Application context with dependency injection."""

import sys
from dataclasses import dataclass

from browserscan.core.discovery import BrowserFinder
from browserscan.core.global_config import GlobalConfig, load_global_config
from browserscan.integrations.process.abc import ProcessRunner
from browserscan.integrations.process.real import RealProcessRunner


@dataclass(frozen=True)
class BrowserScanContext:
    """Immutable context holding all dependencies for browserscan operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    process: ProcessRunner
    global_config: GlobalConfig
    platform: str  # sys.platform at CLI invocation

    @property
    def finder(self) -> BrowserFinder:
        return BrowserFinder(
            self.process,
            applications_dir=self.global_config.applications_dir,
            package_manager=self.global_config.package_manager,
            max_workers=self.global_config.max_workers,
        )

    @staticmethod
    def for_test(
        process: ProcessRunner | None = None,
        global_config: GlobalConfig | None = None,
        platform: str = "darwin",
    ) -> "BrowserScanContext":
        """Create test context with optional pre-configured integrations.

        Args:
            process: Optional ProcessRunner. If None, creates an empty
                FakeProcessRunner (every command fails to spawn).
            global_config: Optional GlobalConfig. If None, uses defaults.
            platform: Platform name reported to commands (default "darwin")

        Example:
            >>> runner = FakeProcessRunner(results={...})
            >>> ctx = BrowserScanContext.for_test(process=runner)
        """
        from browserscan.integrations.process.fake import FakeProcessRunner

        if process is None:
            process = FakeProcessRunner()

        if global_config is None:
            global_config = GlobalConfig.defaults()

        return BrowserScanContext(
            process=process,
            global_config=global_config,
            platform=platform,
        )


def create_context() -> BrowserScanContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the global config file is malformed
    """
    return BrowserScanContext(
        process=RealProcessRunner(),
        global_config=load_global_config(),
        platform=sys.platform,
    )
