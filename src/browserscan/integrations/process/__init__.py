from browserscan.integrations.process.abc import ProcessResult, ProcessRunner
from browserscan.integrations.process.real import RealProcessRunner

__all__ = [
    "ProcessResult",
    "ProcessRunner",
    "RealProcessRunner",
]
