"""disk_audit — find the directories and files eating your disk."""

__all__ = [
    "__version__",
    "scan_tree",
    "ConfigError",
    "DirectoryScanner",
    "ScanConfig",
    "ScanReport",
    "WalkResult",
]
__version__ = "0.1.0"

from disk_audit.api import scan_tree  # noqa: E402, F401
from disk_audit.core.config import ConfigError, ScanConfig  # noqa: E402, F401
from disk_audit.core.scanner import DirectoryScanner, WalkResult  # noqa: E402, F401
from disk_audit.model.report import ScanReport  # noqa: E402, F401
