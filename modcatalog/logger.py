"""
Run logging for modcatalog.
Screen + optional file, plus a tally of catalog events for the run summary.
"""
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class CatalogLogger:
    """Print to screen and file; count warnings, errors and catalog loads"""

    def __init__(self, log_file: Optional[Path] = None, debug: bool = False):
        self.log_file = log_file
        self._file_handle = None
        self._start_time = datetime.now()
        self.debug_mode = debug
        self.warnings = 0
        self.errors = 0
        self.apps_loaded: Optional[int] = None
        self.used_fallback = False

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_file, 'w', buffering=1, encoding='utf-8')  # Line buffered, UTF-8

    def log(self, msg: str, prefix: str = ""):
        """Log to screen and file"""
        output = f"{prefix}{msg}" if prefix else msg

        print(output, flush=True)
        sys.stdout.flush()

        if self._file_handle:
            self._file_handle.write(output + "\n")

    def info(self, msg: str):
        self.log(msg)

    def warning(self, msg: str):
        self.warnings += 1
        self.log(msg, "[WARNING] ")

    def error(self, msg: str):
        self.errors += 1
        self.log(msg, "[ERROR] ")

    def debug(self, msg: str):
        """Debug message (only shown in debug mode)"""
        if self.debug_mode:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.log(msg, f"[{timestamp}] [DEBUG] ")

    def catalog_loaded(self, app_count: int, group_count: int, source: str):
        """Log a finished catalog run"""
        self.apps_loaded = app_count
        self.log(f"Loaded {app_count} apps from catalog ({group_count} distinct names) <- {source}")

    def catalog_fallback(self, source: str, exc: Exception):
        """Log fallback to the built-in sample apps"""
        self.used_fallback = True
        self.warning(f"Could not load catalog {source}, using fallback data: {exc}")

    def summary(self) -> str:
        elapsed = (datetime.now() - self._start_time).total_seconds()
        if self.used_fallback:
            source = "sample data"
        elif self.apps_loaded is not None:
            source = f"{self.apps_loaded} apps from catalog"
        else:
            source = "no catalog loaded"
        return f"Run finished: {source}, {self.warnings} warnings, {self.errors} errors in {elapsed:.1f}s"

    def close(self):
        """Write the run summary to the log file and close it"""
        if self._file_handle:
            self._file_handle.write(self.summary() + "\n")
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


# Global instance (set by the CLI)
_logger: Optional[CatalogLogger] = None

def set_logger(logger: CatalogLogger):
    """Set global logger instance"""
    global _logger
    _logger = logger

def get_logger() -> CatalogLogger:
    """Get global logger instance, creating a stdout-only one on first use"""
    global _logger
    if _logger is None:
        _logger = CatalogLogger()
    return _logger

# Convenience functions
def log(msg: str):
    get_logger().log(msg)

def info(msg: str):
    get_logger().info(msg)

def warning(msg: str):
    get_logger().warning(msg)

def error(msg: str):
    get_logger().error(msg)

def debug(msg: str):
    get_logger().debug(msg)
