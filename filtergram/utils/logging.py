"""
Logging utilities for FilterGram
Provides structured logging and batch progress tracking
"""

import logging
import sys
from typing import Optional, Dict, Any
from datetime import datetime
import json

import colorlog

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class StructuredLogger:
    """Logger wrapper that appends keyword metadata to each message as JSON"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _format_message(self, message: str, **data) -> str:
        if data:
            return f"{message} | {json.dumps(data, default=str)}"
        return message

    def _log(self, level: int, message: str, **kwargs):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, **kwargs))

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)


class ProcessingStats:
    """Tracks batch processing statistics"""

    def __init__(self):
        """Initialize processing statistics"""
        self.start_time = datetime.now()
        self.total_files = 0
        self.processed_files = 0
        self.succeeded_files = 0
        self.failed_files = 0
        self.errors = []
        self.processing_times = []

    def set_total(self, total: int):
        """Set total number of files to process"""
        self.total_files = total

    def add_success(self, processing_time: Optional[float] = None):
        """Record a file that was filtered and saved"""
        self.processed_files += 1
        self.succeeded_files += 1
        if processing_time:
            self.processing_times.append(processing_time)

    def add_error(self, file_path: str, error: str):
        """Record a file that failed"""
        self.processed_files += 1
        self.failed_files += 1
        self.errors.append({
            'file': file_path,
            'error': error,
            'time': datetime.now()
        })

    def get_elapsed_time(self) -> float:
        """Get elapsed time in seconds"""
        return (datetime.now() - self.start_time).total_seconds()

    def get_average_processing_time(self) -> float:
        """Get average processing time per file"""
        if not self.processing_times:
            return 0.0
        return sum(self.processing_times) / len(self.processing_times)

    def get_summary(self) -> Dict[str, Any]:
        """Get processing summary"""
        elapsed = self.get_elapsed_time()

        return {
            'total_files': self.total_files,
            'processed_files': self.processed_files,
            'succeeded_files': self.succeeded_files,
            'failed_files': self.failed_files,
            'errors': len(self.errors),
            'elapsed_time': elapsed,
            'average_time_per_file': self.get_average_processing_time(),
            'files_per_second': self.processed_files / elapsed if elapsed > 0 else 0
        }

    def format_summary(self) -> str:
        """Render the summary as printable text"""
        summary = self.get_summary()
        lines = [
            "=" * 60,
            "PROCESSING SUMMARY",
            "=" * 60,
            f"Total files:      {summary['total_files']}",
            f"Succeeded:        {summary['succeeded_files']}",
            f"Failed:           {summary['failed_files']}",
            f"Elapsed time:     {summary['elapsed_time']:.1f}s",
            f"Avg time/file:    {summary['average_time_per_file']:.2f}s",
            "=" * 60,
        ]

        if self.errors:
            lines.append("ERRORS:")
            for error in self.errors[:10]:  # Show first 10 errors
                lines.append(f"  - {error['file']}: {error['error']}")
            if len(self.errors) > 10:
                lines.append(f"  ... and {len(self.errors) - 10} more errors")

        return "\n".join(lines)


def setup_console_logging(level: str = "INFO", color: bool = True,
                          fmt: str = DEFAULT_FORMAT):
    """
    Setup console logging with optional color support

    Args:
        level: Logging level
        color: Whether to use colored output
        fmt: Log record format
    """
    console_handler = logging.StreamHandler(sys.stderr)

    if color and sys.stderr.isatty():
        formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + fmt.replace('%(message)s', '%(reset)s%(message)s'),
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )
    else:
        formatter = logging.Formatter(fmt)

    console_handler.setFormatter(formatter)

    # Replace handlers so repeated CLI invocations do not duplicate output
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, '_filtergram_console', False):
            root_logger.removeHandler(handler)
    console_handler._filtergram_console = True
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)
    return console_handler
