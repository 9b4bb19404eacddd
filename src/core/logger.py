"""
Episode Conformer Logger

Terminal progress output plus an optional detailed log file and JSON run summary.
"""

import os
import sys
import json
import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, TextIO, Union
from pathlib import Path


class ConformerLogger:
    """Logger for the episode conformer with terminal and optional file output."""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO", verbose: bool = False, quiet: bool = False):
        """
        Initialize the logger.

        Args:
            log_dir: Directory to store log files, None to keep everything in the terminal
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            verbose: Whether to show verbose output in terminal
            quiet: Whether to suppress progress output in terminal
        """
        self.verbose = verbose
        self.quiet = quiet
        self.log_dir: Optional[Path] = None
        self.log_file: Optional[Path] = None

        # Setup Python logging
        self.logger = logging.getLogger("Conformer")
        self.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

        # Remove any existing handlers
        self._close_handlers()

        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = self.log_dir / f"conformer_{timestamp}.log"

            # File handler - logs everything
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
        else:
            self.logger.addHandler(logging.NullHandler())

        self.processing_data = {
            "start_time": datetime.now().isoformat(),
            "input": {},
            "listing": {},
            "entries": [],
            "summary": {},
            "errors": []
        }

    def log_input(self, data: Dict[str, Any]) -> None:
        """Log the run configuration."""
        self.processing_data["input"] = data

        if not self.quiet and self.verbose:
            print("📋 Configuration:")
            print(f"   Directory: {data.get('path')}")
            print(f"   Number index: {data.get('selected_index')}")
            print(f"   Dry run: {data.get('dry_run')}")
            print(f"   List numbers: {data.get('list_numbers')}")

        self.logger.info("Input parameters parsed")
        self.logger.debug(f"Input data: {json.dumps(data, ensure_ascii=False, indent=2)}")

    def log_listing(self, path: str, entries: List[str]) -> None:
        """Log the sorted directory listing."""
        self.processing_data["listing"] = {"path": path, "count": len(entries)}

        if not self.quiet and self.verbose:
            print(f"📂 Found {len(entries)} entries in {path}")

        self.logger.info(f"Directory listed: {path} ({len(entries)} entries)")
        self.logger.debug(f"Entries: {json.dumps(entries, ensure_ascii=False, indent=2)}")

    def log_entry(self, result: Dict[str, Any]) -> None:
        """Log the outcome for one directory entry."""
        self.processing_data["entries"].append(result)

        status = result.get("status")
        if status == "renamed":
            if not self.quiet and self.verbose:
                print(f"   ✅ {result['entry']} -> {result['target']}")
            self.logger.info(f"Renamed: {result['entry']} -> {result['target']}")
        elif status == "failed":
            self.logger.warning(f"Rename failed: {result['entry']} -> {result['target']}")
        else:
            self.logger.debug(f"Entry {status}: {json.dumps(result, ensure_ascii=False)}")

    def log_error(self, error: Union[str, Exception], stream: Optional[TextIO] = None) -> None:
        """Report an error on the terminal and record it.

        Errors are shown even in quiet mode. The message is printed verbatim
        to ``stream`` (standard error unless given).
        """
        error_msg = str(error)
        self.processing_data["errors"].append({
            "timestamp": datetime.now().isoformat(),
            "error": error_msg
        })

        print(error_msg, file=stream if stream is not None else sys.stderr)

        self.logger.error(f"Error occurred: {error_msg}")

    def log_info(self, message: str, level: str = "info") -> None:
        """Log general information messages."""
        if level == "verbose" and not self.verbose:
            return
        if not self.quiet:
            print(message)

        log_method = getattr(self.logger, level.lower(), self.logger.info)
        log_method(message)

    def log_summary(self, summary: Dict[str, int]) -> None:
        self.processing_data["summary"] = summary
        self.logger.info(f"Summary: {json.dumps(summary)}")

    def finalize(self) -> Optional[str]:
        """Finalize logging and return log file path, if any."""
        self.processing_data["end_time"] = datetime.now().isoformat()

        if self.log_dir is None:
            return None

        self.logger.info("=== PROCESSING SUMMARY ===")
        self.logger.info(f"Log file: {self.log_file}")

        # Write full processing data as JSON
        try:
            summary_file = self.log_dir / f"processing_summary_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            with open(summary_file, 'w', encoding='utf-8') as f:
                json.dump(self.processing_data, f, ensure_ascii=False, indent=2)
            self.logger.info(f"Processing summary saved to: {summary_file}")
        except OSError as e:
            self.logger.error(f"Failed to save processing summary: {e}")

        log_file = str(self.log_file)
        self._close_handlers()
        self.logger.addHandler(logging.NullHandler())
        return log_file

    def _close_handlers(self) -> None:
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def owns_path(self, path: str) -> bool:
        """True for the log directory or log file itself, which must never be renamed."""
        own = [p for p in (self.log_dir, self.log_file) if p is not None]
        target = os.path.abspath(path)
        return any(os.path.abspath(p) == target for p in own)
