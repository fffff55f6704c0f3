"""
Error handler module for recording failed CEP lookups
"""

import csv
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any
from enum import Enum

from buscacep.utils.logger import setup_logger


class ErrorType(Enum):
    """Kinds of failure a CEP lookup can end in"""
    VALIDATION_ERROR = "validation_error"
    API_ERROR = "api_error"
    API_TIMEOUT = "api_timeout"
    NETWORK_ERROR = "network_error"
    DECODE_ERROR = "decode_error"
    CEP_NOT_FOUND = "cep_not_found"
    UNKNOWN_ERROR = "unknown_error"


CSV_HEADERS = ['cep', 'error_type', 'error_message', 'timestamp', 'context']


class ErrorHandler:
    """
    Records failed lookups to a CSV file and logs them.
    """

    def __init__(self, errors_csv_path: Optional[Path] = None):
        """
        Initialize error handler.

        Args:
            errors_csv_path: Path to CSV file for storing errors.
                            Default: data/lookup_errors.csv
        """
        if errors_csv_path is None:
            errors_csv_path = Path("data/lookup_errors.csv")

        self.errors_csv_path = Path(errors_csv_path)
        self.logger = setup_logger(name="error_handler")

        self.errors_csv_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize_csv()

    def _initialize_csv(self):
        """Initialize CSV file with headers if it doesn't exist."""
        if not self.errors_csv_path.exists():
            try:
                with open(self.errors_csv_path, 'w', newline='', encoding='utf-8') as f:
                    writer = csv.writer(f)
                    writer.writerow(CSV_HEADERS)
                self.logger.debug(f"Initialized errors CSV file: {self.errors_csv_path}")
            except OSError as e:
                self.logger.error(f"Failed to initialize errors CSV file: {e}")

    def record_error(
        self,
        cep: str,
        error_type: ErrorType,
        error_message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Record an error to CSV file and log it.

        Args:
            cep: CEP that caused the error
            error_type: Type of error (ErrorType enum)
            error_message: Error message description
            context: Optional context dictionary with additional information

        Returns:
            True if error was recorded successfully, False otherwise
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        context_str = str(context) if context else ""

        log_message = f"Lookup failed for CEP {cep}: [{error_type.value}] {error_message}"
        if context:
            log_message += f" | Context: {context}"
        self.logger.error(log_message)

        try:
            with open(self.errors_csv_path, 'a', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow([cep, error_type.value, error_message, timestamp, context_str])

            self.logger.debug(f"Recorded error for CEP {cep} to {self.errors_csv_path}")
            return True

        except OSError as e:
            self.logger.error(f"Failed to record error to CSV: {e}")
            return False

    def record_lookup_error(self, cep: str, error: Exception) -> bool:
        """
        Record a failed lookup from the exception it raised.

        Args:
            cep: CEP that was queried
            error: Exception raised by the lookup (CepError or anything else)

        Returns:
            True if error was recorded successfully
        """
        error_type = getattr(error, 'error_type', ErrorType.UNKNOWN_ERROR)
        context = {}
        status_code = getattr(error, 'status_code', None)
        if status_code:
            context['status_code'] = status_code

        return self.record_error(cep, error_type, str(error), context or None)
