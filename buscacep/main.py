"""
Command-line lookup of a single CEP

Queries Correios for the given CEP (default 01310000) and prints the
address, or the error message on stderr.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, List

from buscacep.clients.correios_client import CorreiosClient
from buscacep.exceptions import CepError
from buscacep.lookup import busca_cep
from buscacep.models.cep import CEP
from buscacep.utils.config_helper import get_config
from buscacep.utils.error_handler import ErrorHandler
from buscacep.utils.logger import setup_logger

DEFAULT_CEP = "01310000"


def positive_float(value: str) -> float:
    """argparse type for a number of seconds greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got '{value}'")
    return number


def format_address(address: CEP, output_format: str = "text") -> str:
    """
    Render an address for printing.

    Args:
        address: Record returned by busca_cep
        output_format: 'text' or 'json'

    Returns:
        Printable string
    """
    if output_format == "json":
        return json.dumps(address.to_dict(), ensure_ascii=False, indent=2)

    return "\n".join([
        f"CEP: {address.postal_code}",
        f"Logradouro: {address.street}",
        f"Bairro: {address.neighborhood}",
        f"Localidade: {address.city}",
        f"UF: {address.state}",
    ])


def run_lookup(
    cep: str,
    timeout: Optional[float] = None,
    output_format: str = "text",
    errors_csv: Optional[Path] = None
) -> int:
    """
    Look up one CEP and print the outcome.

    Args:
        cep: CEP to query
        timeout: Request timeout in seconds (None = configured default)
        output_format: 'text' or 'json'
        errors_csv: CSV file where a failed lookup is recorded (None = don't record)

    Returns:
        Process exit code: 0 on success, 1 on any lookup error
    """
    client = CorreiosClient(timeout=timeout) if timeout is not None else None

    try:
        address = busca_cep(cep, client=client)
    except CepError as e:
        print(f"Erro ao buscar CEP: {e}", file=sys.stderr)
        if errors_csv:
            ErrorHandler(errors_csv_path=errors_csv).record_lookup_error(cep, e)
        return 1

    print(format_address(address, output_format))
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Look up a Brazilian postal code (CEP) on Correios"
    )

    parser.add_argument(
        'cep',
        nargs='?',
        default=DEFAULT_CEP,
        help=f'CEP with 8 digits, no hyphen (default: {DEFAULT_CEP})'
    )

    parser.add_argument(
        '--timeout',
        type=positive_float,
        help='Request timeout in seconds (default: from REQUEST_TIMEOUT env var or 10)'
    )

    parser.add_argument(
        '--format',
        dest='output_format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )

    parser.add_argument(
        '--errors-csv',
        type=Path,
        help='Record a failed lookup to this CSV file (default: from ERRORS_CSV_PATH env var)'
    )

    args = parser.parse_args(argv)

    config = get_config()
    logger = setup_logger(name="buscacep", log_level=config.get_log_level())

    try:
        exit_code = run_lookup(
            args.cep,
            timeout=args.timeout,
            output_format=args.output_format,
            errors_csv=args.errors_csv or config.get_errors_csv_path()
        )
        sys.exit(exit_code)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
