"""
CEP input validation
"""

from typing import Any

from buscacep.exceptions import InvalidInputError

CEP_LENGTH = 8
DIGITS = frozenset('0123456789')


def validate_cep(cep: Any) -> str:
    """
    Check that a CEP is exactly 8 ASCII digits, with no hyphen.

    Checks run in a fixed order (empty, digits, length), so input breaking
    several rules always reports the first one.

    Args:
        cep: Candidate CEP

    Returns:
        The CEP, unchanged

    Raises:
        InvalidInputError: If the CEP is empty, has non-digit characters
                           or does not have 8 characters
    """
    if cep is None or cep == "":
        raise InvalidInputError("empty")

    if not isinstance(cep, str):
        raise InvalidInputError("not a string")

    if not all(char in DIGITS for char in cep):
        raise InvalidInputError("non-digit characters")

    if len(cep) != CEP_LENGTH:
        raise InvalidInputError("wrong length")

    return cep


def is_valid_cep(cep: Any) -> bool:
    """Return True if validate_cep accepts the CEP."""
    try:
        validate_cep(cep)
    except InvalidInputError:
        return False
    return True
