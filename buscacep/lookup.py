"""
CEP lookup: validate, query Correios, decode the first address
"""

from typing import Optional

from buscacep.clients.correios_client import CorreiosClient, get_client
from buscacep.models.cep import CEP
from buscacep.processors.cep_validator import validate_cep
from buscacep.processors.response_decoder import decode_response
from buscacep.utils.logger import setup_logger

logger = setup_logger(name="cep_lookup")


def busca_cep(cep: str, client: Optional[CorreiosClient] = None) -> CEP:
    """
    Look up the address of a Brazilian postal code.

    The CEP is validated before any client is touched, so invalid input
    never reaches the network. Each call is independent; nothing is cached.

    Args:
        cep: CEP with exactly 8 digits and no hyphen
        client: Object with a fetch(cep) -> str method. Defaults to the
                process-wide CorreiosClient

    Returns:
        First address Correios returns for the CEP

    Raises:
        InvalidInputError: If the CEP is malformed
        HttpRequestError: On transport failure or non-2xx status
        DecodeError: If the response is not a valid envelope
        NotFoundError: If Correios returns no address
    """
    validate_cep(cep)

    if client is None:
        client = get_client()

    body = client.fetch(cep)
    address = decode_response(body, cep)

    logger.debug(f"CEP {cep} resolved to {address.street}, {address.city}/{address.state}")
    return address


lookup = busca_cep
