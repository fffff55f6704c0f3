"""
Decoder for the JSON body returned by the Correios lookup endpoint
"""

from typing import Optional, Union

from pydantic import ValidationError

from buscacep.exceptions import DecodeError, NotFoundError
from buscacep.models.cep import CEP, RespostaAPI
from buscacep.utils.logger import setup_logger

logger = setup_logger(name="response_decoder")


def decode_response(body: Union[str, bytes], cep: Optional[str] = None) -> CEP:
    """
    Parse a Correios response body and return its first address.

    Args:
        body: Raw response body
        cep: Queried CEP, used in error messages

    Returns:
        First CEP record in the envelope's dados list

    Raises:
        DecodeError: If the body is not JSON shaped as RespostaAPI
        NotFoundError: If dados is empty
    """
    if not isinstance(body, (str, bytes)):
        raise DecodeError(f"expected text body, got {type(body).__name__}")

    try:
        resposta = RespostaAPI.model_validate_json(body)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first['loc'])
        detail = f"{first['msg']} at '{location}'" if location else first['msg']
        logger.error(f"Invalid response for CEP {cep}: {detail}")
        raise DecodeError(detail) from e

    if not resposta.dados:
        logger.warning(f"CEP {cep} not found in Correios (total={resposta.total})")
        raise NotFoundError(cep, resposta.mensagem or None)

    return resposta.dados[0]
