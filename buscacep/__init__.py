"""
buscacep - Brazilian postal code (CEP) lookup against Correios
"""

from buscacep.exceptions import (
    CepError,
    InvalidInputError,
    HttpRequestError,
    DecodeError,
    NotFoundError,
)
from buscacep.models.cep import CEP, RespostaAPI
from buscacep.lookup import busca_cep, lookup

__version__ = "1.0.0"

__all__ = [
    'busca_cep',
    'lookup',
    'CEP',
    'RespostaAPI',
    'CepError',
    'InvalidInputError',
    'HttpRequestError',
    'DecodeError',
    'NotFoundError',
]
