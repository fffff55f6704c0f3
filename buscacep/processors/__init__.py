"""
Processors package - input validation and response decoding
"""

from buscacep.processors.cep_validator import validate_cep, is_valid_cep
from buscacep.processors.response_decoder import decode_response

__all__ = ['validate_cep', 'is_valid_cep', 'decode_response']
