"""
Models package - Correios response records
"""

from buscacep.models.cep import CEP, RespostaAPI

__all__ = ['CEP', 'RespostaAPI']
