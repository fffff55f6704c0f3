"""
Clients package - HTTP access to the Correios lookup endpoint
"""

from buscacep.clients.correios_client import CorreiosClient, get_client

__all__ = ['CorreiosClient', 'get_client']
