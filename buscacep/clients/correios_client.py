"""
Correios client module for posting CEP lookups to buscacepinter
"""

from typing import Optional, Dict

import requests

from buscacep.exceptions import HttpRequestError
from buscacep.utils.error_handler import ErrorType
from buscacep.utils.logger import setup_logger
from buscacep.utils.config_helper import get_config


class CorreiosClient:
    """
    Client for the Correios "consulta-detalhes-cep" endpoint.
    Sends one form-encoded POST per lookup, without retries.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the Correios client.

        Args:
            url: Lookup endpoint (optional, will use ConfigHelper if not provided)
            timeout: Request timeout in seconds (optional, will use ConfigHelper if not provided)

        Raises:
            ValueError: If timeout is not a positive number
        """
        config = get_config()
        self.url = url or config.get_correios_url()
        self.timeout = timeout if timeout is not None else config.get_request_timeout()
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")
        self.logger = setup_logger(name="correios_client", log_level=config.get_log_level())
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': config.get_user_agent(),
            'Accept': 'application/json'
        })

    @staticmethod
    def build_payload(cep: str) -> Dict[str, str]:
        """
        Build the form fields the Correios lookup page submits.

        Args:
            cep: CEP to query (8 digits, already validated)

        Returns:
            Form payload dictionary
        """
        return {
            'endereco': cep,
            'tipoCEP': 'ALL',
            'cepaux': '',
            'mensagem_alerta': '',
            'pagina': '/app/endereco/index.php',
            'cep': cep,
        }

    def fetch(self, cep: str) -> str:
        """
        Post a lookup for the CEP and return the raw response body.

        Args:
            cep: CEP to query (8 digits, already validated)

        Returns:
            Response body text

        Raises:
            HttpRequestError: On transport failure or a non-2xx status
        """
        self.logger.debug(f"Querying CEP {cep} at {self.url}")

        try:
            response = self.session.post(
                self.url,
                data=self.build_payload(cep),
                timeout=self.timeout
            )
        except requests.Timeout as e:
            self.logger.error(f"Timeout querying CEP {cep} after {self.timeout}s")
            raise HttpRequestError(str(e), error_type=ErrorType.API_TIMEOUT) from e
        except requests.RequestException as e:
            self.logger.error(f"Error querying CEP {cep}: {e}")
            raise HttpRequestError(str(e), error_type=ErrorType.NETWORK_ERROR) from e

        if not 200 <= response.status_code < 300:
            self.logger.error(f"Correios answered status {response.status_code} for CEP {cep}")
            raise HttpRequestError(
                f"status: {response.status_code}",
                status_code=response.status_code
            )

        # Without a declared charset requests falls back to ISO-8859-1 for text/*
        content_type = response.headers.get('Content-Type', '')
        if 'charset' not in content_type.lower():
            response.encoding = 'utf-8'

        self.logger.debug(f"Received response for CEP {cep}")
        return response.text

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()


# Global client instance
_client: Optional[CorreiosClient] = None


def get_client(force_reload: bool = False) -> CorreiosClient:
    """
    Get the process-wide client (singleton), created on first use.

    Args:
        force_reload: Discard the current client and build a new one

    Returns:
        CorreiosClient instance
    """
    global _client

    if force_reload and _client is not None:
        _client.close()
        _client = None

    if _client is None:
        _client = CorreiosClient()

    return _client
