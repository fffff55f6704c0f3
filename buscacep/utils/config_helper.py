"""
Configuration helper for managing environment variables across different environments
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from buscacep.utils.logger import setup_logger


DEFAULT_CORREIOS_URL = (
    "https://buscacepinter.correios.com.br/app/consulta/html/consulta-detalhes-cep.php"
)
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "buscacep/1.0"


class ConfigHelper:
    """
    Helper class for managing configuration across different environments.
    Supports: local, staging, production
    """

    def __init__(self, env: Optional[str] = None):
        """
        Initialize configuration helper.

        Args:
            env: Environment name ('local', 'staging', 'production').
                 If None, will be detected from ENV environment variable or default to 'local'
        """
        self.logger = setup_logger(name="config_helper", log_level=os.getenv('LOG_LEVEL', 'INFO'))
        # .env files and relative paths follow the directory the caller runs from
        self.base_dir = Path.cwd()

        self.env = env or os.getenv('ENV', 'local').lower()

        if self.env not in ['local', 'staging', 'production']:
            self.logger.warning(f"Unknown environment '{self.env}', defaulting to 'local'")
            self.env = 'local'

        self._load_env_files()

        self.logger.debug(f"Configuration initialized for environment: {self.env}")

    def _load_env_files(self):
        """Load environment variables from .env files in priority order."""
        if os.getenv('SKIP_ENV_LOAD'):
            self.logger.debug("Skipping .env file loading (SKIP_ENV_LOAD set)")
            return

        # Highest priority first; already-set variables are never overridden
        env_files = [
            self.base_dir / f'.env.{self.env}',
            self.base_dir / '.env.local',
            self.base_dir / '.env'
        ]

        for env_file in env_files:
            if env_file.exists():
                self.logger.debug(f"Loading environment file: {env_file}")
                load_dotenv(env_file, override=False)
            else:
                self.logger.debug(f"Environment file not found: {env_file}")

    def get(self, key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
        """
        Get environment variable value.

        Args:
            key: Environment variable name
            default: Default value if not found
            required: If True, raise error if variable is not set

        Returns:
            Environment variable value or default

        Raises:
            ValueError: If required=True and variable is not set
        """
        value = os.getenv(key, default)

        if required and value is None:
            raise ValueError(f"Required environment variable '{key}' is not set")

        return value

    def get_correios_url(self) -> str:
        """Get the Correios CEP lookup endpoint."""
        return self.get('CORREIOS_URL', DEFAULT_CORREIOS_URL)

    def get_request_timeout(self) -> float:
        """
        Get request timeout in seconds.

        Raises:
            ValueError: If REQUEST_TIMEOUT is not a positive number
        """
        raw = self.get('REQUEST_TIMEOUT', str(DEFAULT_REQUEST_TIMEOUT))
        timeout = float(raw)
        if timeout <= 0:
            raise ValueError(f"REQUEST_TIMEOUT must be positive, got '{raw}'")
        return timeout

    def get_user_agent(self) -> str:
        """Get the User-Agent header sent to Correios."""
        return self.get('USER_AGENT', DEFAULT_USER_AGENT)

    def get_log_level(self) -> str:
        """Get logging level."""
        return self.get('LOG_LEVEL', 'INFO').upper()

    def get_errors_csv_path(self) -> Optional[Path]:
        """Get path to the lookup errors CSV file, or None when not configured."""
        path_str = self.get('ERRORS_CSV_PATH')
        if not path_str:
            return None
        if Path(path_str).is_absolute():
            return Path(path_str)
        return self.base_dir / path_str

    def get_environment(self) -> str:
        """Get current environment name."""
        return self.env


# Global config instance
_config: Optional[ConfigHelper] = None
_config_env: Optional[str] = None


def get_config(env: Optional[str] = None, force_reload: bool = False) -> ConfigHelper:
    """
    Get global configuration instance (singleton).

    Args:
        env: Environment name (only used on first call or if force_reload=True)
        force_reload: Force reload of configuration even if already initialized

    Returns:
        ConfigHelper instance
    """
    global _config, _config_env

    if force_reload or _config is None or (env and _config_env != env):
        _config = ConfigHelper(env=env)
        _config_env = env or os.getenv('ENV', 'local').lower()

    return _config
