"""Client configuration: service endpoint, defaults and credential loading."""

import logging
import os

from dotenv import find_dotenv, load_dotenv

from yadict.domain.model.errors import ConfigurationError

logger = logging.getLogger(__name__)

API_URL = "https://dictionary.yandex.net/api/v1/dicservice.json"
DEFAULT_TOKEN_ENV = "YANDEX_DICTIONARY_TOKEN"
API_TIMEOUT_SECONDS = 5.0


def read_token(var: str = DEFAULT_TOKEN_ENV) -> str:
    """Read the API key from a single environment variable.

    Raises:
        ConfigurationError: If the variable is unset or empty.
    """
    token = os.environ.get(var)
    if not token:
        raise ConfigurationError(f"{var} environment variable is required")
    return token


def load_env_file(path: str | os.PathLike | None = None) -> bool:
    """Load variables from a .env file without overriding the environment.

    Without a path, the nearest .env at or above the working directory is used.

    Returns:
        True if at least one variable was set.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            logger.debug("No .env file found")
            return False
    loaded = load_dotenv(dotenv_path=path, override=False)
    logger.debug("Loaded .env file", extra={"path": str(path), "loaded": loaded})
    return loaded
