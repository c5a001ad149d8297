from dataclasses import dataclass
import base64
import os
import logging
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

logger = logging.getLogger(__name__)

DEFAULT_JQL = "assignee = currentUser() ORDER BY updated DESC"
DEFAULT_MAX_RESULTS = 100


def _mask(secret: str) -> str:
    """Hide ``secret``, keeping its last four characters only when it is longer."""
    if not secret:
        return "Not set"
    if len(secret) <= 4:
        return "*" * 8
    return "*" * 8 + secret[-4:]


class ConfigError(ValueError):
    """Raised when required Jira settings are missing."""


@dataclass
class Config:
    jira_url: str
    auth_token: str
    auth_type: str
    email: str
    jql: str
    max_results: int = DEFAULT_MAX_RESULTS
    debug: bool = False
    rich_logging: bool = True
    log_jira_payloads: bool = False

    @property
    def use_bearer(self) -> bool:
        return self.auth_type == "bearer"

    @property
    def api_base_url(self) -> str:
        return f"{self.jira_url}/rest/api/2"

    def auth_headers(self) -> Dict[str, str]:
        """Return request headers carrying the configured credentials."""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.use_bearer:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        else:
            token = base64.b64encode(f"{self.email}:{self.auth_token}".encode()).decode()
            headers["Authorization"] = f"Basic {token}"
        return headers

    def masked(self) -> Dict[str, Any]:
        """Return the settings with the token hidden, for printing."""
        return {
            "JIRA_URL": self.jira_url,
            "JIRA_AUTH_TYPE": self.auth_type,
            "JIRA_EMAIL": self.email or "Not set",
            "JIRA_PAT / JIRA_API_TOKEN": _mask(self.auth_token),
            "JIRA_JQL": self.jql,
            "JIRA_MAX_RESULTS": self.max_results,
        }


def setup_logging(config: "Config") -> None:
    """Configure logging level based on ``config.debug``."""
    level = logging.DEBUG if config.debug else logging.INFO
    if config.rich_logging:
        install_rich_traceback()
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    # Suppress connection pool chatter from requests
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Config:
    """Load configuration from YAML file and environment variables.

    ``env`` replaces the process environment entirely when given; otherwise
    a ``.env`` file is loaded into :data:`os.environ` first.
    """
    if env is None:
        load_dotenv()
        env = os.environ
    logger.debug("Loading configuration from %s", path or "default config.yml")

    # If no path provided, use default relative to this config.py file
    if path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(config_dir, "config.yml")

    data: Dict[str, Any] = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded YAML configuration from %s", path)

    def _env_str(name: str, default: str = "") -> str:
        val = env.get(name)
        if val:
            return val
        return str(data.get(name.lower()) or default)

    def _env_bool(name: str, default: bool) -> bool:
        val = env.get(name)
        if val is None:
            return bool(data.get(name.lower(), default))
        return val.lower() in {"1", "true", "yes", "on"}

    def _env_int(name: str, default: int) -> int:
        val = env.get(name)
        if val is None:
            val = data.get(name.lower(), default)
        try:
            return int(val)
        except (TypeError, ValueError):
            logger.warning("Invalid integer for %s: %r, using %s", name, val, default)
            return default

    jira_url = _env_str("JIRA_URL").rstrip("/")
    auth_token = _env_str("JIRA_PAT") or _env_str("JIRA_API_TOKEN")
    auth_type = _env_str("JIRA_AUTH_TYPE", "bearer").strip().lower()
    email = _env_str("JIRA_EMAIL")

    if not jira_url or not auth_token:
        raise ConfigError("Fehlende Konfiguration: JIRA_URL und JIRA_PAT müssen in .env gesetzt sein")
    if auth_type != "bearer":
        auth_type = "basic"
        if not email:
            raise ConfigError("JIRA_EMAIL wird benötigt wenn JIRA_AUTH_TYPE=basic verwendet wird")

    config = Config(
        jira_url=jira_url,
        auth_token=auth_token,
        auth_type=auth_type,
        email=email,
        jql=_env_str("JIRA_JQL", DEFAULT_JQL),
        max_results=_env_int("JIRA_MAX_RESULTS", DEFAULT_MAX_RESULTS),
        debug=_env_bool("DEBUG", False),
        rich_logging=_env_bool("RICH_LOGGING", True),
        log_jira_payloads=_env_bool("LOG_JIRA_PAYLOADS", False),
    )
    logger.debug("Configuration loaded for %s using %s auth", config.jira_url, config.auth_type)
    return config
