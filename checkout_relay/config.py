# checkout_relay.config
from pathlib import Path
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

PUBLIC_DIR = BASE_DIR / "public"

"""
Configuration centrale du relais de paiement.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les clés Midtrans, l'environnement d'exécution, le port, CORS
- Fournit MidtransConfig: valeur immuable injectée dans la gateway au démarrage
"""

logger = logging.getLogger(__name__)


def _clean_env(v: Optional[str]) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Midtrans: clés serveur/client. Le mode reste SANDBOX tant que les clés live ne sont pas utilisées.
MIDTRANS_SERVER_KEY = _clean_env(os.getenv("MIDTRANS_SERVER_KEY"))
MIDTRANS_CLIENT_KEY = _clean_env(os.getenv("MIDTRANS_CLIENT_KEY"))
MIDTRANS_IS_PRODUCTION = False

# Environnement d'exécution (APP_ENV, compat NODE_ENV des anciens déploiements)
APP_ENV = _clean_env(os.getenv("APP_ENV") or os.getenv("NODE_ENV")) or "development"
PORT = int(os.getenv("PORT", "3000"))

# CORS: liste blanche des fronts autorisés
DEFAULT_CORS_ORIGINS = [
    "https://oleh2in-pos-v2.web.app",
    "http://localhost:5000",
    "http://localhost:3000",
    "http://127.0.0.1:5500",
]
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()] or DEFAULT_CORS_ORIGINS
CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]

# Démarrage strict: refuse de démarrer sans clés (forcé en production)
STRICT_CONFIG = _flag("MIDTRANS_STRICT_CONFIG") or APP_ENV == "production"
# Détails bruts Midtrans renvoyés au client (comportement historique) ou résumé seulement
EXPOSE_PROVIDER_ERRORS = _flag("EXPOSE_PROVIDER_ERRORS", "true")

KEY_PREVIEW_LENGTH = 15


class ConfigurationError(RuntimeError):
    """Clés Midtrans absentes alors que le démarrage strict est demandé."""


class MidtransConfig(BaseModel):
    """
    Configuration Midtrans figée pour toute la durée du process.
    Construite une seule fois au démarrage puis passée à la gateway.
    """
    model_config = ConfigDict(frozen=True)

    server_key: str = ""
    client_key: str = ""
    is_production: bool = False
    environment: str = "development"
    expose_provider_errors: bool = True

    @property
    def configured(self) -> bool:
        return bool(self.server_key and self.client_key)

    @property
    def mode(self) -> str:
        return "Production" if self.is_production else "Sandbox"


def load_midtrans_config() -> MidtransConfig:
    """Construit MidtransConfig depuis les constantes du module (déjà nettoyées)."""
    return MidtransConfig(
        server_key=MIDTRANS_SERVER_KEY,
        client_key=MIDTRANS_CLIENT_KEY,
        is_production=MIDTRANS_IS_PRODUCTION,
        environment=APP_ENV,
        expose_provider_errors=EXPOSE_PROVIDER_ERRORS,
    )


def missing_keys(config: MidtransConfig) -> list[str]:
    missing = []
    if not config.server_key:
        missing.append("MIDTRANS_SERVER_KEY")
    if not config.client_key:
        missing.append("MIDTRANS_CLIENT_KEY")
    return missing


def validate_config(config: MidtransConfig, strict: bool = False) -> None:
    """
    Vérifie la présence des clés Midtrans.
    - Mode permissif (dev): simple warning, le service démarre quand même.
    - Mode strict: lève ConfigurationError, le serveur n'accepte aucun trafic.
    """
    missing = missing_keys(config)
    if not missing:
        return
    msg = f"Midtrans environment variables not set: {', '.join(missing)}"
    if strict:
        raise ConfigurationError(msg)
    logger.warning(msg)


def mask_key(value: str, length: int = KEY_PREVIEW_LENGTH) -> Optional[str]:
    """Aperçu d'une clé: les `length` premiers caractères suivis de '...' (None si absente)."""
    if not value:
        return None
    return value[:length] + "..."
