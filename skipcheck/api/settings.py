"""Chargement de la configuration (YAML + .env)."""

import copy
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(__file__), '..', '..', 'config', 'codeforces.yaml'
)

DEFAULT_SETTINGS: Dict[str, Any] = {
    'api': {
        'endpoint': 'https://codeforces.com/api/',
        # None = pas de timeout au-delà du comportement par défaut de requests
        'timeout': None,
    },
    'analysis': {
        'skip_verdict': 'SKIPPED',
        'display_limit': 10,
    },
}


def _load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def _parse_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"CODEFORCES_TIMEOUT invalide: {raw!r} (nombre de secondes attendu)") from None


def _parse_display_limit(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SKIPCHECK_DISPLAY_LIMIT invalide: {raw!r} (entier attendu)") from None


def load_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Charge la configuration.

    Ordre de priorité : variables d'environnement (y compris .env),
    puis fichier YAML, puis valeurs par défaut.

    Args:
        path: Chemin du fichier YAML (config/codeforces.yaml si None)

    Returns:
        Dict avec les sections `api` et `analysis`
    """
    load_dotenv()

    settings = copy.deepcopy(DEFAULT_SETTINGS)
    loaded = _load_yaml(path or DEFAULT_CONFIG_PATH)
    for section, values in loaded.items():
        if isinstance(values, dict) and section in settings:
            settings[section].update(values)

    if os.getenv('CODEFORCES_ENDPOINT'):
        settings['api']['endpoint'] = os.getenv('CODEFORCES_ENDPOINT')
    if os.getenv('CODEFORCES_TIMEOUT') is not None:
        settings['api']['timeout'] = _parse_timeout(os.getenv('CODEFORCES_TIMEOUT'))
    if os.getenv('SKIPCHECK_SKIP_VERDICT'):
        settings['analysis']['skip_verdict'] = os.getenv('SKIPCHECK_SKIP_VERDICT')
    if os.getenv('SKIPCHECK_DISPLAY_LIMIT'):
        settings['analysis']['display_limit'] = _parse_display_limit(os.getenv('SKIPCHECK_DISPLAY_LIMIT'))

    return settings
