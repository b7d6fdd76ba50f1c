"""Client HTTP pour l'API publique Codeforces."""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from skipcheck.api.settings import load_settings
from skipcheck.core.errors import TransportError

logger = logging.getLogger(__name__)


class CodeforcesAPIError(Exception):
    """Réponse reçue mais en erreur (HTTP non 2xx ou statut != OK)."""

    def __init__(self, method: str, status_code: int, comment: Optional[str] = None):
        self.method = method
        self.status_code = status_code
        self.comment = comment
        super().__init__(f"{method}: HTTP {status_code} - {comment or 'statut != OK'}")


class CodeforcesClient:
    """Client HTTP pour l'API Codeforces, sans retry."""

    def __init__(
        self,
        endpoint: str = None,
        timeout: Optional[float] = None,
        settings: Dict[str, Any] = None
    ):
        """
        Initialise le client Codeforces.

        Args:
            endpoint: URL de l'API (depuis les settings si None)
            timeout: Timeout des requêtes en secondes (settings si None)
            settings: Configuration déjà chargée (load_settings() si None)
        """
        api_settings = (settings or load_settings())['api']
        self.endpoint = endpoint or api_settings['endpoint']
        self.timeout = timeout if timeout is not None else api_settings.get('timeout')

        self.session = requests.Session()

        # Aucun retry : un échec réseau fait échouer l'analyse
        adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({"Accept": "application/json"})

    def _unwrap(self, method: str, response: requests.Response) -> Any:
        """Vérifie l'enveloppe {status, comment, result} et retourne `result`."""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            payload = {}

        if response.status_code != 200 or payload.get('status') != 'OK':
            comment = payload.get('comment') or None
            logger.warning(
                "Codeforces %s en erreur: HTTP %s, statut=%s, comment=%s",
                method, response.status_code, payload.get('status'), comment
            )
            raise CodeforcesAPIError(method, response.status_code, comment)

        return payload.get('result')

    def call(self, method: str, params: Dict[str, Any] = None) -> Any:
        """
        Appelle une méthode de l'API (ex: "user.info").

        Args:
            method: Nom de la méthode Codeforces
            params: Paramètres de requête

        Returns:
            Le champ `result` de l'enveloppe JSON

        Raises:
            CodeforcesAPIError: réponse en erreur
            TransportError: la requête n'a pas abouti
        """
        url = f"{self.endpoint}{method}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Codeforces %s injoignable: %s", method, e)
            raise TransportError(f"Erreur réseau sur {method}: {e}") from e

        return self._unwrap(method, response)

    def get_user_info(self, handle: str) -> Any:
        """Raccourci pour `user.info` (un seul handle)."""
        return self.call("user.info", params={"handles": handle})

    def get_user_status(self, handle: str) -> Any:
        """Raccourci pour `user.status` (historique complet)."""
        return self.call("user.status", params={"handle": handle})
