"""
Supabase Client - Gate di configurazione per il backend dei like

Gestisce:
- Lettura credenziali (URL + anon key) dall'ambiente
- Creazione del client solo se le credenziali sono presenti
- Check di disponibilità con warning quando il servizio manca

Usage:
    gate = SupabaseGate(ConfigLoader().load_supabase_config())
    if gate.check_available():
        client = gate.get_client()

    # Oppure con il gate di processo
    if check_supabase_available():
        get_supabase().table("likes")...
"""

import logging
import threading
from typing import Any, Callable, Optional

from supabase import Client, create_client

from .clients.base import BaseClient
from .config_loader import ConfigLoader, SupabaseConfig

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Supabase is not configured. Like button feature will be disabled."

ClientFactory = Callable[[str, str], Any]


class SupabaseGate(BaseClient):
    """
    Client handle Supabase condizionato alla configurazione.

    Flag e client sono calcolati una sola volta nel costruttore e restano
    invariati per tutta la vita dell'oggetto.
    """

    service_name = "supabase"

    def __init__(self, config: SupabaseConfig, client_factory: Optional[ClientFactory] = None):
        self.config = config
        self._configured = config.is_complete
        factory = client_factory or create_client
        # Errori della factory (es. URL malformato) propagano al chiamante
        self._client: Optional[Client] = (
            factory(config.url, config.anon_key) if self._configured else None
        )

    def is_configured(self) -> bool:
        """True se URL e chiave erano entrambi presenti"""
        return self._configured

    def get_client(self) -> Optional[Client]:
        """Client Supabase, oppure None se non configurato"""
        return self._client

    def check_available(self) -> bool:
        """
        Verifica disponibilità per le feature dipendenti.

        Emette un warning ad ogni chiamata se Supabase non è configurato.

        Returns:
            Lo stesso valore di is_configured()
        """
        if not self._configured:
            logger.warning(NOT_CONFIGURED_MESSAGE)
            return False
        return True

    def is_available(self) -> bool:
        return self._configured


_gate: Optional[SupabaseGate] = None
_gate_lock = threading.Lock()


def get_gate() -> SupabaseGate:
    """
    Gate di processo, costruito dall'ambiente al primo accesso.

    Se la factory solleva un'eccezione il gate non viene memorizzato:
    l'errore arriva al chiamante e l'accesso successivo riprova la costruzione.
    Una volta costruito, il gate resta invariato fino a reset_gate().
    """
    global _gate
    if _gate is None:
        with _gate_lock:
            if _gate is None:
                _gate = SupabaseGate(ConfigLoader().load_supabase_config())
    return _gate


def reset_gate() -> None:
    """Scarta il gate di processo (il prossimo accesso rilegge l'ambiente)"""
    global _gate
    with _gate_lock:
        _gate = None


def is_supabase_configured() -> bool:
    return get_gate().is_configured()


def get_supabase() -> Optional[Client]:
    return get_gate().get_client()


def check_supabase_available() -> bool:
    return get_gate().check_available()
