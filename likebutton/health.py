"""
Health Check Module - Verifica configurazione servizi

Fornisce:
- Health check per Supabase (solo configurazione, nessuna chiamata di rete)
- Graceful degradation: un servizio non configurato è DISABLED ma usabile

Usage:
    result = check_supabase(get_gate())
    if result.status == ServiceStatus.DISABLED:
        print(result.message)
"""

from enum import Enum
from typing import Dict, Any
from dataclasses import dataclass, field
from datetime import datetime

from .supabase_client import SupabaseGate


class ServiceStatus(Enum):
    """Stato di un servizio"""
    HEALTHY = "healthy"       # Configurato
    DISABLED = "disabled"     # Credenziali assenti, feature disabilitata


@dataclass
class HealthCheckResult:
    """Risultato di un singolo health check"""
    service: str
    status: ServiceStatus
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)
    checked_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def is_healthy(self) -> bool:
        """Credenziali presenti"""
        return self.status == ServiceStatus.HEALTHY


def check_supabase(gate: SupabaseGate) -> HealthCheckResult:
    """Stato della configurazione Supabase"""
    config = gate.config
    details = {
        'url_env': config.url_env,
        'key_env': config.key_env,
        'url': config.url,
    }

    if gate.is_configured():
        return HealthCheckResult(
            service=gate.service_name,
            status=ServiceStatus.HEALTHY,
            message="Configurato",
            details=details
        )

    missing = config.missing
    details['missing'] = missing
    return HealthCheckResult(
        service=gate.service_name,
        status=ServiceStatus.DISABLED,
        message=f"Variabili mancanti: {', '.join(missing)}",
        details=details
    )
