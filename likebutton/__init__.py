"""
Like Button Backend - Gate di configurazione Supabase

Contains:
- ConfigLoader: lettura .env e settings.yaml
- SupabaseGate: client Supabase condizionato alle credenziali
- check_supabase: health check della configurazione
"""

__version__ = "1.0.0"

from .config_loader import ConfigLoader, SupabaseConfig, setup_logging
from .supabase_client import (
    SupabaseGate,
    get_gate,
    reset_gate,
    is_supabase_configured,
    get_supabase,
    check_supabase_available,
)
from .health import ServiceStatus, HealthCheckResult, check_supabase

__all__ = [
    'ConfigLoader',
    'SupabaseConfig',
    'setup_logging',
    'SupabaseGate',
    'get_gate',
    'reset_gate',
    'is_supabase_configured',
    'get_supabase',
    'check_supabase_available',
    'ServiceStatus',
    'HealthCheckResult',
    'check_supabase',
]
