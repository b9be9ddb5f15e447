"""
Config Loader - Caricamento configurazioni YAML e .env

Gestisce:
- Variabili ambiente (.env) con le credenziali Supabase
- Settings globali (settings.yaml)
- Setup del logging

Usage:
    loader = ConfigLoader()
    settings = loader.load_global_settings()
    setup_logging(settings.logging)
    gate = SupabaseGate(loader.load_supabase_config(settings))
"""

import os
import logging
import yaml
from pathlib import Path
from typing import Optional, Mapping
from dataclasses import dataclass, field
from dotenv import load_dotenv


DEFAULT_URL_ENV = "PUBLIC_SUPABASE_URL"
DEFAULT_KEY_ENV = "PUBLIC_SUPABASE_ANON_KEY"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class SupabaseConfig:
    """Credenziali Supabase lette dall'ambiente"""
    url: str = ""
    anon_key: str = ""
    url_env: str = DEFAULT_URL_ENV
    key_env: str = DEFAULT_KEY_ENV

    @property
    def is_complete(self) -> bool:
        """True solo se URL e chiave sono entrambi presenti"""
        return bool(self.url) and bool(self.anon_key)

    @property
    def missing(self) -> list[str]:
        """Nomi delle variabili ambiente mancanti"""
        names = []
        if not self.url:
            names.append(self.url_env)
        if not self.anon_key:
            names.append(self.key_env)
        return names


@dataclass
class LoggingConfig:
    """Configurazione logging"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class GlobalSettings:
    """Settings globali dell'applicazione"""
    supabase_url_env: str = DEFAULT_URL_ENV
    supabase_key_env: str = DEFAULT_KEY_ENV
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Loader centralizzato per le configurazioni.

    Usage:
        loader = ConfigLoader(base_dir="/path/to/site")
        settings = loader.load_global_settings()
        supabase = loader.load_supabase_config(settings)
    """

    def __init__(self, base_dir: Optional[str] = None, env: Optional[Mapping[str, str]] = None):
        """
        Inizializza il loader.

        Args:
            base_dir: Directory base dell'installazione. Se None, usa la root del pacchetto.
            env: Mapping da usare al posto di os.environ (utile nei test)
        """
        if base_dir:
            self.base_dir = Path(base_dir)
        else:
            # Risale dalla directory likebutton/ alla root
            self.base_dir = Path(__file__).parent.parent

        self.config_dir = self.base_dir / "config"
        self._env = env

        # Carica .env se esiste (non sovrascrive variabili già presenti)
        env_file = self.config_dir / ".env"
        if env is None and env_file.exists():
            load_dotenv(env_file)

    def _getenv(self, name: str) -> str:
        source = os.environ if self._env is None else self._env
        # Valori passati così come sono: solo la stringa vuota conta come assente
        return source.get(name) or ""

    def load_global_settings(self) -> GlobalSettings:
        """Carica settings globali da settings.yaml"""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return GlobalSettings()

        with open(settings_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        settings = GlobalSettings()

        supabase = data.get('supabase') or {}
        settings.supabase_url_env = supabase.get('url_env', settings.supabase_url_env)
        settings.supabase_key_env = supabase.get('key_env', settings.supabase_key_env)

        log = data.get('logging') or {}
        settings.logging = LoggingConfig(
            level=str(log.get('level', 'INFO')),
            format=log.get('format', DEFAULT_LOG_FORMAT)
        )

        return settings

    def load_supabase_config(self, settings: Optional[GlobalSettings] = None) -> SupabaseConfig:
        """
        Legge le credenziali Supabase dall'ambiente.

        Args:
            settings: Settings globali. Se None, vengono caricate da settings.yaml

        Returns:
            SupabaseConfig (campi vuoti se le variabili mancano)
        """
        if settings is None:
            settings = self.load_global_settings()

        return SupabaseConfig(
            url=self._getenv(settings.supabase_url_env),
            anon_key=self._getenv(settings.supabase_key_env),
            url_env=settings.supabase_url_env,
            key_env=settings.supabase_key_env
        )


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configura il logging root con livello e formato dati"""
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.format)
