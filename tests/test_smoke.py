"""
Smoke Test Suite - Verifica veloce che tutto funzioni

Esegui con: pytest tests/test_smoke.py -v
"""
import pytest
from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))


class TestSyntax:
    """Verifica che tutti i file Python compilino correttamente"""

    def test_all_package_modules(self):
        """Tutti i moduli likebutton/ compilano"""
        for py_file in (ROOT / 'likebutton').rglob('*.py'):
            result = subprocess.run([sys.executable, '-m', 'py_compile', str(py_file)], capture_output=True)
            assert result.returncode == 0, f"Errore in {py_file}: {result.stderr.decode()}"


class TestImports:
    """Verifica che i moduli principali siano importabili"""

    def test_package_exports(self):
        import likebutton
        for name in likebutton.__all__:
            assert getattr(likebutton, name) is not None

    def test_config_loader_module(self):
        from likebutton.config_loader import ConfigLoader
        assert ConfigLoader is not None

    def test_supabase_client_module(self):
        from likebutton.supabase_client import SupabaseGate, check_supabase_available
        assert SupabaseGate is not None
        assert callable(check_supabase_available)
