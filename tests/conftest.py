# tests/conftest.py
# ruff: noqa: E402
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from codeforces import ClientConfig

FIXED_TIME = 1700000000
FIXED_NONCE = 'abcdef'


@pytest.fixture()
def signed_config() -> ClientConfig:
    return ClientConfig(api_key='K', api_secret='S')


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Keep developer CODEFORCES_* variables and any local .env out of the tests.
    Variables written later by load_dotenv() are removed again on teardown.
    """
    for name in ('API_KEY', 'API_SECRET', 'LANG', 'TIMEOUT', 'PROXY', 'BASE_URL'):
        monkeypatch.delenv(f'CODEFORCES_{name}', raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for name in [name for name in os.environ if name.startswith('CODEFORCES_')]:
        del os.environ[name]
