from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from codeforces import BASE_URL, ClientConfig, CodeforcesClient, Credentials


def test_defaults_are_anonymous() -> None:
    config = ClientConfig()
    assert config.credentials is None
    assert config.lang == 'en'
    assert config.base_url == BASE_URL


def test_credentials_pair() -> None:
    config = ClientConfig(api_key='key', api_secret='hunter2')
    assert config.credentials == Credentials('key', 'hunter2')
    assert 'hunter2' not in repr(config)
    assert "api_key='key'" in repr(config)


@pytest.mark.parametrize(
    ('api_key', 'api_secret', 'message'),
    [('key', None, 'api_secret is missing'), (None, 'secret', 'api_key is missing')],
)
def test_partial_credentials_fail_at_construction(api_key: str | None, api_secret: str | None, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ClientConfig(api_key=api_key, api_secret=api_secret)


def test_partial_credentials_fail_before_client_exists() -> None:
    with pytest.raises(ValueError):
        CodeforcesClient(ClientConfig(api_key='key'))


@pytest.mark.parametrize('kwargs', [{'lang': 'de'}, {'timeout': 0}, {'timeout': -1.5}])
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_config_is_immutable() -> None:
    config = ClientConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.lang = 'ru'  # type: ignore[misc]


def test_base_url_gets_trailing_slash() -> None:
    assert ClientConfig(base_url='https://mirror.local/api').base_url == 'https://mirror.local/api/'


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CODEFORCES_API_KEY', 'k')
    monkeypatch.setenv('CODEFORCES_API_SECRET', 's')
    monkeypatch.setenv('CODEFORCES_LANG', 'ru')
    monkeypatch.setenv('CODEFORCES_TIMEOUT', '30')

    config = ClientConfig.from_env()

    assert config.credentials == Credentials('k', 's')
    assert config.lang == 'ru'
    assert config.timeout == 30.0
    assert config.proxy is None


def test_from_env_reads_dotenv(tmp_path: Path) -> None:
    env_file = tmp_path / '.env'
    env_file.write_text('CODEFORCES_API_KEY=from-file\nCODEFORCES_API_SECRET=file-secret\n')

    config = ClientConfig.from_env(env_file)

    assert config.credentials == Credentials('from-file', 'file-secret')


def test_from_env_defaults_to_cwd_dotenv(tmp_path: Path) -> None:
    (tmp_path / '.env').write_text('CODEFORCES_LANG=ru\n')
    assert ClientConfig.from_env().lang == 'ru'


def test_from_env_partial_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CODEFORCES_API_KEY', 'k')
    with pytest.raises(ValueError):
        ClientConfig.from_env()
