from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .signing import Credentials

BASE_URL = 'https://codeforces.com/api/'
SUPPORTED_LANGUAGES = ('en', 'ru')


@dataclass(frozen=True, slots=True)
class ClientConfig:
    api_key: str | None = None
    api_secret: str | None = None
    lang: str | None = 'en'
    timeout: float = 10.0
    proxy: str | None = None
    base_url: str = BASE_URL

    def __post_init__(self) -> None:
        if self.api_key is not None and self.api_secret is None:
            msg = 'api_secret is missing while api_key is set.'
            raise ValueError(msg)
        if self.api_secret is not None and self.api_key is None:
            msg = 'api_key is missing while api_secret is set.'
            raise ValueError(msg)
        if self.lang is not None and self.lang not in SUPPORTED_LANGUAGES:
            msg = f'Unsupported response language {self.lang!r}, expected one of {SUPPORTED_LANGUAGES}.'
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = 'timeout must be a positive number of seconds.'
            raise ValueError(msg)
        if not self.base_url.endswith('/'):
            object.__setattr__(self, 'base_url', self.base_url + '/')

    @property
    def credentials(self) -> Credentials | None:
        if self.api_key is None or self.api_secret is None:
            return None
        return Credentials(self.api_key, self.api_secret)

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> ClientConfig:
        """Read ``CODEFORCES_*`` variables, loading ``.env`` first when present."""

        env_file = env_file or Path.cwd() / '.env'
        if env_file.exists():
            load_dotenv(env_file)

        lang = os.getenv('CODEFORCES_LANG', 'en')
        return cls(
            api_key=os.getenv('CODEFORCES_API_KEY') or None,
            api_secret=os.getenv('CODEFORCES_API_SECRET') or None,
            lang=lang or None,
            timeout=float(os.getenv('CODEFORCES_TIMEOUT', 10.0)),
            proxy=os.getenv('CODEFORCES_PROXY') or None,
            base_url=os.getenv('CODEFORCES_BASE_URL', BASE_URL),
        )

    def __repr__(self) -> str:
        secret = None if self.api_secret is None else '***'
        return (
            f'ClientConfig(api_key={self.api_key!r}, api_secret={secret!r}, lang={self.lang!r}, '
            f'timeout={self.timeout!r}, proxy={self.proxy!r}, base_url={self.base_url!r})'
        )


__all__ = ['BASE_URL', 'SUPPORTED_LANGUAGES', 'ClientConfig']
