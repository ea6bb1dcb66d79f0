"""Query canonicalization and ``apiSig`` signing for the Codeforces API.

Authorized calls carry three extra parameters: ``apiKey``, ``time`` (Unix
seconds) and ``apiSig``.  The signature is a six character random prefix
followed by the SHA-512 hex digest of::

    <rand>/<methodName>?<sorted parameters>#<secret>

Codeforces recomputes the digest on its side and rejects requests whose
``time`` drifts more than a few minutes from the server clock, so endpoints
built here must be sent right away.
"""

from __future__ import annotations

import hashlib
import logging
import random
import secrets
import string
import threading
import time
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 6
RESERVED_PARAMETERS = frozenset({'apiKey', 'time', 'apiSig'})

_fallback = threading.local()


@dataclass(frozen=True, slots=True)
class Credentials:
    """API key pair issued at https://codeforces.com/settings/api."""

    api_key: str
    api_secret: str

    def __repr__(self) -> str:
        return f'Credentials(api_key={self.api_key!r}, api_secret=***)'


def _form_encode(value: str) -> str:
    """Form-encode like ``application/x-www-form-urlencoded``: ``*`` stays, ``~`` is escaped."""

    return quote_plus(value, safe='*').replace('~', '%7E')


def canonicalize_parameters(parameters: Mapping[str, str]) -> str:
    """Serialize ``parameters`` as a sorted, form-encoded query string."""

    return '&'.join(f'{_form_encode(key)}={_form_encode(value)}' for key, value in sorted(parameters.items()))


def _fallback_random() -> random.Random:
    rng = getattr(_fallback, 'rng', None)
    if rng is None:
        rng = _fallback.rng = random.Random()
    return rng


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    try:
        return ''.join(secrets.choice(NONCE_ALPHABET) for _ in range(length))
    except (NotImplementedError, OSError):
        logger.warning('OS randomness unavailable, using a thread-local generator for the apiSig nonce')
        rng = _fallback_random()
        return ''.join(rng.choice(NONCE_ALPHABET) for _ in range(length))


def sign(method_name: str, canonical_parameters: str, api_secret: str, nonce: str) -> str:
    """Return the ``apiSig`` token for an already canonicalized query."""

    base = f'{nonce}/{method_name}?{canonical_parameters}#{api_secret}'
    return nonce + hashlib.sha512(base.encode('utf-8')).hexdigest()


def build_endpoint(
    method_name: str,
    parameters: Mapping[str, str],
    credentials: Credentials | None = None,
    *,
    timestamp: int | None = None,
    nonce: str | None = None,
) -> str:
    """Build the request path (relative to the API prefix) for ``method_name``.

    Without credentials the result is ``method?query`` (or the bare method name
    when there is nothing to send).  With credentials ``apiKey`` and ``time``
    are merged into the signed query and ``apiSig`` is appended last.
    """

    clashing = RESERVED_PARAMETERS.intersection(parameters)
    if clashing:
        msg = f'Parameters {sorted(clashing)} are reserved for request signing.'
        raise ValueError(msg)

    if credentials is None:
        query = canonicalize_parameters(parameters)
        return f'{method_name}?{query}' if query else method_name

    signed = dict(parameters)
    signed['apiKey'] = credentials.api_key
    signed['time'] = str(int(time.time()) if timestamp is None else timestamp)
    query = canonicalize_parameters(signed)
    api_sig = sign(method_name, query, credentials.api_secret, generate_nonce() if nonce is None else nonce)
    return f'{method_name}?{query}&apiSig={api_sig}'


__all__ = [
    'Credentials',
    'NONCE_ALPHABET',
    'NONCE_LENGTH',
    'RESERVED_PARAMETERS',
    'build_endpoint',
    'canonicalize_parameters',
    'generate_nonce',
    'sign',
]
