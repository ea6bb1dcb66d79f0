"""Synchronous HTTP client for the Codeforces API.

:class:`CodeforcesClient` turns our Pydantic request models into ``httpx``
GET calls and validates the uniform JSON envelope::

    {"status": "OK", "result": ...}
    {"status": "FAILED", "comment": "handles: User with handle x not found"}

Failures come out through three separate exception types so callers can tell
them apart: :class:`CodeforcesTransportError` (nothing was learned, retrying
is fine), :class:`CodeforcesReplyError` (Codeforces rejected the call) and
:class:`CodeforcesDecodeError` (the reply does not match the expected shape).

The client never retries or throttles.  Codeforces allows roughly one call
per two seconds; pacing is up to the caller.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from functools import lru_cache
from typing import Annotated, Any, TypeVar

import httpx
from pydantic import Field, TypeAdapter, ValidationError

from .config import ClientConfig
from .models import (
    BlogEntry,
    BlogEntryCommentsRequest,
    BlogEntryViewRequest,
    CodeforcesRequest,
    Comment,
    Contest,
    ContestHacksRequest,
    ContestListRequest,
    ContestRatingChangesRequest,
    ContestStandings,
    ContestStandingsRequest,
    ContestStatusRequest,
    FailedReply,
    Hack,
    OkReply,
    ProblemSet,
    ProblemsetProblemsRequest,
    ProblemsetRecentStatusRequest,
    RatingChange,
    RecentAction,
    RecentActionsRequest,
    Submission,
    User,
    UserBlogEntriesRequest,
    UserFriendsRequest,
    UserInfoRequest,
    UserRatedListRequest,
    UserRatingRequest,
    UserStatusRequest,
)
from .signing import build_endpoint, generate_nonce

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CodeforcesClientError(RuntimeError):
    """Base error for everything raised by :class:`CodeforcesClient`."""


class CodeforcesTransportError(CodeforcesClientError):
    """The request did not complete: connection, protocol or HTTP failure."""


class CodeforcesTimeoutError(CodeforcesTransportError):
    """The request did not complete within the configured timeout."""


class CodeforcesDecodeError(CodeforcesClientError):
    """The reply was received but is not the envelope/payload we expected."""


class CodeforcesReplyError(CodeforcesClientError):
    """Wrap a ``status = FAILED`` reply, keeping the comment verbatim."""

    def __init__(self, reply: FailedReply):
        self.reply = reply
        self.comment = reply.comment
        super().__init__(f'Codeforces reported failure: {reply.comment}')


@lru_cache(maxsize=None)
def _reply_adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(Annotated[OkReply[shape] | FailedReply, Field(discriminator='status')])


def decode_reply(raw: str | bytes, shape: type[T] | Any) -> T:
    """Decode an envelope and return its ``result`` validated as ``shape``.

    ``shape`` is any type pydantic can validate, usually a payload model or
    ``list[Model]``.
    """

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        msg = 'Codeforces response did not contain a valid JSON payload.'
        raise CodeforcesDecodeError(msg) from exc

    try:
        reply = _reply_adapter(shape).validate_python(payload)
    except ValidationError as exc:
        msg = f'Unable to validate Codeforces response as {getattr(shape, "__name__", shape)!s}.'
        raise CodeforcesDecodeError(msg) from exc

    if isinstance(reply, FailedReply):
        raise CodeforcesReplyError(reply)
    return reply.result


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class CodeforcesClient:
    """Typed facade over the public Codeforces API methods."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] = generate_nonce,
    ) -> None:
        if http_client is not None and transport is not None:
            msg = 'Pass either `transport` or a pre-configured `http_client`, not both.'
            raise ValueError(msg)

        self._config = config or ClientConfig()
        self._clock = clock
        self._nonce_factory = nonce_factory
        self._own_client = http_client is None
        if http_client is None:
            options: dict[str, Any] = {'timeout': self._config.timeout, 'transport': transport}
            if self._config.proxy is not None:
                options['proxy'] = self._config.proxy
            self._client = httpx.Client(**options)
        else:
            self._client = http_client

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self) -> CodeforcesClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._own_client:
            self._client.close()

    # -- Public API -----------------------------------------------------

    def blog_entry_comments(self, request: BlogEntryCommentsRequest) -> list[Comment]:
        return self._call(request, list[Comment])

    def blog_entry_view(self, request: BlogEntryViewRequest) -> BlogEntry:
        return self._call(request, BlogEntry)

    def contest_hacks(self, request: ContestHacksRequest) -> list[Hack]:
        return self._call(request, list[Hack])

    def contest_list(self, request: ContestListRequest | None = None) -> list[Contest]:
        return self._call(request or ContestListRequest(), list[Contest])

    def contest_rating_changes(self, request: ContestRatingChangesRequest) -> list[RatingChange]:
        return self._call(request, list[RatingChange])

    def contest_standings(self, request: ContestStandingsRequest) -> ContestStandings:
        return self._call(request, ContestStandings)

    def contest_status(self, request: ContestStatusRequest) -> list[Submission]:
        return self._call(request, list[Submission])

    def problemset_problems(self, request: ProblemsetProblemsRequest | None = None) -> ProblemSet:
        return self._call(request or ProblemsetProblemsRequest(), ProblemSet)

    def problemset_recent_status(self, request: ProblemsetRecentStatusRequest) -> list[Submission]:
        return self._call(request, list[Submission])

    def recent_actions(self, request: RecentActionsRequest) -> list[RecentAction]:
        return self._call(request, list[RecentAction])

    def user_blog_entries(self, request: UserBlogEntriesRequest) -> list[BlogEntry]:
        return self._call(request, list[BlogEntry])

    def user_friends(self, request: UserFriendsRequest | None = None) -> list[str]:
        return self._call(request or UserFriendsRequest(), list[str])

    def user_info(self, request: UserInfoRequest) -> list[User]:
        return self._call(request, list[User])

    def user_rated_list(self, request: UserRatedListRequest | None = None) -> list[User]:
        return self._call(request or UserRatedListRequest(), list[User])

    def user_rating(self, request: UserRatingRequest) -> list[RatingChange]:
        return self._call(request, list[RatingChange])

    def user_status(self, request: UserStatusRequest) -> list[Submission]:
        return self._call(request, list[Submission])

    # -- Internal helpers -----------------------------------------------

    def _parameters(self, request: CodeforcesRequest) -> dict[str, str]:
        payload = request.model_dump(mode='json', by_alias=True, exclude_none=True)
        payload.pop('method', None)
        parameters = {key: _stringify(value) for key, value in payload.items()}
        if self._config.lang is not None:
            parameters['lang'] = self._config.lang
        return parameters

    def endpoint_for(self, request: CodeforcesRequest) -> str:
        """Return the path (relative to the API prefix) ``request`` would hit.

        Signed endpoints embed the current time and expire after a few
        minutes on the server side.
        """

        credentials = self._config.credentials
        if credentials is None:
            if request.requires_auth:
                msg = f'{request.method} requires an API key; configure api_key and api_secret.'
                raise CodeforcesClientError(msg)
            return build_endpoint(request.method, self._parameters(request))
        return build_endpoint(
            request.method,
            self._parameters(request),
            credentials,
            timestamp=int(self._clock()),
            nonce=self._nonce_factory(),
        )

    def _call(self, request: CodeforcesRequest, shape: Any) -> Any:
        endpoint = self.endpoint_for(request)
        response = self._execute(request.method, endpoint)
        try:
            return decode_reply(response.content, shape)
        except CodeforcesDecodeError as exc:
            if response.is_error:
                msg = f'Codeforces returned unexpected HTTP status {response.status_code} for {request.method!r}'
                raise CodeforcesTransportError(msg) from exc
            raise
        except CodeforcesReplyError as exc:
            logger.warning('Codeforces call %s failed: %s', request.method, exc.comment)
            raise

    def _execute(self, method_name: str, endpoint: str) -> httpx.Response:
        logger.debug('GET %s (signed=%s)', method_name, self._config.credentials is not None)
        try:
            return self._client.get(self._config.base_url + endpoint, timeout=self._config.timeout)
        except httpx.TimeoutException as exc:
            msg = f'Timed out after {self._config.timeout}s while calling {method_name!r}'
            raise CodeforcesTimeoutError(msg) from exc
        except httpx.HTTPError as exc:  # Network / protocol problems
            msg = f'Error communicating with Codeforces while calling {method_name!r}'
            raise CodeforcesTransportError(msg) from exc


__all__ = [
    'CodeforcesClient',
    'CodeforcesClientError',
    'CodeforcesDecodeError',
    'CodeforcesReplyError',
    'CodeforcesTimeoutError',
    'CodeforcesTransportError',
    'decode_reply',
]
