"""Light-weight helpers to mock the Codeforces API in unit tests."""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel

from .models import Contest, Member, Party, Problem, RatingChange, Submission, User


@dataclass(slots=True)
class RecordedCall:
    """Simple container capturing an outgoing request for assertions."""

    method: str
    url: httpx.URL
    headers: httpx.Headers

    @property
    def api_method(self) -> str:
        return self.url.path.rsplit('/', 1)[-1]


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return json.loads(value.model_dump_json(by_alias=True, exclude_none=True))
    if isinstance(value, list | tuple):
        return [_dump(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _coerce_payload(value: Any) -> tuple[int, Any]:
    status_code = 200
    payload = value
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], int):
        status_code, payload = value

    if isinstance(payload, str | bytes):
        return status_code, payload
    if isinstance(payload, Mapping):
        return status_code, _dump(payload)

    msg = 'Mock payloads must be envelope dicts, raw bodies or (status, payload) tuples.'
    raise TypeError(msg)


def create_mock_transport(replies: Mapping[str, Any]) -> tuple[httpx.MockTransport, list[RecordedCall]]:
    """Create an :class:`httpx.MockTransport` returning canned replies.

    ``replies`` maps API method names (``'user.info'``) to an envelope dict, a
    raw ``str``/``bytes`` body, or a ``(status_code, payload)`` tuple.
    """

    responses: MutableMapping[str, tuple[int, Any]] = {name: _coerce_payload(value) for name, value in replies.items()}
    calls: list[RecordedCall] = []

    def handler(request: httpx.Request) -> httpx.Response:
        recorded = RecordedCall(method=request.method, url=request.url, headers=httpx.Headers(request.headers))
        calls.append(recorded)

        status_and_payload = responses.get(recorded.api_method)
        if status_and_payload is None:
            return httpx.Response(400, json=make_failed_reply(f'Unknown method: {recorded.api_method}'))

        status_code, payload = status_and_payload
        if isinstance(payload, str | bytes):
            return httpx.Response(status_code, content=payload)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler), calls


def make_ok_reply(result: Any) -> dict[str, Any]:
    return {'status': 'OK', 'result': _dump(result)}


def make_failed_reply(comment: str) -> dict[str, Any]:
    return {'status': 'FAILED', 'comment': comment}


def make_user(*, handle: str = 'tourist', rating: int | None = 3800) -> User:
    return User(
        handle=handle,
        rating=rating,
        max_rating=rating,
        rank='legendary grandmaster' if rating else None,
        contribution=0,
        friend_of_count=0,
        registration_time_seconds=1265987288,
    )


def make_contest(*, contest_id: int = 566, phase: str = 'FINISHED') -> Contest:
    return Contest(
        id=contest_id,
        name=f'Codeforces Round #{contest_id}',
        type='CF',
        phase=phase,
        frozen=False,
        duration_seconds=7200,
        start_time_seconds=1438273200,
    )


def make_problem(*, contest_id: int = 566, index: str = 'A') -> Problem:
    return Problem(contest_id=contest_id, index=index, name='Matching Names', type='PROGRAMMING', rating=2300, tags=['strings'])


def make_submission(*, submission_id: int = 1, handle: str = 'tourist', verdict: str | None = 'OK') -> Submission:
    return Submission(
        id=submission_id,
        contest_id=566,
        creation_time_seconds=1438273500,
        relative_time_seconds=300,
        problem=make_problem(),
        author=Party(contest_id=566, members=[Member(handle=handle)], participant_type='CONTESTANT', ghost=False),
        programming_language='GNU C++17',
        verdict=verdict,
        testset='TESTS',
        passed_test_count=42,
        time_consumed_millis=15,
        memory_consumed_bytes=0,
    )


def make_rating_change(*, handle: str = 'tourist', old_rating: int = 3700, new_rating: int = 3800) -> RatingChange:
    return RatingChange(
        contest_id=566,
        contest_name='Codeforces Round #566',
        handle=handle,
        rank=1,
        rating_update_time_seconds=1438288000,
        old_rating=old_rating,
        new_rating=new_rating,
    )


__all__ = [
    'RecordedCall',
    'create_mock_transport',
    'make_contest',
    'make_failed_reply',
    'make_ok_reply',
    'make_problem',
    'make_rating_change',
    'make_submission',
    'make_user',
]
