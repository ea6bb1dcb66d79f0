"""Pydantic models describing the Codeforces API requests and payloads.

Request models mirror the parameters documented at
https://codeforces.com/apiHelp/methods; each one pins the API method name in a
frozen ``method`` field so the client can route it without extra lookups.
Payload models mirror https://codeforces.com/apiHelp/objects.  Codeforces
speaks camelCase, the models expose snake_case attributes and accept either
spelling on input.

Payload models ignore unknown fields: Codeforces adds fields to its objects
from time to time and an older client should keep decoding them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any, ClassVar, Generic, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# -- Shared scalar aliases --------------------------------------------------
ContestId = Annotated[int, Field(gt=0, description='Codeforces contest (or gym) identifier.')]
BlogEntryId = Annotated[int, Field(gt=0, description='Identifier of a blog entry.')]
UnixSeconds = Annotated[int, Field(description='Unix timestamp in seconds.')]
Handle = Annotated[str, Field(min_length=1, description='Codeforces user handle.')]


def _split_semicolons(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(';') if item.strip()]
    return value


def _join_semicolons(value: Sequence[str]) -> str:
    return ';'.join(value)


SemicolonList = Annotated[
    list[str],
    BeforeValidator(_split_semicolons),
    PlainSerializer(_join_semicolons, return_type=str),
]
"""List parameter sent as one ``a;b;c`` value (handles, tags)."""

# -- Enumerations -----------------------------------------------------------
ContestType = Literal['CF', 'IOI', 'ICPC']
ContestPhase = Literal['BEFORE', 'CODING', 'PENDING_SYSTEM_TEST', 'SYSTEM_TEST', 'FINISHED']
ParticipantType = Literal['CONTESTANT', 'PRACTICE', 'VIRTUAL', 'MANAGER', 'OUT_OF_COMPETITION']
ProblemType = Literal['PROGRAMMING', 'QUESTION']
ProblemResultType = Literal['PRELIMINARY', 'FINAL']
Verdict = Literal[
    'FAILED',
    'OK',
    'PARTIAL',
    'COMPILATION_ERROR',
    'RUNTIME_ERROR',
    'WRONG_ANSWER',
    'PRESENTATION_ERROR',
    'TIME_LIMIT_EXCEEDED',
    'MEMORY_LIMIT_EXCEEDED',
    'IDLENESS_LIMIT_EXCEEDED',
    'SECURITY_VIOLATED',
    'CRASHED',
    'INPUT_PREPARATION_CRASHED',
    'CHALLENGED',
    'SKIPPED',
    'TESTING',
    'REJECTED',
]
Testset = Literal[
    'SAMPLES',
    'PRETESTS',
    'TESTS',
    'CHALLENGES',
    'TESTS1',
    'TESTS2',
    'TESTS3',
    'TESTS4',
    'TESTS5',
    'TESTS6',
    'TESTS7',
    'TESTS8',
    'TESTS9',
    'TESTS10',
]
HackVerdict = Literal[
    'HACK_SUCCESSFUL',
    'HACK_UNSUCCESSFUL',
    'INVALID_INPUT',
    'GENERATOR_INCOMPILABLE',
    'GENERATOR_CRASHED',
    'IGNORED',
    'TESTING',
    'OTHER',
]


class CodeforcesBaseModel(BaseModel):
    """Base class for request models: strict about what we send."""

    model_config = ConfigDict(extra='forbid', populate_by_name=True, str_strip_whitespace=True, alias_generator=to_camel)


class CodeforcesObject(BaseModel):
    """Base class for payload models returned by the API."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True, alias_generator=to_camel)


# -- Requests ---------------------------------------------------------------


class CodeforcesRequest(CodeforcesBaseModel):
    """Common shape of every request: the API method plus its parameters."""

    method: str
    requires_auth: ClassVar[bool] = False


class BlogEntryCommentsRequest(CodeforcesRequest):
    method: Literal['blogEntry.comments'] = Field(default='blogEntry.comments', frozen=True)
    blog_entry_id: BlogEntryId


class BlogEntryViewRequest(CodeforcesRequest):
    method: Literal['blogEntry.view'] = Field(default='blogEntry.view', frozen=True)
    blog_entry_id: BlogEntryId


class ContestHacksRequest(CodeforcesRequest):
    method: Literal['contest.hacks'] = Field(default='contest.hacks', frozen=True)
    contest_id: ContestId


class ContestListRequest(CodeforcesRequest):
    method: Literal['contest.list'] = Field(default='contest.list', frozen=True)
    gym: Annotated[bool | None, Field(description='List gym contests instead of regular ones.')] = None


class ContestRatingChangesRequest(CodeforcesRequest):
    method: Literal['contest.ratingChanges'] = Field(default='contest.ratingChanges', frozen=True)
    contest_id: ContestId


class ContestStandingsRequest(CodeforcesRequest):
    """Query parameters for ``contest.standings``."""

    method: Literal['contest.standings'] = Field(default='contest.standings', frozen=True)
    contest_id: ContestId
    from_: Annotated[int | None, Field(alias='from', ge=1, description='1-based index of the first row to return.')] = None
    count: Annotated[int | None, Field(ge=1, description='Number of rows to return.')] = None
    handles: Annotated[SemicolonList | None, Field(description='Only show rows of these users (at most 10000).')] = None
    room: Annotated[int | None, Field(ge=1, description='Only show participants from this room.')] = None
    show_unofficial: Annotated[bool | None, Field(description='Include virtual, out-of-competition and practice participants.')] = None


class ContestStatusRequest(CodeforcesRequest):
    method: Literal['contest.status'] = Field(default='contest.status', frozen=True)
    contest_id: ContestId
    handle: Annotated[str | None, Field(description='Only return submissions of this user.')] = None
    from_: Annotated[int | None, Field(alias='from', ge=1)] = None
    count: Annotated[int | None, Field(ge=1)] = None


class ProblemsetProblemsRequest(CodeforcesRequest):
    method: Literal['problemset.problems'] = Field(default='problemset.problems', frozen=True)
    tags: Annotated[SemicolonList | None, Field(description='Only return problems carrying all of these tags.')] = None
    problemset_name: Annotated[str | None, Field(description='Custom problemset short name, like ``acmsguru``.')] = None


class ProblemsetRecentStatusRequest(CodeforcesRequest):
    method: Literal['problemset.recentStatus'] = Field(default='problemset.recentStatus', frozen=True)
    count: Annotated[int, Field(ge=1, le=1000, description='Number of submissions to return.')]
    problemset_name: Annotated[str | None, Field(description='Custom problemset short name, like ``acmsguru``.')] = None


class RecentActionsRequest(CodeforcesRequest):
    method: Literal['recentActions'] = Field(default='recentActions', frozen=True)
    max_count: Annotated[int, Field(ge=1, le=100, description='Number of recent actions to return.')]


class UserBlogEntriesRequest(CodeforcesRequest):
    method: Literal['user.blogEntries'] = Field(default='user.blogEntries', frozen=True)
    handle: Handle


class UserFriendsRequest(CodeforcesRequest):
    """``user.friends`` only works for authorized calls."""

    method: Literal['user.friends'] = Field(default='user.friends', frozen=True)
    only_online: Annotated[bool | None, Field(description='Only return friends that are online.')] = None
    requires_auth: ClassVar[bool] = True


class UserInfoRequest(CodeforcesRequest):
    method: Literal['user.info'] = Field(default='user.info', frozen=True)
    handles: Annotated[SemicolonList, Field(min_length=1, description='Handles to look up (at most 10000).')]


class UserRatedListRequest(CodeforcesRequest):
    method: Literal['user.ratedList'] = Field(default='user.ratedList', frozen=True)
    active_only: Annotated[bool | None, Field(description='Only users that took part in a rated contest during the last month.')] = None


class UserRatingRequest(CodeforcesRequest):
    method: Literal['user.rating'] = Field(default='user.rating', frozen=True)
    handle: Handle


class UserStatusRequest(CodeforcesRequest):
    method: Literal['user.status'] = Field(default='user.status', frozen=True)
    handle: Handle
    from_: Annotated[int | None, Field(alias='from', ge=1)] = None
    count: Annotated[int | None, Field(ge=1)] = None


# -- Reply envelope ---------------------------------------------------------

ResultT = TypeVar('ResultT')


class OkReply(CodeforcesObject, Generic[ResultT]):
    """Successful envelope; ``result`` is typed per API method."""

    status: Literal['OK']
    result: ResultT
    comment: str | None = None


class FailedReply(CodeforcesObject):
    """Failure envelope; ``comment`` holds the reason reported by Codeforces."""

    status: Literal['FAILED']
    comment: str


# -- Payload objects --------------------------------------------------------


class User(CodeforcesObject):
    handle: Handle
    email: Annotated[str | None, Field(description='Shown only if the user allowed to share contact info.')] = None
    vk_id: Annotated[str | None, Field(description='Id for the VK social network.')] = None
    open_id: str | None = None
    first_name: Annotated[str | None, Field(description='Localized; may be absent.')] = None
    last_name: Annotated[str | None, Field(description='Localized; may be absent.')] = None
    country: str | None = None
    city: str | None = None
    organization: str | None = None
    contribution: int = 0
    rank: Annotated[str | None, Field(description='Localized rank title, absent for unrated users.')] = None
    rating: int | None = None
    max_rank: str | None = None
    max_rating: int | None = None
    last_online_time_seconds: UnixSeconds | None = None
    registration_time_seconds: UnixSeconds | None = None
    friend_of_count: int = 0
    avatar: Annotated[str | None, Field(description='URL of the user avatar.')] = None
    title_photo: Annotated[str | None, Field(description='URL of the user title photo.')] = None


class BlogEntry(CodeforcesObject):
    id: int
    original_locale: str
    creation_time_seconds: UnixSeconds
    author_handle: str
    title: Annotated[str, Field(description='Localized title, may contain HTML.')]
    content: Annotated[str | None, Field(description='Localized body; absent in short form.')] = None
    locale: str
    modification_time_seconds: UnixSeconds
    allow_view_history: bool
    tags: list[str] = Field(default_factory=list)
    rating: int


class Comment(CodeforcesObject):
    id: int
    creation_time_seconds: UnixSeconds
    commentator_handle: str
    locale: str
    text: str
    parent_comment_id: int | None = None
    rating: int


class RecentAction(CodeforcesObject):
    time_seconds: UnixSeconds
    blog_entry: Annotated[BlogEntry | None, Field(description='Blog entry in short form.')] = None
    comment: Comment | None = None


class RatingChange(CodeforcesObject):
    contest_id: ContestId
    contest_name: str
    handle: str
    rank: Annotated[int, Field(description='Place of the user in the contest.')]
    rating_update_time_seconds: UnixSeconds
    old_rating: int
    new_rating: int


class Contest(CodeforcesObject):
    id: ContestId
    name: str
    type: ContestType
    phase: ContestPhase
    frozen: bool
    duration_seconds: int
    start_time_seconds: UnixSeconds | None = None
    relative_time_seconds: Annotated[int | None, Field(description='Seconds since the start; negative before it.')] = None
    prepared_by: str | None = None
    website_url: str | None = None
    description: str | None = None
    difficulty: Annotated[int | None, Field(ge=1, le=5)] = None
    kind: str | None = None
    icpc_region: str | None = None
    country: str | None = None
    city: str | None = None
    season: str | None = None


class Member(CodeforcesObject):
    handle: str
    name: str | None = None


class Party(CodeforcesObject):
    contest_id: ContestId | None = None
    members: list[Member]
    participant_type: ParticipantType
    team_id: int | None = None
    team_name: str | None = None
    ghost: Annotated[bool, Field(description='Party took part in the contest outside Codeforces.')]
    room: int | None = None
    start_time_seconds: UnixSeconds | None = None


class Problem(CodeforcesObject):
    contest_id: ContestId | None = None
    problemset_name: str | None = None
    index: Annotated[str, Field(description='Letter or letter with digit(s), e.g. ``A`` or ``B1``.')]
    name: str
    type: ProblemType
    points: float | None = None
    rating: int | None = None
    tags: list[str] = Field(default_factory=list)


class ProblemStatistics(CodeforcesObject):
    contest_id: ContestId | None = None
    index: str
    solved_count: int


class Submission(CodeforcesObject):
    id: int
    contest_id: ContestId | None = None
    creation_time_seconds: UnixSeconds
    relative_time_seconds: int
    problem: Problem
    author: Party
    programming_language: str
    verdict: Verdict | None = None
    testset: Testset
    passed_test_count: int
    time_consumed_millis: int
    memory_consumed_bytes: int
    points: float | None = None


class JudgeProtocol(CodeforcesObject):
    manual: bool
    protocol: str
    verdict: str


class Hack(CodeforcesObject):
    id: int
    creation_time_seconds: UnixSeconds
    hacker: Party
    defender: Party
    verdict: HackVerdict | None = None
    problem: Problem
    test: str | None = None
    judge_protocol: JudgeProtocol | None = None


class ProblemResult(CodeforcesObject):
    points: float
    penalty: int | None = None
    rejected_attempt_count: int
    type: ProblemResultType
    best_submission_time_seconds: int | None = None


class RanklistRow(CodeforcesObject):
    party: Party
    rank: int
    points: float
    penalty: int
    successful_hack_count: int
    unsuccessful_hack_count: int
    problem_results: list[ProblemResult]
    last_submission_time_seconds: int | None = None


class ContestStandings(CodeforcesObject):
    contest: Contest
    problems: list[Problem]
    rows: list[RanklistRow]


class ProblemSet(CodeforcesObject):
    problems: list[Problem]
    problem_statistics: list[ProblemStatistics]


def format_pretty(value: Any) -> str:
    """Render a decoded payload for humans (``User = {...}``)."""

    if isinstance(value, BaseModel):
        return f'{type(value).__name__} = {value.model_dump_json(indent=2, by_alias=True)}'
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return '\n'.join(format_pretty(item) for item in value)
    return repr(value)


__all__ = [
    'BlogEntry',
    'BlogEntryCommentsRequest',
    'BlogEntryViewRequest',
    'CodeforcesObject',
    'CodeforcesRequest',
    'Comment',
    'Contest',
    'ContestHacksRequest',
    'ContestListRequest',
    'ContestPhase',
    'ContestRatingChangesRequest',
    'ContestStandings',
    'ContestStandingsRequest',
    'ContestStatusRequest',
    'ContestType',
    'FailedReply',
    'Hack',
    'HackVerdict',
    'JudgeProtocol',
    'Member',
    'OkReply',
    'ParticipantType',
    'Party',
    'Problem',
    'ProblemResult',
    'ProblemResultType',
    'ProblemSet',
    'ProblemStatistics',
    'ProblemType',
    'ProblemsetProblemsRequest',
    'ProblemsetRecentStatusRequest',
    'RanklistRow',
    'RatingChange',
    'RecentAction',
    'RecentActionsRequest',
    'Submission',
    'Testset',
    'User',
    'UserBlogEntriesRequest',
    'UserFriendsRequest',
    'UserInfoRequest',
    'UserRatedListRequest',
    'UserRatingRequest',
    'UserStatusRequest',
    'Verdict',
    'format_pretty',
]
