"""Typed client, request models and signing helpers for the Codeforces API."""

from .client import (
    CodeforcesClient,
    CodeforcesClientError,
    CodeforcesDecodeError,
    CodeforcesReplyError,
    CodeforcesTimeoutError,
    CodeforcesTransportError,
    decode_reply,
)
from .config import BASE_URL, ClientConfig
from .mocks import (
    RecordedCall,
    create_mock_transport,
    make_contest,
    make_failed_reply,
    make_ok_reply,
    make_problem,
    make_rating_change,
    make_submission,
    make_user,
)
from .models import (
    BlogEntry,
    BlogEntryCommentsRequest,
    BlogEntryViewRequest,
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
    JudgeProtocol,
    Member,
    OkReply,
    Party,
    Problem,
    ProblemResult,
    ProblemSet,
    ProblemsetProblemsRequest,
    ProblemsetRecentStatusRequest,
    ProblemStatistics,
    RanklistRow,
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
    format_pretty,
)
from .signing import Credentials, build_endpoint, canonicalize_parameters, generate_nonce, sign

__all__ = [
    'BASE_URL',
    'BlogEntry',
    'BlogEntryCommentsRequest',
    'BlogEntryViewRequest',
    'ClientConfig',
    'CodeforcesClient',
    'CodeforcesClientError',
    'CodeforcesDecodeError',
    'CodeforcesReplyError',
    'CodeforcesTimeoutError',
    'CodeforcesTransportError',
    'Comment',
    'Contest',
    'ContestHacksRequest',
    'ContestListRequest',
    'ContestRatingChangesRequest',
    'ContestStandings',
    'ContestStandingsRequest',
    'ContestStatusRequest',
    'Credentials',
    'FailedReply',
    'Hack',
    'JudgeProtocol',
    'Member',
    'OkReply',
    'Party',
    'Problem',
    'ProblemResult',
    'ProblemSet',
    'ProblemStatistics',
    'ProblemsetProblemsRequest',
    'ProblemsetRecentStatusRequest',
    'RanklistRow',
    'RatingChange',
    'RecentAction',
    'RecentActionsRequest',
    'RecordedCall',
    'Submission',
    'User',
    'UserBlogEntriesRequest',
    'UserFriendsRequest',
    'UserInfoRequest',
    'UserRatedListRequest',
    'UserRatingRequest',
    'UserStatusRequest',
    'build_endpoint',
    'canonicalize_parameters',
    'create_mock_transport',
    'decode_reply',
    'format_pretty',
    'generate_nonce',
    'make_contest',
    'make_failed_reply',
    'make_ok_reply',
    'make_problem',
    'make_rating_change',
    'make_submission',
    'make_user',
    'sign',
]
