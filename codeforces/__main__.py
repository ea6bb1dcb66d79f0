"""Print Codeforces profiles: ``python -m codeforces tourist Petr``."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from .client import CodeforcesClient, CodeforcesClientError
from .config import SUPPORTED_LANGUAGES, ClientConfig
from .models import UserInfoRequest, format_pretty


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='codeforces', description='Fetch user profiles from the Codeforces API.')
    parser.add_argument('handles', nargs='+', help='Codeforces handles to look up.')
    parser.add_argument('--lang', choices=SUPPORTED_LANGUAGES, help='Response language.')
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log requests.')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    config = ClientConfig.from_env()
    overrides = {key: value for key, value in (('lang', args.lang), ('timeout', args.timeout)) if value is not None}
    if overrides:
        config = dataclasses.replace(config, **overrides)

    print('Requesting user information...', file=sys.stderr)
    try:
        with CodeforcesClient(config) as client:
            users = client.user_info(UserInfoRequest(handles=args.handles))
    except CodeforcesClientError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    print(format_pretty(users))
    return 0


if __name__ == '__main__':
    sys.exit(main())
