"""CLI commands for querying the Travis CI API."""

import argparse
import json
import logging
import sys

import structlog

from .client import ErrorResponse, TravisClient
from .options import OrganizationOption, OrganizationsOption, RepositoriesOption, RepositoryOption

REPO_ACTIONS = ("activate", "deactivate", "migrate", "star", "unstar")


def _include(value):
    return [v for v in value.split(",") if v] if value else []


def _dump(result):
    if isinstance(result, list):
        data = [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in result]
    else:
        data = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _add_paging(parser):
    parser.add_argument("--limit", type=int, default=0, help="Page size")
    parser.add_argument("--offset", type=int, default=0, help="Page offset")
    parser.add_argument("--sort-by", default="", help="Sort field (e.g., id, name:desc)")


def _add_include(parser):
    parser.add_argument(
        "--include",
        default="",
        help="Comma-separated attributes to eager load (e.g., repository.default_branch)",
    )


def configure_logging(verbose=False):
    """Send log events to stderr so stdout stays valid JSON."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))


def build_parser():
    parser = argparse.ArgumentParser(
        description="Query the Travis CI API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api-url", default=None, help="API base URL (default: TRAVIS_API_URL)")
    parser.add_argument("--token", default=None, help="API token (default: TRAVIS_TOKEN)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every API request")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # org subcommand
    org_parser = subparsers.add_parser("org", help="Show an organization")
    org_parser.add_argument("id", type=int, help="Organization id")
    _add_include(org_parser)

    # orgs subcommand
    orgs_parser = subparsers.add_parser("orgs", help="List organizations of the current user")
    _add_paging(orgs_parser)
    orgs_parser.add_argument("--role", default="", help="Filter by membership role")
    _add_include(orgs_parser)

    # repo subcommand
    repo_parser = subparsers.add_parser("repo", help="Show a repository")
    repo_parser.add_argument("slug", help="Repository slug (owner/name) or id")
    _add_include(repo_parser)

    # repos subcommand
    repos_parser = subparsers.add_parser("repos", help="List repositories")
    owner_group = repos_parser.add_mutually_exclusive_group()
    owner_group.add_argument("--owner", default=None, help="Owner login")
    owner_group.add_argument("--github-id", type=int, default=None, help="Owner GitHub id")
    for flag in ("--active", "--active-on-org", "--managed-by-installation", "--private", "--starred"):
        repos_parser.add_argument(flag, action="store_true")
    _add_paging(repos_parser)
    _add_include(repos_parser)

    # repo-action subcommand
    action_parser = subparsers.add_parser("repo-action", help="Change a repository's state")
    action_parser.add_argument("action", choices=REPO_ACTIONS)
    action_parser.add_argument("slug", help="Repository slug (owner/name) or id")

    return parser


def run(args, client: TravisClient):
    if args.command == "org":
        org, _ = client.organizations.find(args.id, OrganizationOption(include=_include(args.include)))
        _dump(org)
    elif args.command == "orgs":
        opt = OrganizationsOption(
            limit=args.limit,
            offset=args.offset,
            sort_by=args.sort_by,
            role=args.role,
            include=_include(args.include),
        )
        orgs, _ = client.organizations.list(opt)
        _dump(orgs)
    elif args.command == "repo":
        repo, _ = client.repositories.find(args.slug, RepositoryOption(include=_include(args.include)))
        _dump(repo)
    elif args.command == "repos":
        opt = RepositoriesOption(
            active=args.active,
            active_on_org=args.active_on_org,
            managed_by_installation=args.managed_by_installation,
            private=args.private,
            starred=args.starred,
            limit=args.limit,
            offset=args.offset,
            sort_by=args.sort_by,
            include=_include(args.include),
        )
        if args.owner:
            repos, _ = client.repositories.list_by_owner(args.owner, opt)
        elif args.github_id is not None:
            repos, _ = client.repositories.list_by_github_id(args.github_id, opt)
        else:
            repos, _ = client.repositories.list(opt)
        _dump(repos)
    elif args.command == "repo-action":
        repo, _ = getattr(client.repositories, args.action)(args.slug)
        _dump(repo)


def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    configure_logging(args.verbose)

    with TravisClient(base_url=args.api_url, token=args.token) as client:
        try:
            run(args, client)
        except ErrorResponse as e:
            sys.stderr.write(f"Error: {e}\n")
            sys.exit(1)


if __name__ == "__main__":
    main()
