#!/usr/bin/env python3
"""mygit CLI entrypoint."""

import sys
import argparse
import logging
from importlib.metadata import version, PackageNotFoundError
from pathlib import Path

from mygit import git
from mygit.lib import output
from mygit.lib.config import load_config
from mygit.lib.prompts import NonInteractiveError
from mygit.session import Session, run_session

logger = logging.getLogger(__name__)


def get_version() -> str:
    try:
        return version("mygit")
    except PackageNotFoundError:
        return "unknown"


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mygit',
        description='Interactive menu for everyday git operations. '
                    'Run it inside a git working tree.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {get_version()}')
    return parser


def main(argv=None) -> int:
    build_parser().parse_args(argv)

    config = load_config()
    setup_logging(config.log_level)
    output.configure(config.color)

    repo = Path.cwd()
    if not git.is_work_tree(repo):
        output.error("The current directory is not a git repository")
        return 1

    session = Session(repo=repo, config=config)
    logger.debug(f"Session started in {repo}")
    try:
        return run_session(session)
    except NonInteractiveError as e:
        output.error(str(e))
        return 1
    except KeyboardInterrupt:
        # Ctrl-C while git itself was running
        output.plain()
        output.warn("Cancelled")
        return 130


if __name__ == '__main__':
    sys.exit(main())
