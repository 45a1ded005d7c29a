"""Maintenance commands: create tables, add an admin account.

    tedx-ndu init-db
    tedx-ndu create-admin USERNAME [--password PASSWORD]
"""

import argparse
import getpass
import logging
import sys

from sqlmodel import Session

from tedx_ndu.config import config
from tedx_ndu.errors import SiteError
from tedx_ndu.logging_config import setup_logging
from tedx_ndu.models.database import create_db_engine, create_tables
from tedx_ndu.services.user_service import UserService

logger = logging.getLogger(__name__)


def init_db(args, engine) -> int:
    create_tables(engine)
    logger.info("All tables created successfully")
    return 0


def create_admin(args, engine) -> int:
    password = args.password or getpass.getpass("Password: ")
    with Session(engine) as session:
        try:
            user = UserService(session).create_user(args.username, password)
        except SiteError as e:
            logger.error(f"Could not create admin {args.username!r}: {e.message}")
            return 1
    logger.info(f"Admin user {user.username} created with id {user.id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tedx-ndu", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL / MYSQL_* settings",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create all tables").set_defaults(handler=init_db)

    admin = commands.add_parser("create-admin", help="Create an admin account")
    admin.add_argument("username")
    admin.add_argument("--password", default=None)
    admin.set_defaults(handler=create_admin)

    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    engine = create_db_engine(args.database_url or config["database_url"])
    try:
        return args.handler(args, engine)
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
