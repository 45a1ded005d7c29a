"""Configuration loader for the TEDx NDU site backend"""

import os
from pathlib import Path

from dotenv import load_dotenv

project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

# Load .env file if it exists. For local development only.
if env_path.exists():
    load_dotenv(env_path)

DEFAULT_CONTENT_DIR = Path(__file__).parent / "content"


def build_database_url(settings: dict) -> str:
    """Build a SQLAlchemy MySQL URL from the individual MYSQL_* settings"""
    password = settings.get("mysql_password") or ""
    credentials = settings["mysql_user"]
    if password:
        credentials = f"{credentials}:{password}"
    return (
        f"mysql+pymysql://{credentials}@{settings['mysql_host']}:"
        f"{settings['mysql_port']}/{settings['mysql_database']}?charset=utf8mb4"
    )


def _split_origins(raw: str | None) -> list[str]:
    if not raw:
        return ["https://tedxndu.naxcivan.az"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# Configuration dictionary - set once at initialization
config = {
    "mysql_host": os.getenv("MYSQL_HOST", "localhost"),
    "mysql_user": os.getenv("MYSQL_USER", "root"),
    "mysql_password": os.getenv("MYSQL_PASSWORD", ""),
    "mysql_database": os.getenv("MYSQL_DATABASE", "tedx"),
    "mysql_port": int(os.getenv("MYSQL_PORT", "3306")),
    "database_url": os.getenv("DATABASE_URL"),
    "session_secret": os.getenv("SESSION_SECRET", "tedx-ndu-secret-key"),
    # Kept under the NODE_ENV name so existing deployments keep working
    "environment": os.getenv("NODE_ENV", "development"),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "sql_log_level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
    "access_log": os.getenv("ACCESS_LOG", "false").lower() == "true",
    "port": int(os.getenv("PORT", "5000")),
    "cors_origins": _split_origins(os.getenv("CORS_ORIGINS")),
    "rate_limit": os.getenv("RATE_LIMIT", "100/15 minutes"),
    "rate_limit_enabled": os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true",
    # Peers whose X-Forwarded-For is believed; everyone else is keyed by socket address
    "forwarded_allow_ips": os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1"),
    "content_dir": os.getenv("CONTENT_DIR", str(DEFAULT_CONTENT_DIR)),
}

if not config["database_url"]:
    config["database_url"] = build_database_url(config)


def is_production(settings: dict) -> bool:
    return settings.get("environment") == "production"
