from dotenv import load_dotenv
from dataclasses import dataclass, field, fields
from pathlib import Path
import json
import os

from seo_audit.constants import (
    CLS_TARGET,
    CONCURRENT_REQUESTS_LIMIT,
    DEFAULT_FETCH_TIMEOUT_MS,
    DEFAULT_GLOBAL_TIMEOUT_MS,
    DEFAULT_LINK_CHECK_TIMEOUT_MS,
    DEFAULT_LOCALE,
    DEFAULT_USER_AGENT,
    FCP_TARGET_MS,
    LCP_TARGET_MS,
    LINK_CHECK_LIMIT,
    MAX_URL_LENGTH,
    META_DESCRIPTION_MAX_LENGTH,
    META_DESCRIPTION_MIN_LENGTH,
    SLOW_LOAD_TIME_MS,
    SUPPORTED_LOCALES,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    TOP_KEYWORDS_COUNT,
)
from seo_audit.models import DEFAULT_CHECKLIST, CheckKind

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages process settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")
    HOST = os.getenv("SEO_AUDIT_HOST", "127.0.0.1")
    PORT = int(os.getenv("SEO_AUDIT_PORT", "8000"))
    USER_AGENT = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    REPORT_DIR = os.getenv("SEO_AUDIT_REPORT_DIR")


settings = Settings()


@dataclass(frozen=True)
class AuditConfig:
    """Limits, thresholds and checklist for one auditor.

    Instances are read-only and may be shared by concurrent audits.
    """

    # Network budgets (milliseconds)
    fetch_timeout_ms: int = DEFAULT_FETCH_TIMEOUT_MS
    link_check_timeout_ms: int = DEFAULT_LINK_CHECK_TIMEOUT_MS
    global_timeout_ms: int = DEFAULT_GLOBAL_TIMEOUT_MS

    # Link validation sampling
    link_check_limit: int = LINK_CHECK_LIMIT
    concurrent_requests_limit: int = CONCURRENT_REQUESTS_LIMIT

    user_agent: str = DEFAULT_USER_AGENT
    locale: str = DEFAULT_LOCALE

    # Metadata
    title_min_length: int = TITLE_MIN_LENGTH
    title_max_length: int = TITLE_MAX_LENGTH
    meta_description_min_length: int = META_DESCRIPTION_MIN_LENGTH
    meta_description_max_length: int = META_DESCRIPTION_MAX_LENGTH
    max_url_length: int = MAX_URL_LENGTH
    slow_load_time_ms: int = SLOW_LOAD_TIME_MS

    # Content
    top_keywords_count: int = TOP_KEYWORDS_COUNT

    # Performance suggestion targets
    fcp_target_ms: int = FCP_TARGET_MS
    lcp_target_ms: int = LCP_TARGET_MS
    cls_target: float = CLS_TARGET

    checklist: tuple[CheckKind, ...] = field(default=DEFAULT_CHECKLIST)

    def __post_init__(self):
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale '{self.locale}', expected one of {SUPPORTED_LOCALES}"
            )
        if self.concurrent_requests_limit < 1:
            raise ValueError("concurrent_requests_limit must be at least 1")
        if not self.checklist:
            raise ValueError("checklist must contain at least one check")

    @classmethod
    def from_env(cls) -> "AuditConfig":
        """Load configuration from environment variables.

        Environment variables should be prefixed with SEO_AUDIT_
        e.g., SEO_AUDIT_LINK_CHECK_LIMIT=10

        Returns:
            AuditConfig with values from environment
        """
        overrides = {}
        prefix = "SEO_AUDIT_"

        for f in fields(cls):
            if f.name == "checklist":
                continue
            env_value = os.getenv(f"{prefix}{f.name.upper()}")
            if env_value is None:
                continue
            default = f.default
            try:
                if isinstance(default, int):
                    overrides[f.name] = int(env_value)
                elif isinstance(default, float):
                    overrides[f.name] = float(env_value)
                else:
                    overrides[f.name] = env_value
            except ValueError:
                pass  # Keep default if conversion fails

        if "user_agent" not in overrides:
            overrides["user_agent"] = settings.USER_AGENT

        checklist = os.getenv(f"{prefix}CHECKLIST")
        if checklist:
            overrides["checklist"] = _parse_checklist(checklist.split(","))

        return cls(**overrides)

    @classmethod
    def from_file(cls, path: str) -> "AuditConfig":
        """Load configuration from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            AuditConfig with values from file
        """
        file_path = Path(path)

        if not file_path.exists():
            return cls()

        with open(file_path, 'r') as f:
            config = json.load(f)

        audit_config = config.get('audit', config)
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in audit_config.items() if k in known}

        if "checklist" in overrides:
            overrides["checklist"] = _parse_checklist(overrides["checklist"])

        return cls(**overrides)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Dictionary of all configuration values
        """
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["checklist"] = [check.value for check in self.checklist]
        return data

    def save_to_file(self, path: str) -> None:
        """Save current configuration to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'audit': self.to_dict()}, f, indent=2)


def _parse_checklist(names) -> tuple[CheckKind, ...]:
    return tuple(CheckKind(name.strip()) for name in names if name.strip())


# Global default configuration instance
default_config = AuditConfig()
