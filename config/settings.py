import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

# Load environment variables
load_dotenv(dotenv_path=Path("/app/.env"))
load_dotenv()

# General
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# reCAPTCHA
RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"
SITE_KEY_ENV = "CHE_FABRIC8_END2END_PROTECT_SITE_KEY"
SECRET_KEY_ENV = "CHE_FABRIC8_END2END_PROTECT_SECRET_KEY"

# Bundled static files live under <root>/end2end/
DEFAULT_RESOURCE_ROOT = Path(__file__).resolve().parent.parent / "resources"


@dataclass(frozen=True)
class End2EndSettings:
    site_key: Optional[str] = None
    secret_key: Optional[str] = None
    verify_url: str = RECAPTCHA_VERIFY_URL
    verify_timeout: float = 30.0
    resource_root: Path = DEFAULT_RESOURCE_ROOT
    cors_origins: Tuple[str, ...] = ("*",)


def _optional_env(name: str) -> Optional[str]:
    # 빈 문자열은 미설정으로 취급
    value = os.getenv(name)
    return value if value else None


def load_settings() -> End2EndSettings:
    """Read the end-to-end flow settings from the environment.

    Called once when the application is assembled; the returned object is
    shared read-only by every request.
    """
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return End2EndSettings(
        site_key=_optional_env(SITE_KEY_ENV),
        secret_key=_optional_env(SECRET_KEY_ENV),
        verify_url=os.getenv("RECAPTCHA_VERIFY_URL", RECAPTCHA_VERIFY_URL),
        verify_timeout=float(os.getenv("RECAPTCHA_VERIFY_TIMEOUT") or "30"),
        resource_root=Path(os.getenv("END2END_RESOURCE_ROOT", str(DEFAULT_RESOURCE_ROOT))),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
    )
