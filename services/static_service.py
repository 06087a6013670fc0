from types import MappingProxyType
from typing import Iterator, Mapping, Optional
from pathlib import Path
import logging

from domain.models import LineFilter, StaticResource

logger = logging.getLogger(__name__)

RESOURCE_NAMESPACE = "end2end"
PROVISION_PAGE = "files/provision.html"
SITE_KEY_PLACEHOLDER = "const siteKey;"


def build_static_filters(site_key: Optional[str]) -> Mapping[str, LineFilter]:
    """Build the per-file line rewrites applied while streaming static files.

    provision.html declares ``const siteKey;`` which is swapped for a real
    assignment so the page can render the reCAPTCHA widget.
    """
    if site_key:
        site_key_decl = f"var siteKey='{site_key}';"
    else:
        site_key_decl = "var siteKey='';"
        logger.warning("No ReCaptcha site key was provided. ReCaptcha user verification is disabled !")

    def _inject_site_key(line: str) -> str:
        return line.replace(SITE_KEY_PLACEHOLDER, site_key_decl)

    return MappingProxyType({PROVISION_PAGE: _inject_site_key})


def media_type_for(key: str) -> str:
    if key.endswith(".js"):
        return "text/javascript"
    if key.endswith(".html"):
        return "text/html"
    return "text/plain"


def resolve_resource(
    resource_root: Path, key: str, filters: Mapping[str, LineFilter]
) -> Optional[StaticResource]:
    # ".." 등으로 번들 디렉터리 밖을 가리키거나 경로 자체가 잘못되면 없는 파일로 취급
    try:
        base = (resource_root / RESOURCE_NAMESPACE).resolve()
        candidate = (base / key).resolve()
        candidate.relative_to(base)
        if not candidate.is_file():
            return None
    except (OSError, ValueError):
        return None
    return StaticResource(
        key=key,
        path=candidate,
        media_type=media_type_for(key),
        line_filter=filters.get(key),
    )


def iter_resource_lines(resource: StaticResource) -> Iterator[str]:
    """Yield the resource one line at a time, each terminated by a newline."""
    try:
        with resource.path.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.rstrip("\n")
                if resource.line_filter is not None:
                    line = resource.line_filter(line)
                yield line + "\n"
    except OSError:
        logger.exception("Exception occured during static resource retrieval")
        raise
