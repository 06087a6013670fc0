import logging

import httpx

from config.settings import End2EndSettings
from domain.models import VerificationResult

logger = logging.getLogger(__name__)


async def verify_recaptcha_token(
    client: httpx.AsyncClient, settings: End2EndSettings, token: str
) -> VerificationResult:
    """Forward a captcha response token to the reCAPTCHA siteverify API.

    Returns the verifier's body only on HTTP 200. Any other status is logged
    and passed through without a body; transport failures map to 500.
    """
    data = {"secret": settings.secret_key or "", "response": token}
    try:
        resp = await client.post(settings.verify_url, data=data, follow_redirects=True)
    except httpx.HTTPError:
        logger.exception("Captcha verification failed with an exception")
        return VerificationResult(status_code=500)

    if resp.status_code == 200:
        return VerificationResult(status_code=200, body=resp.text)

    logger.error(
        f"reCaptcha verification failed with the following response code: {resp.status_code} - {resp.text}"
    )
    return VerificationResult(status_code=resp.status_code)
