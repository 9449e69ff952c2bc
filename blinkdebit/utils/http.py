import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..constants import USER_AGENT_VALUE
from ..exceptions import BlinkServiceError
from ..settings import Settings


def client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    limits = httpx.Limits(
        max_connections=settings.MAX_CONNECTIONS,
        max_keepalive_connections=settings.MAX_KEEPALIVE_CONNECTIONS,
        keepalive_expiry=settings.KEEPALIVE_EXPIRY_SEC,
    )
    return httpx.AsyncClient(
        base_url=settings.DEBIT_URL.rstrip("/"),
        timeout=settings.TIMEOUT_SEC,
        limits=limits,
        headers={"User-Agent": USER_AGENT_VALUE},
        transport=transport,
    )


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, BlinkServiceError) and exc.retryable


def retry_policy(max_attempts: int = 3, min_wait: float = 2.0, max_wait: float = 5.0):
    # 408, 5xx and transport failures only; the last error is re-raised as is
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=min_wait, min=min_wait, max=max_wait),
        retry=retry_if_exception(is_retryable),
        reraise=True,
    )
