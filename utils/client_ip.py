from fastapi import Request


CLIENT_LOG_PREFIX = "E2E Registration Flow"


def get_client_ip(request: Request) -> str:
    """클라이언트 IP 주소를 추출합니다."""
    # 프록시/로드밸런서 뒤에서는 X-Forwarded-For 값을 그대로 사용
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for is not None:
        return forwarded_for

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


def format_client_log(message: str, request: Request) -> str:
    return f"[{CLIENT_LOG_PREFIX} - IP = {get_client_ip(request)}] {message}"
