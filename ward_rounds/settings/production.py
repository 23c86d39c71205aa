"""生产环境配置：启动前校验关键安全项。"""

import os
from urllib.parse import urlparse

from .base import *  # noqa: F401,F403
from .base import (
    INSECURE_SECRET_KEY,
    SECRET_KEY,
    dedupe_keep_order,
    env_bool,
    parse_csv_env,
)

DEBUG = False

ALLOWED_HOSTS = parse_csv_env("ALLOWED_HOSTS")
if not ALLOWED_HOSTS:
    raise ValueError("ALLOWED_HOSTS must be set in production.")

if not SECRET_KEY or SECRET_KEY == INSECURE_SECRET_KEY:
    raise ValueError("DJANGO_SECRET_KEY must be set to a strong value in production.")


def _infer_csrf_trusted_origins(web_base_url: str, hosts: list) -> list:
    origins = []
    parsed = urlparse(web_base_url) if web_base_url else None
    scheme = parsed.scheme if parsed and parsed.scheme else "https"
    if parsed and parsed.netloc:
        origins.append(f"{scheme}://{parsed.netloc}")
    for host in hosts:
        # 通配符与本地地址不参与 CSRF 白名单推断
        if host in ("*", "localhost", "127.0.0.1"):
            continue
        origins.append(f"{scheme}://{host.lstrip('.')}")
    return dedupe_keep_order(origins)


CSRF_TRUSTED_ORIGINS = parse_csv_env("CSRF_TRUSTED_ORIGINS") or _infer_csrf_trusted_origins(
    os.getenv("WEB_BASE_URL", ""),
    ALLOWED_HOSTS,
)

SECURE_SSL_REDIRECT = env_bool("SECURE_SSL_REDIRECT", True)
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
