"""按 DJANGO_ENV 选择具体的配置模块。"""

import os

_DJANGO_ENV = os.getenv("DJANGO_ENV", "development").strip().lower()

if _DJANGO_ENV == "development":
    from .development import *  # noqa: F401,F403
elif _DJANGO_ENV == "production":
    from .production import *  # noqa: F401,F403
else:
    raise ValueError(
        f"Unsupported DJANGO_ENV: {_DJANGO_ENV!r}, expected 'development' or 'production'."
    )
