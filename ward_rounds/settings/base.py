"""公共配置：开发、生产环境共享。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from .logging import build_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent.parent

INSECURE_SECRET_KEY = "django-insecure-for-test-only"


def env_bool(name: str, default: bool = False) -> bool:
    """读取布尔型环境变量，支持 1/true/yes/on（大小写不敏感）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def parse_csv_env(name: str, default: str = "") -> List[str]:
    """读取逗号分隔的环境变量，去掉空白与空项。"""
    raw = os.getenv(name, default) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]


def dedupe_keep_order(items: Iterable[str]) -> List[str]:
    """去重并保持原有顺序。"""
    seen = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", INSECURE_SECRET_KEY)

DEBUG = False

ALLOWED_HOSTS = parse_csv_env("ALLOWED_HOSTS")

INSTALLED_APPS = [
    "ward_rounds.admin_site.WardRoundsAdminConfig",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "patients",
    "core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "ward_rounds.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "ward_rounds.wsgi.application"

# 配置了 DB_NAME 时走 MySQL（PyMySQL 驱动），否则使用本地 SQLite。
if os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.mysql",
            "NAME": os.getenv("DB_NAME"),
            "USER": os.getenv("DB_USER", "root"),
            "PASSWORD": os.getenv("DB_PASSWORD", ""),
            "HOST": os.getenv("DB_HOST", "127.0.0.1"),
            "PORT": os.getenv("DB_PORT", "3306"),
            "OPTIONS": {"charset": "utf8mb4"},
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

ADMIN_APP_ORDER = ["core", "patients", "auth"]

# 任务截止时间（小时）的服务端上限。
ROUND_TASK_MAX_DEADLINE_HOURS = int(os.getenv("ROUND_TASK_MAX_DEADLINE_HOURS", "72"))

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://127.0.0.1:6379/0")
CELERY_TIMEZONE = TIME_ZONE
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER")
CELERY_BEAT_SCHEDULE = {
    "refresh-round-task-summary": {
        "task": "core.refresh_round_task_summary",
        "schedule": 15 * 60,
    },
}

LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGGING = build_logging_config(LOG_DIR, LOG_LEVEL)
