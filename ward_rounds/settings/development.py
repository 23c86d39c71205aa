"""开发环境配置。"""

from .base import *  # noqa: F401,F403
from .base import parse_csv_env

DEBUG = True

ALLOWED_HOSTS = parse_csv_env("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")
