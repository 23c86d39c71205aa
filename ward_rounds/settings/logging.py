"""日志配置构建。"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict

LOG_FILE_NAME = "ward_rounds.log"


def _is_test_run() -> bool:
    argv = sys.argv or []
    if not argv:
        return False
    if len(argv) > 1 and argv[1] == "test":
        return True
    entry = Path(argv[0])
    return "pytest" in entry.name or entry.parent.name == "pytest"


def build_logging_config(log_dir: Path, level: str = "INFO") -> Dict[str, Any]:
    """
    【功能说明】
    - 生成 Django LOGGING 配置字典；
    - 正常运行时输出到控制台 + 按天滚动的文件（多进程安全）；
    - 测试运行时全部替换为 NullHandler，避免污染输出。

    【参数说明】
    - log_dir: Path，日志目录。
    - level: str，根日志级别。

    【返回值说明】
    - dict，可直接赋值给 settings.LOGGING。
    """
    if _is_test_run():
        console_handler: Dict[str, Any] = {"class": "logging.NullHandler"}
        file_handler: Dict[str, Any] = {"class": "logging.NullHandler"}
    else:
        log_dir.mkdir(parents=True, exist_ok=True)
        console_handler = {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        }
        file_handler = {
            "class": "concurrent_log_handler.ConcurrentTimedRotatingFileHandler",
            "filename": log_dir / LOG_FILE_NAME,
            "when": "midnight",
            "backupCount": 14,
            "encoding": "utf-8",
            "formatter": "verbose",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": console_handler,
            "file": file_handler,
        },
        "root": {
            "handlers": ["console", "file"],
            "level": level,
        },
        "loggers": {
            "django.db.backends": {
                "level": "WARNING",
                "propagate": True,
            },
        },
    }
