# gunicorn_config.py
import multiprocessing
import os

# 监听地址和端口
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")

# 工作进程数：公式通常为 (2 * CPU核心数) + 1
workers = multiprocessing.cpu_count() * 2 + 1

worker_class = 'sync'

# 日志配置
log_dir = os.getenv("LOG_DIR", "logs")
accesslog = os.path.join(log_dir, "gunicorn_access.log")
errorlog = os.path.join(log_dir, "gunicorn_error.log")
loglevel = "info"

# 进程名
proc_name = 'gunicorn_ward_rounds'

timeout = 30
