import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ward_rounds.settings")

app = Celery("ward_rounds")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
