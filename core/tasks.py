import logging

from celery import shared_task

from core.models import choices
from core.service.tasks import TaskLifecycleService

logger = logging.getLogger(__name__)


@shared_task(name="core.refresh_round_task_summary")
def refresh_round_task_summary() -> dict:
    """定时重算四个分组的任务数；只读，不回写任何状态。"""
    summary = TaskLifecycleService().summarize()
    overdue = summary[choices.LiveStatus.FORA_DO_PRAZO.value]
    if overdue:
        logger.warning("存在逾期查房任务 count=%s summary=%s", overdue, summary)
    else:
        logger.info("查房任务概览 summary=%s", summary)
    return summary
