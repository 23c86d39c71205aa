"""Live status derivation tests."""

from datetime import datetime, timedelta
from types import SimpleNamespace
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase

from core.models import choices
from core.service.task_status import derive_live_status, derive_live_status_from

TZ = ZoneInfo("America/Sao_Paulo")


def _task(status, deadline):
    return SimpleNamespace(status=status, deadline=deadline)


class DeriveLiveStatusTests(SimpleTestCase):
    """验证截止时间驱动的实时状态推导规则。"""

    def setUp(self):
        self.deadline = datetime(2025, 3, 10, 14, 0, tzinfo=TZ)

    def test_alert_before_deadline_stays_alert(self):
        task = _task(choices.TaskStatus.ALERTA, self.deadline)
        status = derive_live_status(task, self.deadline - timedelta(minutes=1))
        self.assertEqual(status, choices.LiveStatus.ALERTA)

    def test_routine_task_before_deadline_is_on_time(self):
        task = _task(choices.TaskStatus.FORA_DO_PRAZO, self.deadline)
        status = derive_live_status(task, self.deadline - timedelta(hours=1))
        self.assertEqual(status, choices.LiveStatus.NO_PRAZO)

    def test_deadline_tie_counts_as_overdue(self):
        task = _task(choices.TaskStatus.ALERTA, self.deadline)
        self.assertEqual(
            derive_live_status(task, self.deadline), choices.LiveStatus.FORA_DO_PRAZO
        )

    def test_any_open_task_after_deadline_is_overdue(self):
        now = self.deadline + timedelta(seconds=1)
        for status in (choices.TaskStatus.ALERTA, choices.TaskStatus.FORA_DO_PRAZO):
            with self.subTest(status=status):
                self.assertEqual(
                    derive_live_status(_task(status, self.deadline), now),
                    choices.LiveStatus.FORA_DO_PRAZO,
                )

    def test_completed_ignores_clock(self):
        task = _task(choices.TaskStatus.CONCLUIDO, self.deadline)
        for now in (
            self.deadline - timedelta(days=1),
            self.deadline,
            self.deadline + timedelta(days=365),
        ):
            with self.subTest(now=now):
                self.assertEqual(derive_live_status(task, now), choices.LiveStatus.CONCLUIDO)

    def test_accepts_raw_values(self):
        status = derive_live_status_from(
            "alerta", self.deadline, self.deadline + timedelta(hours=2)
        )
        self.assertEqual(status, "fora_do_prazo")
        self.assertIsInstance(status, choices.LiveStatus)
