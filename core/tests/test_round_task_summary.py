"""Round task summary poll tests (management command + celery task)."""

from datetime import timedelta
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from django.utils import timezone

from core.models import RoundTask, choices
from core.tasks import refresh_round_task_summary
from patients.models import Patient


class RoundTaskSummaryTest(TestCase):
    def setUp(self) -> None:
        self.patient = Patient.objects.create(name="Maria Silva", bed_number=1)
        self.now = timezone.now()
        RoundTask.objects.create(
            patient=self.patient,
            description="Checar sonda",
            responsible=choices.Responsible.ENFERMEIRO,
            deadline=self.now - timedelta(hours=1),
        )
        RoundTask.objects.create(
            patient=self.patient,
            description="Avaliar dieta",
            responsible=choices.Responsible.MEDICO,
            deadline=self.now + timedelta(hours=2),
        )

    def test_command_prints_bucket_counts(self):
        out = StringIO()
        call_command("round_task_summary", stdout=out)
        output = out.getvalue()

        self.assertIn("Alertas: 1", output)
        self.assertIn("No Prazo: 0", output)
        self.assertIn("Fora do Prazo: 1", output)
        self.assertIn("Concluídos: 0", output)
        self.assertIn("1 overdue task(s)", output)

    def test_command_evaluates_at_given_time(self):
        out = StringIO()
        at = timezone.localtime(self.now - timedelta(hours=3)).replace(tzinfo=None)
        call_command("round_task_summary", "--at", at.isoformat(), stdout=out)

        self.assertIn("Alertas: 2", out.getvalue())
        self.assertIn("No overdue tasks", out.getvalue())

    def test_command_rejects_invalid_datetime(self):
        with self.assertRaises(CommandError):
            call_command("round_task_summary", "--at", "ontem", stdout=StringIO())

    def test_refresh_task_logs_overdue(self):
        with patch("core.tasks.logger") as mock_logger:
            summary = refresh_round_task_summary()

        self.assertEqual(summary["fora_do_prazo"], 1)
        self.assertEqual(summary["alerta"], 1)
        mock_logger.warning.assert_called_once()
