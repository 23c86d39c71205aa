"""Round task lifecycle service tests."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings

from core.exceptions import NotFoundError
from core.models import RoundCategory, RoundTask, choices
from core.service.clock import FixedClock
from core.service.tasks import TaskLifecycleService
from patients.models import Patient

TZ = ZoneInfo("America/Sao_Paulo")


class TaskLifecycleServiceTest(TestCase):
    """验证任务创建、完成、补充说明及分组查询。"""

    def setUp(self) -> None:
        self.t0 = datetime(2025, 3, 10, 8, 0, tzinfo=TZ)
        self.clock = FixedClock(self.t0)
        self.service = TaskLifecycleService(clock=self.clock)
        self.patient = Patient.objects.create(name="Maria Silva", bed_number=1)
        self.other_patient = Patient.objects.create(name="João Souza", bed_number=2)
        self.hidrico = RoundCategory.objects.get(name="Hídrico")

    def _create(self, **overrides):
        params = {
            "description": "Ajustar balanço hídrico",
            "responsible": choices.Responsible.ENFERMEIRO,
            "patient_id": self.patient.id,
            "category_id": self.hidrico.id,
            "deadline_offset_hours": 2,
        }
        params.update(overrides)
        return self.service.create(**params)

    # --- create -----------------------------------------------------------
    def test_create_persists_alert_with_deadline_offset(self):
        task = self._create()

        task.refresh_from_db()
        self.assertEqual(task.status, choices.TaskStatus.ALERTA)
        self.assertEqual(task.deadline, self.t0 + timedelta(hours=2))
        self.assertEqual(task.category_id, self.hidrico.id)
        self.assertEqual(task.justification, "")
        self.assertIn(task, self.service.list_by_live_status("alerta", self.t0))

    def test_create_general_task_without_category(self):
        task = self._create(category_id=None)
        self.assertIsNone(task.category_id)

    def test_create_accepts_form_label_offset(self):
        task = self._create(deadline_offset_hours="3 horas")
        self.assertEqual(task.deadline, self.t0 + timedelta(hours=3))

    def test_create_rejects_invalid_input(self):
        invalid = [
            {"description": "   "},
            {"description": ""},
            {"responsible": ""},
            {"responsible": "Cozinheiro"},
            {"deadline_offset_hours": 0},
            {"deadline_offset_hours": -1},
            {"deadline_offset_hours": None},
            {"deadline_offset_hours": ""},
            {"deadline_offset_hours": "duas"},
            {"deadline_offset_hours": True},
        ]
        for overrides in invalid:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    self._create(**overrides)
        self.assertFalse(RoundTask.objects.exists())

    @override_settings(ROUND_TASK_MAX_DEADLINE_HOURS=4)
    def test_create_rejects_offset_above_limit(self):
        with self.assertRaises(ValidationError):
            self._create(deadline_offset_hours=5)

    def test_create_unknown_patient_or_category_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self._create(patient_id=999999)
        with self.assertRaises(NotFoundError):
            self._create(category_id=999999)

    # --- complete ---------------------------------------------------------
    def test_complete_is_idempotent(self):
        task = self._create()
        self.service.complete(task.id)
        first = RoundTask.objects.get(id=task.id)

        self.clock.advance(hours=1)
        self.service.complete(task.id)
        second = RoundTask.objects.get(id=task.id)

        self.assertEqual(second.status, choices.TaskStatus.CONCLUIDO)
        self.assertEqual(second.completed_at, first.completed_at)
        self.assertEqual(second.completed_at, self.t0)

    def test_complete_missing_task_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.complete(123456)

    # --- justify ----------------------------------------------------------
    def test_justify_on_time_task_keeps_status(self):
        task = RoundTask.objects.create(
            patient=self.patient,
            description="Rotina de curativo",
            responsible=choices.Responsible.ENFERMEIRO,
            deadline=self.t0 + timedelta(hours=4),
            status=choices.TaskStatus.FORA_DO_PRAZO,
        )
        self.assertEqual(self.service.derive(task), choices.LiveStatus.NO_PRAZO)

        self.service.justify(task.id, "Aguardando parecer")

        task.refresh_from_db()
        self.assertEqual(task.justification, "Aguardando parecer")
        self.assertEqual(task.status, choices.TaskStatus.FORA_DO_PRAZO)

    def test_justify_last_write_wins(self):
        task = self._create()
        self.service.justify(task.id, "Primeira")
        self.service.justify(task.id, "Segunda")
        task.refresh_from_db()
        self.assertEqual(task.justification, "Segunda")

    def test_justify_missing_task_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.justify(123456, "texto")

    def test_justify_stores_text_verbatim(self):
        task = self._create()
        self.service.justify(task.id, "  Paciente em exame externo\n")
        task.refresh_from_db()
        self.assertEqual(task.justification, "  Paciente em exame externo\n")

    # --- scenario ---------------------------------------------------------
    def test_alert_lifecycle_scenario(self):
        task = self._create(deadline_offset_hours=2)

        self.assertEqual(
            self.service.derive(task, self.t0 + timedelta(hours=1)),
            choices.LiveStatus.ALERTA,
        )
        self.assertEqual(
            self.service.derive(task, self.t0 + timedelta(hours=3)),
            choices.LiveStatus.FORA_DO_PRAZO,
        )

        self.clock.advance(hours=3)
        completed = self.service.complete(task.id)
        self.assertEqual(
            self.service.derive(completed, self.t0 + timedelta(hours=3)),
            choices.LiveStatus.CONCLUIDO,
        )
        self.assertEqual(completed.completed_at, self.t0 + timedelta(hours=3))

    # --- queries ----------------------------------------------------------
    def test_list_by_live_status_buckets(self):
        alert = self._create(deadline_offset_hours=4)
        overdue = self._create(deadline_offset_hours=1)
        done = self._create(deadline_offset_hours=1)
        self.service.complete(done.id)
        routine = RoundTask.objects.create(
            patient=self.patient,
            description="Rotina",
            responsible=choices.Responsible.MEDICO,
            deadline=self.t0 + timedelta(hours=6),
            status=choices.TaskStatus.FORA_DO_PRAZO,
        )
        now = self.t0 + timedelta(hours=2)

        def ids(status):
            return {task.id for task in self.service.list_by_live_status(status, now)}

        self.assertEqual(ids("alerta"), {alert.id})
        self.assertEqual(ids("no_prazo"), {routine.id})
        self.assertEqual(ids("fora_do_prazo"), {overdue.id})
        self.assertEqual(ids("concluido"), {done.id})

    def test_list_by_live_status_rejects_unknown_status(self):
        with self.assertRaises(ValidationError):
            self.service.list_by_live_status("pendente", self.t0)

    def test_naive_now_is_read_in_local_timezone(self):
        task = self._create(deadline_offset_hours=2)
        before = datetime(2025, 3, 10, 9, 0)
        after = datetime(2025, 3, 10, 10, 0)

        self.assertEqual(self.service.derive(task, before), choices.LiveStatus.ALERTA)
        self.assertEqual(self.service.derive(task, after), choices.LiveStatus.FORA_DO_PRAZO)
        self.assertEqual(
            [t.id for t in self.service.list_by_live_status("fora_do_prazo", after)],
            [task.id],
        )
        self.assertEqual(self.service.summarize(before)["alerta"], 1)
        overdue = self.service.list_for_patient(self.patient.id, after, "fora_do_prazo")
        self.assertEqual(len(overdue), 1)
        self.assertEqual(self.service.alerts_by_category(after), [])

    def test_summarize_zero_fills_and_filters_by_patient(self):
        self.assertEqual(
            self.service.summarize(self.t0),
            {"alerta": 0, "no_prazo": 0, "fora_do_prazo": 0, "concluido": 0},
        )

        self._create(deadline_offset_hours=4)
        self._create(deadline_offset_hours=1)
        self._create(patient_id=self.other_patient.id, deadline_offset_hours=1)
        now = self.t0 + timedelta(hours=2)

        self.assertEqual(
            self.service.summarize(now),
            {"alerta": 1, "no_prazo": 0, "fora_do_prazo": 2, "concluido": 0},
        )
        self.assertEqual(
            self.service.summarize(now, patient_id=self.other_patient.id),
            {"alerta": 0, "no_prazo": 0, "fora_do_prazo": 1, "concluido": 0},
        )

    def test_alerts_by_category_counts_live_alerts_only(self):
        respiratorio = RoundCategory.objects.get(name="Respiratório")
        self._create()
        self._create()
        self._create(category_id=respiratorio.id)
        self._create(category_id=None)
        self._create(category_id=respiratorio.id, deadline_offset_hours=1)
        done = self._create(category_id=respiratorio.id)
        self.service.complete(done.id)

        rows = self.service.alerts_by_category(self.t0 + timedelta(minutes=90))

        self.assertEqual(
            rows,
            [
                {"category_id": self.hidrico.id, "name": "Hídrico", "count": 2, "percentage": 100.0},
                {"category_id": None, "name": "Geral", "count": 1, "percentage": 50.0},
                {"category_id": respiratorio.id, "name": "Respiratório", "count": 1, "percentage": 50.0},
            ],
        )

    def test_list_for_patient_with_status(self):
        mine = self._create(deadline_offset_hours=4)
        self._create(deadline_offset_hours=1)
        self._create(patient_id=self.other_patient.id, deadline_offset_hours=4)
        now = self.t0 + timedelta(hours=2)

        self.assertEqual(len(self.service.list_for_patient(self.patient.id, now)), 2)
        alerts = self.service.list_for_patient(self.patient.id, now, status="alerta")
        self.assertEqual([task.id for task in alerts], [mine.id])
