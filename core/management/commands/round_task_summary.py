"""Print live-status bucket counts for ward round tasks."""

from __future__ import annotations

from datetime import datetime

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.models import choices
from core.service.clock import FixedClock
from core.service.tasks import TaskLifecycleService


class Command(BaseCommand):
    help = "Print round task counts per live status (default: now, all patients)."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--at",
            dest="at",
            help="Evaluate at this ISO datetime (e.g. 2025-01-01T08:00). Defaults to now.",
        )
        parser.add_argument(
            "--patient",
            dest="patient_id",
            type=int,
            help="Only count tasks of this patient ID.",
        )

    def handle(self, *args, **options) -> None:
        service = TaskLifecycleService()
        raw_at = options.get("at")
        if raw_at:
            try:
                at = datetime.fromisoformat(raw_at)
            except ValueError as exc:
                raise CommandError("Invalid --at, expected ISO datetime.") from exc
            service = TaskLifecycleService(clock=FixedClock(at))

        summary = service.summarize(patient_id=options.get("patient_id"))
        for status in choices.LiveStatus:
            self.stdout.write(f"{status.label}: {summary[status.value]}")

        overdue = summary[choices.LiveStatus.FORA_DO_PRAZO.value]
        evaluated_at = timezone.localtime(service.clock.now()).strftime("%Y-%m-%d %H:%M")
        if overdue:
            self.stdout.write(
                self.style.WARNING(f"{overdue} overdue task(s) as of {evaluated_at}.")
            )
        else:
            self.stdout.write(self.style.SUCCESS(f"No overdue tasks as of {evaluated_at}."))
