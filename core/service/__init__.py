from .checklist import ChecklistAnswerService
from .clock import ClockSource, DjangoClock, FixedClock
from .completion import ChecklistCompletionService, completed_categories, progress
from .task_status import derive_live_status, derive_live_status_from
from .tasks import TaskLifecycleService

__all__ = [
    "ChecklistAnswerService",
    "ChecklistCompletionService",
    "ClockSource",
    "DjangoClock",
    "FixedClock",
    "TaskLifecycleService",
    "completed_categories",
    "derive_live_status",
    "derive_live_status_from",
    "progress",
]
