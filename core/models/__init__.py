from .round_catalog import RoundCategory, RoundQuestion
from .tasks import RoundTask
from .checklist_answer import ChecklistAnswer
from . import choices

__all__ = [
    "RoundCategory",
    "RoundQuestion",
    "RoundTask",
    "ChecklistAnswer",
    "choices",
]
