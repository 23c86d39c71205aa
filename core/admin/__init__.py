"""
Admin registrations for core app.

Each model admin lives in its own module to avoid a single gigantic file.
"""

from .catalog import RoundCategoryAdmin, RoundQuestionAdmin  # noqa: F401
from .tasks import RoundTaskAdmin  # noqa: F401
from .checklist import ChecklistAnswerAdmin  # noqa: F401
