"""SplitResult model"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from src.models.new_issue_ref import NewIssueRef


class SplitStatus(Enum):
    """SplitStatus enum"""

    NOTHING_TO_DO = "nothing_to_do"
    DONE = "done"
    FAILED = "failed"


class SplitResult(BaseModel):
    """The outcome of splitting one issue"""

    status: SplitStatus
    new_issues: list[NewIssueRef] = Field(default_factory=list)
    failed_tasks: list[str] = Field(default_factory=list)
    error_message: Optional[str] = None
