from src.models.invocation_context import InvocationContext
from src.models.new_issue_ref import NewIssueRef
from src.models.split_result import SplitResult, SplitStatus

__all__ = [
    "InvocationContext",
    "NewIssueRef",
    "SplitResult",
    "SplitStatus",
]
