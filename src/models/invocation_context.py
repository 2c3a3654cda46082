"""InvocationContext model"""

from typing import Optional

from pydantic import BaseModel


class InvocationContext(BaseModel):
    """The issue that triggered the run and where it lives"""

    owner: str
    repo: str
    issue_number: int
    issue_body: Optional[str] = None

    @property
    def repository_full_name(self) -> str:
        """Return {owner}/{repo}"""
        return f"{self.owner}/{self.repo}"
