from typing import Optional

from pydantic import BaseModel


class NewIssueRef(BaseModel):
    title: str
    url: str
    number: Optional[int] = None
