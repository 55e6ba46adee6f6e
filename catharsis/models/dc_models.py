from pydantic import BaseModel
from typing import Optional


class CompleteModel(BaseModel):
    """Body of a guess submission. `content` is the optional note kept on the ticket."""
    word: str
    content: Optional[str] = None


class ResetModel(BaseModel):
    confirm: bool = False
