from pydantic import BaseModel


class HintQuery(BaseModel):
    """Input parameters for a hint lookup."""

    stage: str
    category: str | None = None
    error_key: str | None = None
