from pydantic import BaseModel


class ErrorOut(BaseModel):
    """Uniform failure envelope."""

    error: str
