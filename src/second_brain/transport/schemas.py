"""Request models for the answering service API."""

from pydantic import BaseModel


class QueryRequest(BaseModel):
    query: str
