"""
Admin API Schemas.

Pydantic models for the JSON bodies returned by the RPNow admin server.
All of them are frozen: fetched data is replaced wholesale, never edited.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

ACCESS_NORMAL = "normal"
ACCESS_READ = "read"


class ServerStatus(BaseModel):
    """Response of GET /status."""

    line: str = Field(..., alias="rpnow", description="Server banner line")
    pid: int = Field(..., description="Server process id")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RPSummary(BaseModel):
    """One entry of GET /rps."""

    title: str
    rpid: str
    timestamp: datetime

    model_config = ConfigDict(frozen=True)


class RPUrl(BaseModel):
    """
    One entry of GET /rps/{rpid}.

    `access` is kept as a plain string so that values other than
    "normal" and "read" still decode and can be shown as unknown.
    """

    url: str
    access: str

    model_config = ConfigDict(frozen=True)


RPSummaryList = TypeAdapter(list[RPSummary])
RPUrlList = TypeAdapter(list[RPUrl])
