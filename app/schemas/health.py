"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness of the API process and reachability of the database."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the configured database",
    )
