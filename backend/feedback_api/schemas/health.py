"""Pydantic schemas for health endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(BaseModel):
    """Health check response schema"""

    model_config = ConfigDict(title="health.HealthStatus")

    database_available: Literal["OK", "NOK"] = Field(
        ..., description="Database reachability", examples=["OK"]
    )
