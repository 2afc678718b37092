from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ChannelBuffer(BaseModel):
    """One buffer entry inside the /get envelope."""
    buffer: List[Any] = Field(description="Samples for this buffer; only the first one is read")


class RegistrySnapshot(BaseModel):
    """Point-in-time copy of the client's cached values."""
    values: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        description="Wire name -> last retrieved value (None if not retrieved)",
    )
