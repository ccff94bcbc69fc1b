from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class FixedContent(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class FixReport(BaseModel):
    input_bytes: int
    output_bytes: int
    ascii_bytes: int = 0
    utf8_sequences: int = 0
    substituted_bytes: int = 0
    cp1252_substitutions: int = 0
    changed: bool = False
    detected: Optional[str] = Field(default=None, examples=["cp1252"])


class FixResponse(BaseModel):
    fixed: FixedContent
    text: Optional[str] = None
    report: FixReport

class HealthResponse(BaseModel):
    ok: bool = True
