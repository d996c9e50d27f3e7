"""
Earning Templates — API request/response schemas (Pydantic).

Wire names are camelCase (``payCycle``, ``includeIn401k``); Python attribute
names stay snake_case and are mapped with field aliases.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field

from earning_templates.domain.models import Earning, EarningDefault
from earning_templates.domain.overrides import parse_earning_default


# ---------------------------------------------------------------------------
# POST /EarningTemplate
# ---------------------------------------------------------------------------

class EarningDefaultRequest(BaseModel):
    """Optional override fields; any or all may be omitted."""
    code:        Optional[str] = None
    description: Optional[str] = None
    pay_cycle:   Optional[str] = Field(default=None, alias="payCycle")   # PayCycle symbolic name

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "code": "Custom",
                "description": "Custom earnings",
                "payCycle": "Two",
            }
        }

    def to_domain(self) -> Optional[EarningDefault]:
        """``None`` when every field is blank; raises ``InvalidArgument`` on a bad payCycle."""
        return parse_earning_default(self.code, self.description, self.pay_cycle)


class EarningResponse(BaseModel):
    """A constructed earning."""
    code:                        str
    description:                 str
    pay_cycle:                   str  = Field(alias="payCycle")
    calculation_method:          str  = Field(alias="calculationMethod")
    include_in_401k:             bool = Field(alias="includeIn401k")
    include_in_productive_hours: bool = Field(alias="includeInProductiveHours")
    include_in_overtime:         bool = Field(alias="includeInOvertime")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "code": "Regular",
                "description": "Regular earnings",
                "payCycle": "OneTwoThreeFourFive",
                "calculationMethod": "FlatAmount",
                "includeIn401k": True,
                "includeInProductiveHours": True,
                "includeInOvertime": True,
            }
        }

    @classmethod
    def from_domain(cls, earning: Earning) -> "EarningResponse":
        return cls(**earning.to_dict())


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ErrorResponse(BaseModel):
    """Body of a 400 raised from a domain error."""
    detail: str
    type: str
    code: str


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str
    version: str
    templates: int = 0
    override_mode: str = "replace"
    uptime_seconds: float = 0.0
    earnings_created: int = 0
    earnings_by_template: Dict[str, int] = Field(default_factory=dict)
    client_errors: int = 0
    errors_last_hour: int = 0
    timestamp: datetime = Field(default_factory=datetime.utcnow)
