# src/analysis/models.py
"""Schema for analysis payloads returned by an analysis executor.

Payloads arrive as camelCase JSON. Every section is optional and every
numeric field defaults to 0, so a partial payload validates and simply
fails to trigger the detectors it does not cover.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class PayloadModel(BaseModel):
    """Base for payload sections: accepts wire aliases and field names, ignores unknown keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_missing(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat JSON null like an absent key."""
        field = cls.model_fields[info.field_name]
        if v is None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return v


class TopHolder(PayloadModel):
    """A large holder of the token."""

    address: str | None = None
    percentage: float = 0.0
    amount: float = 0.0


class HolderAnalysis(PayloadModel):
    """Holder distribution section."""

    top_holders: list[TopHolder] = Field(default_factory=list, alias="topHolders")


class VolumeAnalysis(PayloadModel):
    """Trading volume section."""

    change_24h: float = Field(default=0.0, alias="change24h")
    volume_24h: float | None = Field(default=None, alias="volume24h")


class RugAnalysis(PayloadModel):
    """Rug-pull assessment section."""

    confidence: float = 0.0
    reasons: list[str] = Field(default_factory=list)


class TokenAnalysis(PayloadModel):
    """Token metadata section. Age is in hours."""

    age: float = 0.0
    name: str | None = None
    symbol: str | None = None


class HoneypotAnalysis(PayloadModel):
    """Honeypot check section."""

    is_honeypot: bool = Field(default=False, alias="isHoneypot")
    risk_factors: list[str] = Field(default_factory=list, alias="riskFactors")


class AnalysisData(PayloadModel):
    """All analysis sections, each optional."""

    holder_analysis: HolderAnalysis | None = Field(default=None, alias="holderAnalysis")
    volume_analysis: VolumeAnalysis | None = Field(default=None, alias="volumeAnalysis")
    rug_analysis: RugAnalysis | None = Field(default=None, alias="rugAnalysis")
    token_analysis: TokenAnalysis | None = Field(default=None, alias="tokenAnalysis")
    honeypot_analysis: HoneypotAnalysis | None = Field(default=None, alias="honeypotAnalysis")


class AnalysisResult(PayloadModel):
    """Envelope returned by an analysis executor."""

    success: bool
    data: AnalysisData = Field(default_factory=AnalysisData)
    error: str | None = None
