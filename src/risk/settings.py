# src/risk/settings.py
"""Settings for the risk scorer."""

from pydantic import BaseModel, Field, model_validator


class RiskWeights(BaseModel):
    """Weight of each risk factor in the overall score.

    Attributes:
        lp_lock: Liquidity-pool lock status.
        ownership: Owner mint/pause privileges.
        honeypot: Honeypot flag.
        verification: Contract verification.
        holder_concentration: Largest holder's share of supply.
        tax: Combined buy and sell tax.
        liquidity: Liquidity depth.
        volume: 24h trading volume.
        price_stability: Absolute 24h price change.
        holder_count: Number of holders.
    """

    lp_lock: float = Field(default=25, ge=0)
    ownership: float = Field(default=20, ge=0)
    honeypot: float = Field(default=15, ge=0)
    verification: float = Field(default=10, ge=0)
    holder_concentration: float = Field(default=15, ge=0)
    tax: float = Field(default=10, ge=0)
    liquidity: float = Field(default=10, ge=0)
    volume: float = Field(default=8, ge=0)
    price_stability: float = Field(default=7, ge=0)
    holder_count: float = Field(default=5, ge=0)

    @model_validator(mode="after")
    def validate_total(self) -> "RiskWeights":
        """Reject weight sets that cannot be normalized."""
        if self.total <= 0:
            raise ValueError("Risk weights must sum to a positive value")
        return self

    @property
    def total(self) -> float:
        """Sum of all ten weights."""
        return sum(self.model_dump().values())


class RiskSettings(BaseModel):
    """Configuration for risk scoring."""

    weights: RiskWeights = Field(default_factory=RiskWeights)
