"""Data models for token risk scoring."""

from dataclasses import dataclass, field
from enum import Enum


class RiskLevel(str, Enum):
    """Risk bucket for an overall score."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"
    CRITICAL = "critical"

    @classmethod
    def from_score(cls, score: float) -> "RiskLevel":
        """Get the risk level for a 0-100 score.

        Args:
            score: Overall score, higher is safer.

        Returns:
            RiskLevel based on thresholds:
                - score >= 80 -> SAFE
                - score >= 60 -> WARNING
                - score >= 40 -> DANGER
                - score < 40 -> CRITICAL
        """
        if score >= 80:
            return cls.SAFE
        elif score >= 60:
            return cls.WARNING
        elif score >= 40:
            return cls.DANGER
        else:
            return cls.CRITICAL

    @property
    def color(self) -> str:
        """Hex display color for this level."""
        return RISK_COLORS[self]


RISK_COLORS: dict[RiskLevel, str] = {
    RiskLevel.SAFE: "#10B981",
    RiskLevel.WARNING: "#F59E0B",
    RiskLevel.DANGER: "#EF4444",
    RiskLevel.CRITICAL: "#7C2D12",
}


class FactorCategory(str, Enum):
    """Grouping of risk factors."""

    SECURITY = "security"
    TOKENOMICS = "tokenomics"
    MARKET = "market"
    COMMUNITY = "community"


@dataclass
class TokenRiskData:
    """Risk attributes of a token.

    Attributes:
        lp_locked: Whether liquidity-pool tokens are time-locked.
        owner_can_mint: Whether the owner can mint new supply.
        owner_can_pause: Whether the owner can pause transfers.
        sell_tax: Sell tax percentage.
        buy_tax: Buy tax percentage.
        top_holder_percentage: Share of supply held by the largest holder.
        liquidity_usd: Pool liquidity in USD.
        volume_24h: Trading volume over the last 24 hours in USD.
        market_cap: Market capitalization in USD.
        price_change_24h: Price change over the last 24 hours in percent.
        holder_count: Number of holders.
        contract_verified: Whether the contract source is verified.
        honeypot_risk: Whether the token is flagged as a honeypot.
        rug_pull_risk: Whether the token is flagged as a rug-pull risk.
        lp_lock_duration: Lock duration in days, if locked.
        lp_lock_percentage: Share of LP tokens locked, if locked.
    """

    lp_locked: bool
    owner_can_mint: bool
    owner_can_pause: bool
    sell_tax: float
    buy_tax: float
    top_holder_percentage: float
    liquidity_usd: float
    volume_24h: float
    market_cap: float
    price_change_24h: float
    holder_count: int
    contract_verified: bool
    honeypot_risk: bool
    rug_pull_risk: bool
    lp_lock_duration: float | None = None
    lp_lock_percentage: float | None = None


@dataclass
class RiskFactor:
    """A single scored risk factor.

    Attributes:
        name: Display name.
        weight: Contribution weight in the overall score.
        score: Sub-score from 0 (risky) to 100 (safe).
        description: Human-readable explanation of the sub-score.
        category: Factor grouping.
    """

    name: str
    weight: float
    score: float  # 0-100
    description: str
    category: FactorCategory

    @property
    def weighted_score(self) -> float:
        """Contribution of this factor before normalization."""
        return self.score * self.weight


@dataclass
class RiskScore:
    """Composite risk assessment of a token.

    Attributes:
        overall_score: Weighted score from 0 (critical) to 100 (safe).
        risk_level: Bucket for the overall score.
        factors: The ten evaluated factors.
        summary: Headline plus the main issues found.
        recommendations: Actionable advice, most important first.
        color: Display color for the risk level.
    """

    overall_score: int
    risk_level: RiskLevel
    factors: list[RiskFactor] = field(default_factory=list)
    summary: str = ""
    recommendations: list[str] = field(default_factory=list)
    color: str = ""

    def get_factor(self, name: str) -> RiskFactor | None:
        """Look up a factor by display name."""
        for factor in self.factors:
            if factor.name == name:
                return factor
        return None
