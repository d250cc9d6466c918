"""Project analysis artifact models."""

from pydantic import Field

from pitchlab.models.artifacts.common import ArtifactModel, Level, Priority


class RiskAssessment(ArtifactModel):
    """Risk summary attached to a pillar."""

    level: Level
    factors: list[str] = Field(default_factory=list)
    mitigations: list[str] = Field(default_factory=list)


class PillarEvaluation(ArtifactModel):
    """Score and feedback for one evaluation pillar.

    Pillar-specific extension fields (e.g. ``marketSize`` for market
    viability) are kept as extra keys.
    """

    name: str
    score: int = Field(..., ge=0, le=100)
    feedback: str
    strengths: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    risk_assessment: RiskAssessment | None = None


class InsightItem(ArtifactModel):
    """Structured advantage or disadvantage."""

    title: str
    description: str
    impact: Level | None = None


class FeatureItem(ArtifactModel):
    """Structured feature suggestion."""

    title: str
    description: str
    priority: Priority | None = None
    complexity: Level | None = None
    impact: Level | None = None


class RecommendationItem(ArtifactModel):
    """Structured recommendation with an implementation plan."""

    title: str
    description: str
    priority: Priority | None = None
    implementation_steps: list[str] = Field(default_factory=list)
    timeframe: str | None = None


class TechnicalAnalysis(ArtifactModel):
    architecture: str | None = None
    tech_stack: list[str] = Field(default_factory=list)
    complexity: Level | None = None
    development_time: str | None = None


class MarketAnalysis(ArtifactModel):
    target_audience: str | None = None
    market_size: str | None = None
    competitors: list[str] = Field(default_factory=list)
    differentiators: list[str] = Field(default_factory=list)


class FinancialAnalysis(ArtifactModel):
    revenue_models: list[str] = Field(default_factory=list)
    estimated_cost: str | None = None
    break_even: str | None = None


class ProjectAnalysis(ArtifactModel):
    """Scored multi-pillar evaluation of a project pitch.

    List elements may be plain strings (legacy shape) or structured records.
    """

    score: int = Field(..., ge=0, le=100)
    pillars: list[PillarEvaluation] = Field(..., min_length=1)
    advantages: list[str | InsightItem] = Field(default_factory=list)
    disadvantages: list[str | InsightItem] = Field(default_factory=list)
    features: list[str | FeatureItem] = Field(default_factory=list)
    recommendations: list[str | RecommendationItem] = Field(default_factory=list)
    technical_analysis: TechnicalAnalysis | None = None
    market_analysis: MarketAnalysis | None = None
    financial_analysis: FinancialAnalysis | None = None
