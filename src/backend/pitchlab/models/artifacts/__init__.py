"""Generated artifact models.

These describe the shapes the generation prompts ask the model to return.
Generated payloads are stored as returned and are not validated against
them; the static fallback artifacts are built from them.
"""

from pitchlab.models.artifacts.analysis import (
    FeatureItem,
    FinancialAnalysis,
    InsightItem,
    MarketAnalysis,
    PillarEvaluation,
    ProjectAnalysis,
    RecommendationItem,
    RiskAssessment,
    TechnicalAnalysis,
)
from pitchlab.models.artifacts.common import ArtifactModel, Level, Position, Priority
from pitchlab.models.artifacts.kanban import (
    KanbanData,
    KanbanTask,
    Pipeline,
    ResourceLink,
    Subtask,
    TaskComment,
)
from pitchlab.models.artifacts.workflow import (
    EntityRelationship,
    RelationshipType,
    SchemaDiagram,
    SchemaEntity,
    SchemaField,
    SchemaRelationship,
    TechnicalEdge,
    TechnicalNode,
    TechnicalNodeData,
    TechnicalWorkflow,
    UserEdge,
    UserNode,
    UserNodeData,
    UserWorkflow,
    WorkflowData,
)

__all__ = [
    # Common
    "ArtifactModel",
    "Level",
    "Position",
    "Priority",
    # Analysis
    "FeatureItem",
    "FinancialAnalysis",
    "InsightItem",
    "MarketAnalysis",
    "PillarEvaluation",
    "ProjectAnalysis",
    "RecommendationItem",
    "RiskAssessment",
    "TechnicalAnalysis",
    # Kanban
    "KanbanData",
    "KanbanTask",
    "Pipeline",
    "ResourceLink",
    "Subtask",
    "TaskComment",
    # Workflow
    "EntityRelationship",
    "RelationshipType",
    "SchemaDiagram",
    "SchemaEntity",
    "SchemaField",
    "SchemaRelationship",
    "TechnicalEdge",
    "TechnicalNode",
    "TechnicalNodeData",
    "TechnicalWorkflow",
    "UserEdge",
    "UserNode",
    "UserNodeData",
    "UserWorkflow",
    "WorkflowData",
]
