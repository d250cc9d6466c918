"""Workflow and schema diagram artifact models."""

from enum import StrEnum

from pydantic import Field

from pitchlab.models.artifacts.common import ArtifactModel, Position


class RelationshipType(StrEnum):
    ONE_TO_ONE = "ONE_TO_ONE"
    ONE_TO_MANY = "ONE_TO_MANY"
    MANY_TO_MANY = "MANY_TO_MANY"


# Technical workflow

class TechnicalNodeData(ArtifactModel):
    label: str
    description: str
    details: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    estimated_time: str
    dependencies: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    mitigations: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)


class TechnicalNode(ArtifactModel):
    id: str
    type: str = Field(..., description="input, output, default, decision, process or milestone")
    position: Position
    data: TechnicalNodeData


class TechnicalEdge(ArtifactModel):
    id: str
    source: str
    target: str
    label: str
    type: str = Field(..., description="success, error, conditional or parallel")
    condition: str | None = None
    description: str | None = None
    documentation: str | None = None


class TechnicalWorkflow(ArtifactModel):
    nodes: list[TechnicalNode] = Field(default_factory=list)
    edges: list[TechnicalEdge] = Field(default_factory=list)


# User workflow

class UserNodeData(ArtifactModel):
    label: str
    description: str
    user_actions: list[str] = Field(default_factory=list)
    system_responses: list[str] = Field(default_factory=list)
    pain_points: list[str] = Field(default_factory=list)
    success_metrics: list[str] = Field(default_factory=list)
    persona: str | None = None
    needs: list[str] = Field(default_factory=list)
    emotional_state: str | None = None
    conversion_goals: list[str] = Field(default_factory=list)
    accessibility: list[str] = Field(default_factory=list)
    design_notes: str | None = None


class UserNode(ArtifactModel):
    id: str
    type: str
    position: Position
    data: UserNodeData


class UserEdge(ArtifactModel):
    id: str
    source: str
    target: str
    label: str
    condition: str | None = None
    frequency: str | None = None
    optimization_notes: str | None = None
    fallback_path: str | None = None


class UserWorkflow(ArtifactModel):
    nodes: list[UserNode] = Field(default_factory=list)
    edges: list[UserEdge] = Field(default_factory=list)


# Schema diagram

class SchemaField(ArtifactModel):
    name: str
    type: str
    required: bool
    description: str
    constraints: list[str] = Field(default_factory=list)
    is_primary_key: bool = False
    is_foreign_key: bool = False
    references: str | None = Field(None, description="Target as Entity.field")


class EntityRelationship(ArtifactModel):
    target: str
    type: str
    description: str
    field: str | None = None


class SchemaEntity(ArtifactModel):
    name: str
    fields: list[SchemaField] = Field(..., min_length=1)
    relationships: list[EntityRelationship] = Field(default_factory=list)
    position: Position


class SchemaRelationship(ArtifactModel):
    id: str
    source: str
    target: str
    type: RelationshipType
    label: str
    source_field: str | None = None
    target_field: str | None = None


class SchemaDiagram(ArtifactModel):
    entities: list[SchemaEntity] = Field(default_factory=list)
    relationships: list[SchemaRelationship] = Field(default_factory=list)


class WorkflowData(ArtifactModel):
    """Three independent diagrams describing how the project gets built and used."""

    technical_workflow: TechnicalWorkflow
    user_workflow: UserWorkflow
    schema_diagram: SchemaDiagram
