"""Kanban board artifact models."""

from pydantic import Field

from pitchlab.models.artifacts.common import ArtifactModel, Level, Priority


class Pipeline(ArtifactModel):
    """A kanban column."""

    id: str
    name: str
    color: str
    description: str | None = None
    wip_limit: int | None = Field(None, ge=0)
    policies: list[str] = Field(default_factory=list)


class Subtask(ArtifactModel):
    id: str
    title: str
    completed: bool = False


class TaskComment(ArtifactModel):
    author: str
    content: str
    created_at: str | None = None


class ResourceLink(ArtifactModel):
    title: str
    url: str


class KanbanTask(ArtifactModel):
    """A task card placed in one pipeline."""

    id: str
    title: str
    description: str
    pipeline: str = Field(..., description="Id of the pipeline holding this task")
    priority: Priority
    estimated_hours: float = Field(..., ge=0)
    user_story: str
    assignee: str | None = None
    labels: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)
    subtasks: list[Subtask] = Field(default_factory=list)
    comments: list[TaskComment] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    story_points: int | None = Field(None, ge=0)
    business_value: str | None = None
    risk_level: Level | None = None
    test_strategy: str | None = None
    resources: list[ResourceLink] = Field(default_factory=list)


class KanbanData(ArtifactModel):
    """Task breakdown across ordered pipelines."""

    pipelines: list[Pipeline] = Field(..., min_length=1)
    tasks: list[KanbanTask] = Field(default_factory=list)
