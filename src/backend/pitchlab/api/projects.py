"""Projects API router.

Sequences the project store and the artifact generator for each request
and wraps results in the ``{success, data}`` envelope the frontend reads.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pitchlab.agents import AnthropicTextGenerator, ArtifactGenerator, GenerationResult
from pitchlab.agents.fallbacks import fallback_workflow
from pitchlab.db import Database, DatabaseNotConnectedError, get_db
from pitchlab.models.project import ArtifactRequest, ProjectSubmission
from pitchlab.services.project_service import (
    InvalidProjectIdError,
    ProjectService,
    is_valid_project_id,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["projects"])

artifact_generator = ArtifactGenerator(AnthropicTextGenerator())


class ApiError(Exception):
    """A failure reported to the client with a specific status code."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


# Dependencies
def get_project_service(db: Database = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def get_artifact_generator() -> ArtifactGenerator:
    return artifact_generator


def _error(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def _failure(exc: Exception, action: str) -> JSONResponse:
    """Translate an exception raised while handling a request."""
    if isinstance(exc, ApiError):
        return _error(exc.status_code, exc.message)
    if isinstance(exc, InvalidProjectIdError):
        logger.warning(f"Rejected request while {action}: {exc}")
        return _error(400, str(exc))
    if isinstance(exc, DatabaseNotConnectedError):
        logger.error(f"Database unavailable while {action}")
        return _error(503, str(exc))
    logger.exception(f"Error {action}")
    return _error(500, "Internal server error")


def _log_generation(result: GenerationResult, project_id: str) -> None:
    if result.is_fallback:
        logger.warning(
            f"Stored fallback {result.kind} for project {project_id}: {result.error}"
        )
    else:
        logger.info(f"Stored generated {result.kind} for project {project_id}")


async def _artifact_context(
    data: ArtifactRequest, service: ProjectService
) -> tuple[dict[str, Any], str, str]:
    """Resolve the analysis, title and description for a follow-up artifact.

    Values in the request win; anything omitted is read from the stored project.
    """
    if not is_valid_project_id(data.project_id):
        raise InvalidProjectIdError(data.project_id)

    analysis, title, description = data.analysis, data.title, data.description
    if analysis is None or title is None or description is None:
        project = await service.get(data.project_id)
        if not project:
            raise ApiError(404, "Project not found")
        analysis = analysis if analysis is not None else project.analysis
        title = title if title is not None else project.title
        description = description if description is not None else project.description

    if not analysis:
        raise ApiError(400, "Analysis and projectId are required")
    return analysis, title or "Project", description or ""


# Endpoints
@router.post("/analyze-project")
async def analyze_project(
    data: ProjectSubmission,
    service: ProjectService = Depends(get_project_service),
    generator: ArtifactGenerator = Depends(get_artifact_generator),
):
    """Save a project pitch, analyse it and attach the analysis."""
    logger.info(f"Analyzing project: title={data.title}")
    try:
        project_id = await service.create(title=data.title, description=data.description)
        result = await generator.analysis_result(data.title, data.description)
        await service.update(project_id, analysis=result.artifact)
    except Exception as exc:
        return _failure(exc, "analyzing project")

    _log_generation(result, project_id)
    return {"success": True, "data": result.artifact, "projectId": project_id}


@router.post("/generate-kanban")
async def generate_kanban(
    data: ArtifactRequest,
    service: ProjectService = Depends(get_project_service),
    generator: ArtifactGenerator = Depends(get_artifact_generator),
):
    """Generate a kanban board for an analysed project."""
    try:
        analysis, title, description = await _artifact_context(data, service)
        result = await generator.kanban_result(analysis, title, description)
        await service.update(data.project_id, kanban=result.artifact)
    except Exception as exc:
        return _failure(exc, "generating kanban")

    _log_generation(result, data.project_id)
    return {"success": True, "data": result.artifact}


@router.post("/generate-workflow")
async def generate_workflow(
    data: ArtifactRequest,
    service: ProjectService = Depends(get_project_service),
    generator: ArtifactGenerator = Depends(get_artifact_generator),
):
    """Generate workflow and schema diagrams for an analysed project."""
    try:
        analysis, title, description = await _artifact_context(data, service)
        result = await generator.workflow_result(analysis, title, description)
        await service.update(data.project_id, workflow=result.artifact)
    except Exception as exc:
        return _failure(exc, "generating workflow")

    _log_generation(result, data.project_id)
    return {"success": True, "data": result.artifact}


@router.get("/projects")
async def list_projects(service: ProjectService = Depends(get_project_service)):
    """List projects, newest first."""
    try:
        projects = await service.list_projects()
    except Exception as exc:
        return _failure(exc, "fetching projects")
    return {
        "success": True,
        "data": [p.model_dump(by_alias=True, mode="json") for p in projects],
    }


@router.get("/projects/{project_id}")
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """Get a project by ID."""
    try:
        project = await service.get(project_id)
    except Exception as exc:
        return _failure(exc, "fetching project")
    if not project:
        return _error(404, "Project not found")
    return {"success": True, "data": project.model_dump(by_alias=True, mode="json")}


@router.delete("/projects/{project_id}")
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project."""
    try:
        await service.delete(project_id)
    except Exception as exc:
        return _failure(exc, "deleting project")
    return {"success": True, "message": "Project deleted successfully"}


@router.get("/database-schema")
async def database_schema():
    """Sample schema diagram for the diagram editor."""
    return {"success": True, "data": fallback_workflow()["schemaDiagram"]}
