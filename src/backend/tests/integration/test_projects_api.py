"""Integration tests for Projects API."""

import json

import pytest

from pitchlab.agents.fallbacks import fallback_analysis, fallback_kanban, fallback_workflow
from pitchlab.services.project_service import new_project_id

RECIPE_APP = {
    "title": "Recipe Sharing App",
    "description": "A platform for home cooks to share and discover recipes with ratings and comments",
}

GENERATED_ANALYSIS = {
    "score": 78,
    "pillars": [{"name": "Market Demand", "score": 80, "feedback": "Crowded but active"}],
    "advantages": ["Engaged community"],
    "disadvantages": ["Many competitors"],
    "features": ["Recipe upload", "Meal planner"],
    "recommendations": ["Launch with a niche cuisine"],
}


async def _analyze(client, payload=RECIPE_APP):
    response = await client.post("/api/analyze-project", json=payload)
    assert response.status_code == 200
    return response.json()


class TestAnalyzeProject:
    """Integration tests for POST /api/analyze-project."""

    @pytest.mark.asyncio
    async def test_analysis_falls_back_when_model_fails(self, client):
        """The model failing still yields a stored, usable analysis."""
        body = await _analyze(client)

        assert body["success"] is True
        assert body["projectId"].startswith("proj_")
        assert body["data"] == fallback_analysis()
        assert 0 <= body["data"]["score"] <= 100
        assert len(body["data"]["pillars"]) == 5
        assert all(0 <= pillar["score"] <= 100 for pillar in body["data"]["pillars"])

        stored = (await client.get(f"/api/projects/{body['projectId']}")).json()["data"]
        assert stored["title"] == "Recipe Sharing App"
        assert stored["analysis"] == body["data"]

    @pytest.mark.asyncio
    async def test_generated_analysis_is_stored(self, client, fake_oracle):
        fake_oracle.responses.append(
            "Here is the analysis:\n```json\n" + json.dumps(GENERATED_ANALYSIS) + "\n```"
        )

        body = await _analyze(client)

        assert body["data"] == GENERATED_ANALYSIS
        assert "Recipe Sharing App" in fake_oracle.prompts[0]
        stored = (await client.get(f"/api/projects/{body['projectId']}")).json()["data"]
        assert stored["analysis"]["score"] == 78

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "description": "Long enough description"},
            {"title": "App", "description": "Too short"},
            {"title": "App"},
        ],
    )
    async def test_validation_error(self, client, fake_oracle, payload):
        """Invalid submissions are rejected before anything is stored."""
        response = await client.post("/api/analyze-project", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert isinstance(body["error"], list)
        assert body["error"]
        assert fake_oracle.prompts == []
        assert (await client.get("/api/projects")).json()["data"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "T" * 201, "description": "d" * 20},
            {"title": "T", "description": "d" * 5001},
        ],
    )
    async def test_long_pitch_is_accepted(self, client, payload):
        """Only a non-empty title and a 10-character description are required."""
        body = await _analyze(client, payload)

        stored = (await client.get(f"/api/projects/{body['projectId']}")).json()["data"]
        assert stored["title"] == payload["title"]
        assert stored["description"] == payload["description"]


class TestGenerateArtifacts:
    """Integration tests for kanban and workflow generation."""

    @pytest.mark.asyncio
    async def test_kanban_from_request_analysis(self, client, fake_oracle):
        project_id = (await _analyze(client))["projectId"]
        kanban = {"pipelines": [{"id": "todo", "name": "To Do", "color": "#3b82f6"}], "tasks": []}
        fake_oracle.responses.append(json.dumps(kanban))

        response = await client.post(
            "/api/generate-kanban",
            json={
                "projectId": project_id,
                "analysis": GENERATED_ANALYSIS,
                "title": "Recipe Sharing App",
                "description": RECIPE_APP["description"],
            },
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": kanban}
        assert "Overall Score: 78/100" in fake_oracle.prompts[-1]
        stored = (await client.get(f"/api/projects/{project_id}")).json()["data"]
        assert stored["kanban"] == kanban

    @pytest.mark.asyncio
    async def test_kanban_uses_stored_analysis(self, client, fake_oracle):
        project_id = (await _analyze(client))["projectId"]

        response = await client.post("/api/generate-kanban", json={"projectId": project_id})

        assert response.status_code == 200
        assert response.json()["data"] == fallback_kanban()
        assert "Recipe Sharing App" in fake_oracle.prompts[-1]

    @pytest.mark.asyncio
    async def test_workflow_falls_back_and_is_stored(self, client):
        project_id = (await _analyze(client))["projectId"]

        response = await client.post("/api/generate-workflow", json={"projectId": project_id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data == fallback_workflow()
        assert set(data) == {"technicalWorkflow", "userWorkflow", "schemaDiagram"}
        stored = (await client.get(f"/api/projects/{project_id}")).json()["data"]
        assert stored["workflow"] == data
        assert stored["kanban"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/generate-kanban", "/api/generate-workflow"])
    async def test_missing_project(self, client, path):
        response = await client.post(path, json={"projectId": new_project_id()})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Project not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/generate-kanban", "/api/generate-workflow"])
    async def test_invalid_project_id(self, client, path):
        response = await client.post(path, json={"projectId": "not-an-id"})

        assert response.status_code == 400
        assert "Invalid project ID format" in response.json()["error"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/generate-kanban", "/api/generate-workflow"])
    async def test_invalid_project_id_rejected_before_generation(self, client, fake_oracle, path):
        response = await client.post(
            path,
            json={
                "projectId": "not-an-id",
                "analysis": GENERATED_ANALYSIS,
                "title": "Recipe Sharing App",
                "description": RECIPE_APP["description"],
            },
        )

        assert response.status_code == 400
        assert "Invalid project ID format" in response.json()["error"]
        assert fake_oracle.prompts == []

    @pytest.mark.asyncio
    async def test_project_id_required(self, client):
        response = await client.post("/api/generate-kanban", json={"analysis": GENERATED_ANALYSIS})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestProjectsAPI:
    """Integration tests for /api/projects endpoints."""

    @pytest.mark.asyncio
    async def test_list_projects_newest_first(self, client):
        first = (await _analyze(client, {**RECIPE_APP, "title": "First"}))["projectId"]
        second = (await _analyze(client, {**RECIPE_APP, "title": "Second"}))["projectId"]

        response = await client.get("/api/projects")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["id"] for p in data] == [second, first]
        assert {"createdAt", "updatedAt"} <= set(data[0])

    @pytest.mark.asyncio
    async def test_get_project_not_found(self, client):
        response = await client.get(f"/api/projects/{new_project_id()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Project not found"}

    @pytest.mark.asyncio
    async def test_get_project_invalid_id(self, client):
        response = await client.get("/api/projects/123")

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_delete_project(self, client):
        project_id = (await _analyze(client))["projectId"]

        response = await client.delete(f"/api/projects/{project_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Project deleted successfully"}
        assert (await client.get(f"/api/projects/{project_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_project(self, client):
        response = await client.delete(f"/api/projects/{new_project_id()}")

        assert response.status_code == 200
        assert response.json()["success"] is True

    @pytest.mark.asyncio
    async def test_database_schema(self, client):
        response = await client.get("/api/database-schema")

        assert response.status_code == 200
        schema = response.json()["data"]
        assert schema == fallback_workflow()["schemaDiagram"]

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
