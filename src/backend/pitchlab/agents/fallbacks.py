"""Static artifacts returned when generation fails.

The values do not depend on the request. Each accessor returns a fresh
camelCase dict so callers may mutate the result freely.
"""

from typing import Any

from pitchlab.models.artifacts import (
    EntityRelationship,
    FeatureItem,
    InsightItem,
    KanbanData,
    KanbanTask,
    Pipeline,
    PillarEvaluation,
    Position,
    ProjectAnalysis,
    RecommendationItem,
    RiskAssessment,
    SchemaDiagram,
    SchemaEntity,
    SchemaField,
    SchemaRelationship,
    TechnicalAnalysis,
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
from pitchlab.models.artifacts.common import ArtifactModel


def _dump(model: ArtifactModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json", exclude_none=True)


FALLBACK_ANALYSIS = ProjectAnalysis(
    score=75,
    pillars=[
        PillarEvaluation(
            name="Technical Feasibility",
            score=80,
            feedback="Moderate technical complexity",
            strengths=["Well-understood technology choices", "Clear core workflow"],
            challenges=["Integration effort", "Data consistency across features"],
            risk_assessment=RiskAssessment(
                level="medium",
                factors=["Unproven performance at scale"],
                mitigations=["Load test before launch"],
            ),
        ),
        PillarEvaluation(
            name="Market Viability",
            score=70,
            feedback="Good market potential",
            strengths=["Growing demand"],
            challenges=["Established competitors"],
            risk_assessment=RiskAssessment(
                level="medium",
                factors=["Crowded market"],
                mitigations=["Focus on a clear niche"],
            ),
        ),
        PillarEvaluation(
            name="User Experience",
            score=75,
            feedback="User-friendly design possible",
            strengths=["Simple core interaction"],
            challenges=["Onboarding new users"],
            risk_assessment=RiskAssessment(
                level="low",
                factors=["Feature creep"],
                mitigations=["Usability testing each release"],
            ),
        ),
        PillarEvaluation(
            name="Scalability",
            score=80,
            feedback="Scalable architecture",
            strengths=["Stateless services"],
            challenges=["Database growth"],
            risk_assessment=RiskAssessment(
                level="low",
                factors=["Traffic spikes"],
                mitigations=["Autoscaling and caching"],
            ),
        ),
        PillarEvaluation(
            name="Monetization Potential",
            score=65,
            feedback="Multiple revenue streams possible",
            strengths=["Subscription upsell"],
            challenges=["Willingness to pay"],
            risk_assessment=RiskAssessment(
                level="medium",
                factors=["Unvalidated pricing"],
                mitigations=["Run pricing experiments early"],
            ),
        ),
    ],
    advantages=[
        InsightItem(title="Clear value proposition", description="The problem and audience are easy to explain", impact="high"),
        InsightItem(title="Growing market demand", description="Interest in this category is increasing", impact="medium"),
        InsightItem(title="Scalable technology", description="Standard cloud tooling covers the requirements", impact="medium"),
    ],
    disadvantages=[
        InsightItem(title="Competitive market", description="Alternatives already exist", impact="high"),
        InsightItem(title="Development complexity", description="Several features must ship together", impact="medium"),
        InsightItem(title="Initial investment required", description="Upfront build cost before revenue", impact="medium"),
    ],
    features=[
        FeatureItem(title="User authentication", description="Sign up, log in and manage a profile", priority="critical", complexity="medium", impact="high"),
        FeatureItem(title="Core functionality", description="The main workflow the product exists for", priority="critical", complexity="high", impact="high"),
        FeatureItem(title="Analytics dashboard", description="Usage and engagement insights", priority="medium", complexity="medium", impact="medium"),
        FeatureItem(title="Mobile support", description="Responsive layout for phones and tablets", priority="high", complexity="medium", impact="high"),
    ],
    recommendations=[
        RecommendationItem(
            title="Start with MVP",
            description="Ship the smallest version that proves the core value",
            priority="critical",
            implementation_steps=["Define the core user journey", "Cut non-essential features", "Launch to a pilot group"],
            timeframe="4-6 weeks",
        ),
        RecommendationItem(
            title="Focus on user research",
            description="Validate assumptions with target users",
            priority="high",
            implementation_steps=["Interview ten target users", "Test a clickable prototype"],
            timeframe="2-3 weeks",
        ),
        RecommendationItem(
            title="Plan for scalability",
            description="Keep the architecture ready for growth",
            priority="medium",
            implementation_steps=["Choose managed infrastructure", "Add monitoring from day one"],
            timeframe="Ongoing",
        ),
    ],
    technical_analysis=TechnicalAnalysis(
        architecture="Web client with a REST API and a relational database",
        tech_stack=["React", "Python", "PostgreSQL"],
        complexity="medium",
        development_time="3-4 months",
    ),
)


def _task(
    task_id: str,
    title: str,
    description: str,
    priority: str,
    estimated_hours: float,
    user_story: str,
    labels: list[str],
    dependencies: list[str] | None = None,
) -> KanbanTask:
    return KanbanTask(
        id=task_id,
        title=title,
        description=description,
        pipeline="todo",
        priority=priority,
        estimated_hours=estimated_hours,
        user_story=user_story,
        labels=labels,
        dependencies=dependencies or [],
    )


FALLBACK_KANBAN = KanbanData(
    pipelines=[
        Pipeline(id="backlog", name="Backlog", color="#6b7280", description="Ideas and unscheduled work"),
        Pipeline(id="todo", name="To Do", color="#3b82f6", description="Ready to be picked up"),
        Pipeline(id="in-progress", name="In Progress", color="#eab308", description="Actively being worked on", wip_limit=3),
        Pipeline(id="review", name="Review", color="#a855f7", description="Awaiting code review or QA", wip_limit=2),
        Pipeline(id="done", name="Done", color="#22c55e", description="Accepted and released"),
    ],
    tasks=[
        _task(
            "1", "Project Setup & Architecture",
            "Set up development environment and define system architecture",
            "high", 16,
            "As a developer, I want to have a solid foundation so that I can build features efficiently",
            ["setup"],
        ),
        _task(
            "2", "User Authentication System",
            "Implement secure user registration and login system",
            "high", 24,
            "As a user, I want to create an account so that I can access personalized features",
            ["backend", "security"], ["1"],
        ),
        _task(
            "3", "Core Feature Development",
            "Build the main functionality based on project requirements",
            "critical", 40,
            "As a user, I want to use the core features so that I can achieve my goals",
            ["feature"], ["6", "7"],
        ),
        _task(
            "4", "UI/UX Implementation",
            "Create responsive and intuitive user interface",
            "medium", 32,
            "As a user, I want an intuitive interface so that I can easily navigate the application",
            ["frontend"], ["7"],
        ),
        _task(
            "5", "Testing & Quality Assurance",
            "Implement comprehensive testing and bug fixes",
            "medium", 20,
            "As a user, I want a reliable application so that I can trust it with my data",
            ["qa"], ["3", "4"],
        ),
        _task(
            "6", "Database Design",
            "Design and implement database schema and relationships",
            "high", 12,
            "As a developer, I want a well-structured database so that data is organized efficiently",
            ["backend", "database"], ["1"],
        ),
        _task(
            "7", "API Development",
            "Create RESTful API endpoints for frontend communication",
            "high", 28,
            "As a frontend developer, I want API endpoints so that I can fetch and update data",
            ["backend", "api"], ["6"],
        ),
        _task(
            "8", "Deployment & DevOps",
            "Set up production environment and deployment pipeline",
            "medium", 16,
            "As a developer, I want automated deployment so that I can release features quickly",
            ["devops"], ["1"],
        ),
    ],
)


def _technical_node(
    node_id: str,
    node_type: str,
    x: float,
    y: float,
    label: str,
    description: str,
    details: list[str],
    technologies: list[str],
    estimated_time: str,
    dependencies: list[str],
) -> TechnicalNode:
    return TechnicalNode(
        id=node_id,
        type=node_type,
        position=Position(x=x, y=y),
        data=TechnicalNodeData(
            label=label,
            description=description,
            details=details,
            technologies=technologies,
            estimated_time=estimated_time,
            dependencies=dependencies,
        ),
    )


def _field(
    name: str,
    field_type: str,
    required: bool,
    description: str,
    constraints: list[str] | None = None,
    references: str | None = None,
) -> SchemaField:
    constraints = constraints or []
    return SchemaField(
        name=name,
        type=field_type,
        required=required,
        description=description,
        constraints=constraints,
        is_primary_key="PRIMARY KEY" in constraints,
        is_foreign_key=references is not None,
        references=references,
    )


FALLBACK_WORKFLOW = WorkflowData(
    technical_workflow=TechnicalWorkflow(
        nodes=[
            _technical_node(
                "start", "input", 50, 200, "Project Start",
                "Initial project kickoff and setup",
                ["Initialize repository", "Set up development environment", "Configure tools"],
                ["Git", "Node.js", "VS Code"], "1-2 days", [],
            ),
            _technical_node(
                "planning", "default", 250, 100, "Planning Phase",
                "Requirements gathering and architecture design",
                ["Gather requirements", "Design system architecture", "Create technical specifications"],
                ["Figma", "Draw.io", "Confluence"], "3-5 days", ["start"],
            ),
            _technical_node(
                "development", "process", 450, 200, "Development",
                "Build the API, data model and user interface",
                ["Implement API endpoints", "Build UI screens", "Write unit tests"],
                ["Python", "React", "PostgreSQL"], "4-6 weeks", ["planning"],
            ),
            _technical_node(
                "testing", "decision", 650, 200, "Testing",
                "Verify the release candidate",
                ["Run integration tests", "Perform user acceptance testing"],
                ["pytest", "Playwright"], "1 week", ["development"],
            ),
            _technical_node(
                "deployment", "output", 850, 200, "Deployment",
                "Release to production and monitor",
                ["Provision infrastructure", "Deploy", "Set up monitoring"],
                ["Docker", "GitHub Actions"], "2-3 days", ["testing"],
            ),
        ],
        edges=[
            TechnicalEdge(id="e1", source="start", target="planning", label="Setup Complete", type="success"),
            TechnicalEdge(id="e2", source="planning", target="development", label="Specs Approved", type="success"),
            TechnicalEdge(id="e3", source="development", target="testing", label="Feature Complete", type="success"),
            TechnicalEdge(id="e4", source="testing", target="deployment", label="Tests Pass", type="conditional", condition="All tests green"),
            TechnicalEdge(id="e5", source="testing", target="development", label="Defects Found", type="error"),
        ],
    ),
    user_workflow=UserWorkflow(
        nodes=[
            UserNode(
                id="landing",
                type="input",
                position=Position(x=50, y=200),
                data=UserNodeData(
                    label="User Lands on Platform",
                    description="User discovers and accesses the platform",
                    user_actions=["Visit website", "Browse features", "Read documentation"],
                    system_responses=["Show landing page", "Display feature highlights", "Provide demo"],
                    pain_points=["Slow loading", "Unclear value proposition"],
                    success_metrics=["Page views", "Time on site", "Bounce rate"],
                ),
            ),
            UserNode(
                id="signup",
                type="default",
                position=Position(x=300, y=200),
                data=UserNodeData(
                    label="User Signs Up",
                    description="User creates an account",
                    user_actions=["Fill in registration form", "Verify email"],
                    system_responses=["Validate input", "Send verification email"],
                    pain_points=["Long forms"],
                    success_metrics=["Signup conversion rate"],
                ),
            ),
            UserNode(
                id="core-usage",
                type="output",
                position=Position(x=550, y=200),
                data=UserNodeData(
                    label="User Uses Core Features",
                    description="User completes the main task the product supports",
                    user_actions=["Create content", "Interact with others"],
                    system_responses=["Save progress", "Show confirmations"],
                    pain_points=["Hard-to-find features"],
                    success_metrics=["Weekly active users", "Task completion rate"],
                ),
            ),
        ],
        edges=[
            UserEdge(id="e1", source="landing", target="signup", label="User Interested", condition="User clicks signup"),
            UserEdge(id="e2", source="signup", target="core-usage", label="Account Created", condition="Email verified"),
        ],
    ),
    schema_diagram=SchemaDiagram(
        entities=[
            SchemaEntity(
                name="User",
                fields=[
                    _field("id", "uuid", True, "Unique identifier for user", ["PRIMARY KEY", "NOT NULL"]),
                    _field("email", "varchar(255)", True, "User email address for authentication", ["UNIQUE", "NOT NULL"]),
                    _field("password", "varchar(255)", True, "Hashed user password", ["NOT NULL"]),
                    _field("name", "varchar(255)", False, "User display name"),
                    _field("profile_picture", "text", False, "URL to user profile picture"),
                    _field("role", "varchar(50)", False, "User role (admin, user, guest)"),
                    _field("is_active", "boolean", True, "Whether user account is active", ["NOT NULL"]),
                    _field("created_at", "timestamp", True, "Account creation timestamp", ["NOT NULL"]),
                    _field("updated_at", "timestamp", False, "Account last update timestamp"),
                ],
                relationships=[
                    EntityRelationship(target="Project", type="ONE_TO_MANY", description="User can have multiple projects", field="id"),
                ],
                position=Position(x=100, y=100),
            ),
            SchemaEntity(
                name="Project",
                fields=[
                    _field("id", "uuid", True, "Unique project identifier", ["PRIMARY KEY", "NOT NULL"]),
                    _field("title", "varchar(255)", True, "Project title", ["NOT NULL"]),
                    _field("description", "text", False, "Detailed project description"),
                    _field("user_id", "uuid", True, "Foreign key to User table", ["NOT NULL"], "User.id"),
                    _field("status", "varchar(50)", True, "Project status (active, completed, archived, paused)", ["NOT NULL"]),
                    _field("priority", "integer", False, "Project priority level (1-5)"),
                    _field("start_date", "date", False, "Project start date"),
                    _field("end_date", "date", False, "Project end date"),
                    _field("created_at", "timestamp", True, "Project creation timestamp", ["NOT NULL"]),
                    _field("updated_at", "timestamp", False, "Project last update timestamp"),
                ],
                relationships=[
                    EntityRelationship(target="User", type="MANY_TO_ONE", description="Project belongs to one user", field="user_id"),
                    EntityRelationship(target="Task", type="ONE_TO_MANY", description="Project can have multiple tasks", field="id"),
                ],
                position=Position(x=400, y=100),
            ),
            SchemaEntity(
                name="Task",
                fields=[
                    _field("id", "uuid", True, "Unique task identifier", ["PRIMARY KEY", "NOT NULL"]),
                    _field("project_id", "uuid", True, "Foreign key to Project table", ["NOT NULL"], "Project.id"),
                    _field("title", "varchar(255)", True, "Task title", ["NOT NULL"]),
                    _field("description", "text", False, "Detailed task description"),
                    _field("status", "varchar(50)", True, "Task status (todo, in_progress, completed, cancelled)", ["NOT NULL"]),
                    _field("priority", "integer", True, "Task priority level (1-5)", ["NOT NULL"]),
                    _field("due_date", "date", False, "Task due date"),
                    _field("estimated_hours", "integer", False, "Estimated hours to complete task"),
                    _field("assigned_to", "uuid", False, "User assigned to this task", references="User.id"),
                    _field("created_at", "timestamp", True, "Task creation timestamp", ["NOT NULL"]),
                    _field("updated_at", "timestamp", False, "Task last update timestamp"),
                ],
                relationships=[
                    EntityRelationship(target="Project", type="MANY_TO_ONE", description="Task belongs to one project", field="project_id"),
                    EntityRelationship(target="User", type="MANY_TO_ONE", description="Task can be assigned to one user", field="assigned_to"),
                ],
                position=Position(x=700, y=100),
            ),
        ],
        relationships=[
            SchemaRelationship(id="r1", source="User", target="Project", type="ONE_TO_MANY", label="owns", source_field="id", target_field="user_id"),
            SchemaRelationship(id="r2", source="Project", target="Task", type="ONE_TO_MANY", label="contains", source_field="id", target_field="project_id"),
            SchemaRelationship(id="r3", source="User", target="Task", type="ONE_TO_MANY", label="assigned_to", source_field="id", target_field="assigned_to"),
        ],
    ),
)


def fallback_analysis() -> dict[str, Any]:
    return _dump(FALLBACK_ANALYSIS)


def fallback_kanban() -> dict[str, Any]:
    return _dump(FALLBACK_KANBAN)


def fallback_workflow() -> dict[str, Any]:
    return _dump(FALLBACK_WORKFLOW)
