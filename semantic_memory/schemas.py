"""Request schemas - validation for the analysis entry point.

Everything a caller hands to ``analyze_request`` passes through these
models before any component runs.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisContext(BaseModel):
    """Recognized keys of the free-form request context.

    Unknown keys are ignored. Keys may be given in camelCase (as the
    request-handling tier sends them) or snake_case.
    """
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "hasRecentImages": True,
                "previousCategory": "branding",
                "recentQueries": ["создай логотип", "векторизуй"],
            }
        },
    )

    has_recent_images: bool = Field(
        default=False,
        alias="hasRecentImages",
        description="The session produced images recently",
    )
    previous_category: Optional[str] = Field(
        default=None,
        alias="previousCategory",
        description="Cluster name detected for the previous request",
    )
    recent_queries: list[str] = Field(
        default_factory=list,
        alias="recentQueries",
        description="Most recent user queries, oldest first",
    )
    user_behavior_history: list[str] = Field(
        default_factory=list,
        alias="userBehaviorHistory",
        description="Longer message history used for behavior archetypes",
    )


class AnalyzeRequest(BaseModel):
    """Schema for a single analysis request

    Used by: SemanticOrchestrator.analyze_request
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "query": "создай логотип для кофейни",
                "session_id": "session-42",
                "context": {},
            }
        },
    )

    query: str = Field(
        ...,
        min_length=1,
        description="Free-form user request",
    )
    session_id: str = Field(
        default="default",
        min_length=1,
        max_length=200,
        description="Opaque identifier grouping a user's projects",
    )
    context: dict = Field(
        default_factory=dict,
        description="Open key/value bag; see AnalysisContext for recognized keys",
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v):
        """Ensure query is not just whitespace"""
        if not v.strip():
            raise ValueError("Query cannot be empty or whitespace only")
        return v.strip()

    @field_validator("session_id")
    @classmethod
    def validate_session_id(cls, v):
        if not v.strip():
            raise ValueError("session_id cannot be empty or whitespace only")
        return v.strip()

    @property
    def analysis_context(self) -> AnalysisContext:
        """Recognized context keys, parsed."""
        return AnalysisContext.model_validate(self.context)
