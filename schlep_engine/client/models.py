"""
Schlep-engine SDK models for requests and responses.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SchlepModel(BaseModel):
    """Base for API payloads (allows `model_*` field names)."""
    model_config = ConfigDict(protected_namespaces=())


# ========== Common ==========

class ListParams(SchlepModel):
    """Pagination/filter parameters for list endpoints."""
    page: int | None = Field(None, ge=0, description="Page number")
    page_size: int | None = Field(None, ge=0)
    status: str | None = None


class PaginatedResponse(SchlepModel):
    """Paginated response wrapper."""
    items: list[Any]
    total: int
    page: int
    page_size: int
    total_pages: int


# ========== Jobs (top-level endpoints) ==========

class UploadResponse(SchlepModel):
    """Response from the upload endpoint."""
    job_id: str
    status: str
    message: str | None = None


class TrainConfig(SchlepModel):
    """Configuration for training a model."""
    model_type: str
    dataset_id: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class TrainResponse(SchlepModel):
    """Response from the train endpoint."""
    job_id: str
    model_id: str | None = None
    status: str
    message: str | None = None


class DeployResponse(SchlepModel):
    """Response from the deploy endpoint."""
    deployment_id: str
    endpoint_url: str
    status: str
    message: str | None = None


class StatusResponse(SchlepModel):
    """Status of an upload, training or deployment job."""
    job_id: str
    status: str
    progress: float | None = Field(None, description="Progress percentage (0-100)")
    result: Any | None = None
    error: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class StreamConfig(SchlepModel):
    """Event subscription for the streaming channel."""
    event_types: list[str]
    filters: dict[str, Any] = Field(default_factory=dict)


class StreamEvent(SchlepModel):
    """Event frame received from the streaming channel."""
    event_type: str
    data: Any
    timestamp: str


# ========== Data processing ==========

class ProcessingJobResponse(SchlepModel):
    job_id: str
    status: str
    result: Any | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TransformationResponse(SchlepModel):
    job_id: str
    status: str
    transformations_applied: list[str] | None = None


class ValidationResponse(SchlepModel):
    """Schema validation outcome."""
    valid: bool
    errors: list[str] | None = None
    warnings: list[str] | None = None


# ========== ML pipelines ==========

class PipelineResponse(SchlepModel):
    pipeline_id: str
    name: str
    status: str
    config: Any | None = None
    created_at: str | None = None


class TrainingJobResponse(SchlepModel):
    job_id: str
    pipeline_id: str | None = None
    status: str
    progress: float | None = None
    model_id: str | None = None
    metrics: Any | None = None


class DeploymentResponse(SchlepModel):
    deployment_id: str
    model_id: str
    endpoint_url: str
    status: str


class PredictionResponse(SchlepModel):
    predictions: Any
    model_id: str
    probabilities: Any | None = None


# ========== Analytics ==========

class QueryResponse(SchlepModel):
    query_id: str
    results: Any
    row_count: int
    execution_time_ms: int | None = None


class ReportResponse(SchlepModel):
    report_id: str
    name: str
    status: str
    data: Any | None = None


class DatasetResponse(SchlepModel):
    dataset_id: str
    name: str
    row_count: int | None = None
    column_count: int | None = None


# ========== Document extraction ==========

class ExtractionResponse(SchlepModel):
    text: str
    metadata: Any | None = None
    page_count: int | None = None


class TableExtractionResponse(SchlepModel):
    tables: list[Any]
    table_count: int


class ImageExtractionResponse(SchlepModel):
    images: list[str]
    image_count: int


class OCRResponse(SchlepModel):
    text: str
    confidence: float | None = Field(None, ge=0, le=1)
    language: str | None = None


# ========== Data quality ==========

class QualityIssue(SchlepModel):
    issue_type: str
    severity: str
    description: str
    affected: Any | None = None


class QualityAssessmentResponse(SchlepModel):
    """Quality assessment with an overall 0-100 score."""
    quality_score: float
    issues: list[QualityIssue] | None = None
    metrics: Any | None = None

    def has_issues(self, severity: str | None = None) -> bool:
        """Check whether any issue (optionally of a given severity) was found."""
        if not self.issues:
            return False
        if severity is None:
            return True
        return any(issue.severity == severity for issue in self.issues)


class QualityRuleResponse(SchlepModel):
    rule_id: str
    name: str
    config: Any


class ValidationResult(SchlepModel):
    rule_id: str
    passed: bool
    error: str | None = None


class ValidationResultResponse(SchlepModel):
    passed: bool
    results: list[ValidationResult]

    def failed_rules(self) -> list[str]:
        """IDs of the rules that did not pass."""
        return [r.rule_id for r in self.results if not r.passed]


# ========== Storage ==========

class FileUploadResponse(SchlepModel):
    file_id: str
    url: str
    size: int


class FileMetadata(SchlepModel):
    file_id: str
    filename: str
    size: int
    content_type: str | None = None
    uploaded_at: str | None = None


# ========== Monitoring ==========

class MetricsResponse(SchlepModel):
    metrics: Any
    timestamp: str


class HealthResponse(SchlepModel):
    status: str
    version: str | None = None
    components: dict[str, str] | None = None


class AlertResponse(SchlepModel):
    alert_id: str
    alert_type: str
    severity: str
    message: str
    timestamp: str


# ========== Users ==========

class UserProfile(SchlepModel):
    user_id: str
    email: str
    name: str | None = None
    created_at: str | None = None


class ApiKeyInfo(SchlepModel):
    """API key metadata; only the prefix of the key is ever returned."""
    key_id: str
    name: str
    key_prefix: str
    created_at: str | None = None
    last_used_at: str | None = None


# ========== Admin ==========

class UserSummary(SchlepModel):
    user_id: str
    email: str
    status: str
    registered_at: str | None = None


class SystemStats(SchlepModel):
    total_users: int
    total_jobs: int
    active_jobs: int
    additional_stats: dict[str, Any] | None = None
