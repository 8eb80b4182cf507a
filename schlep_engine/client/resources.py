"""
Resource facades for the Schlep-engine API.

Each facade is a fixed set of (verb, path) routes over the shared
``Dispatcher``; none of them adds logic of its own. Path segments such as
job or file IDs are inserted as given.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from typing import Any

from schlep_engine.client.dispatcher import Dispatcher
from schlep_engine.client.models import (
    AlertResponse,
    ApiKeyInfo,
    DatasetResponse,
    DeploymentResponse,
    ExtractionResponse,
    FileMetadata,
    FileUploadResponse,
    HealthResponse,
    ImageExtractionResponse,
    ListParams,
    MetricsResponse,
    OCRResponse,
    PipelineResponse,
    PredictionResponse,
    ProcessingJobResponse,
    QualityAssessmentResponse,
    QualityRuleResponse,
    QueryResponse,
    ReportResponse,
    SystemStats,
    TableExtractionResponse,
    TrainingJobResponse,
    TransformationResponse,
    UserProfile,
    UserSummary,
    ValidationResponse,
    ValidationResultResponse,
)
from schlep_engine.client.query import with_query
from schlep_engine.client.transport.base import FilePart, MultipartForm


class Resource:
    """Base facade bound to one dispatcher."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def _get(self, path: str, response_type: Any = Any) -> Any:
        return await self._dispatcher.dispatch("GET", path, response_type=response_type)

    async def _post(self, path: str, body: Any, response_type: Any = Any) -> Any:
        return await self._dispatcher.dispatch("POST", path, body, response_type=response_type)

    async def _put(self, path: str, body: Any, response_type: Any = Any) -> Any:
        return await self._dispatcher.dispatch("PUT", path, body, response_type=response_type)

    async def _delete(self, path: str) -> None:
        await self._dispatcher.dispatch("DELETE", path, response_type=None)

    async def _upload(self, path: str, form: MultipartForm, response_type: Any = Any) -> Any:
        return await self._dispatcher.dispatch_multipart(path, form, response_type=response_type)


class DataResource(Resource):
    """Data processing: upload, transform and validate data."""

    async def process_file(self, file: bytes, format: str) -> ProcessingJobResponse:
        """
        Upload a file (csv, json, parquet, ...) for processing.

        Args:
            file: File content
            format: File format understood by the platform
        """
        form = MultipartForm(FilePart(file, filename="upload"), {"format": format})
        return await self._upload("/data/process", form, ProcessingJobResponse)

    async def transform_data(self, job_id: str, transformations: Any) -> TransformationResponse:
        body = {"job_id": job_id, "transformations": transformations}
        return await self._post("/data/transform", body, TransformationResponse)

    async def validate_schema(self, job_id: str, schema: Any) -> ValidationResponse:
        body = {"job_id": job_id, "schema": schema}
        return await self._post("/data/validate", body, ValidationResponse)

    async def get_job(self, job_id: str) -> ProcessingJobResponse:
        return await self._get(f"/data/jobs/{job_id}", ProcessingJobResponse)

    async def list_jobs(self, params: ListParams | None = None) -> list[ProcessingJobResponse]:
        return await self._get(with_query("/data/jobs", params), list[ProcessingJobResponse])


class MLResource(Resource):
    """ML pipelines: create, train, deploy and predict."""

    async def create_pipeline(self, config: Any) -> PipelineResponse:
        return await self._post("/ml/pipelines", config, PipelineResponse)

    async def get_pipeline(self, pipeline_id: str) -> PipelineResponse:
        return await self._get(f"/ml/pipelines/{pipeline_id}", PipelineResponse)

    async def list_pipelines(self, params: ListParams | None = None) -> list[PipelineResponse]:
        return await self._get(with_query("/ml/pipelines", params), list[PipelineResponse])

    async def train_pipeline(self, pipeline_id: str, config: Any) -> TrainingJobResponse:
        body = {"pipeline_id": pipeline_id, "config": config}
        return await self._post("/ml/train", body, TrainingJobResponse)

    async def get_training_job(self, job_id: str) -> TrainingJobResponse:
        return await self._get(f"/ml/training/{job_id}", TrainingJobResponse)

    async def deploy_model(self, model_id: str, config: Any | None = None) -> DeploymentResponse:
        """Deploy a trained model; ``config`` defaults to an empty object."""
        body = {"model_id": model_id, "config": config if config is not None else {}}
        return await self._post("/ml/deploy", body, DeploymentResponse)

    async def predict(self, endpoint: str, data: Any) -> PredictionResponse:
        body = {"endpoint": endpoint, "data": data}
        return await self._post("/ml/predict", body, PredictionResponse)


class AnalyticsResource(Resource):
    """Queries, reports and datasets."""

    async def execute_query(self, query: Any) -> QueryResponse:
        return await self._post("/analytics/query", query, QueryResponse)

    async def create_report(self, config: Any) -> ReportResponse:
        return await self._post("/analytics/reports", config, ReportResponse)

    async def get_report(self, report_id: str) -> ReportResponse:
        return await self._get(f"/analytics/reports/{report_id}", ReportResponse)

    async def create_dataset(self, config: Any) -> DatasetResponse:
        return await self._post("/analytics/datasets", config, DatasetResponse)

    async def get_dataset(self, dataset_id: str) -> DatasetResponse:
        return await self._get(f"/analytics/datasets/{dataset_id}", DatasetResponse)


class DocumentResource(Resource):
    """Document extraction: text, tables, images and OCR."""

    async def extract_text(self, file: bytes, format: str) -> ExtractionResponse:
        form = MultipartForm(FilePart(file, filename="document"), {"format": format})
        return await self._upload("/document/extract/text", form, ExtractionResponse)

    async def extract_tables(self, file: bytes) -> TableExtractionResponse:
        form = MultipartForm(FilePart(file, filename="document"))
        return await self._upload("/document/extract/tables", form, TableExtractionResponse)

    async def extract_images(self, file: bytes) -> ImageExtractionResponse:
        form = MultipartForm(FilePart(file, filename="document"))
        return await self._upload("/document/extract/images", form, ImageExtractionResponse)

    async def ocr(self, file: bytes, language: str | None = None) -> OCRResponse:
        """
        Run OCR on an image.

        Args:
            file: Image content
            language: Optional language hint (e.g. "eng")
        """
        form = MultipartForm(FilePart(file, filename="image"))
        if language is not None:
            form = form.with_field("language", language)
        return await self._upload("/document/ocr", form, OCRResponse)


class QualityResource(Resource):
    """Data quality assessment and validation rules."""

    async def assess_quality(self, job_id: str) -> QualityAssessmentResponse:
        return await self._get(f"/quality/assess/{job_id}", QualityAssessmentResponse)

    async def create_rule(self, rule: Any) -> QualityRuleResponse:
        return await self._post("/quality/rules", rule, QualityRuleResponse)

    async def validate_data(self, job_id: str, rules: list[str]) -> ValidationResultResponse:
        body = {"job_id": job_id, "rules": rules}
        return await self._post("/quality/validate", body, ValidationResultResponse)


class StorageResource(Resource):
    """File storage."""

    async def upload_file(self, file: bytes, filename: str) -> FileUploadResponse:
        form = MultipartForm(FilePart(file, filename=filename))
        return await self._upload("/storage/upload", form, FileUploadResponse)

    async def download_file(self, file_id: str) -> bytes:
        """Download a stored file as raw bytes."""
        return await self._dispatcher.download_raw(f"/storage/files/{file_id}/download")

    async def list_files(self, params: ListParams | None = None) -> list[FileMetadata]:
        return await self._get(with_query("/storage/files", params), list[FileMetadata])

    async def delete_file(self, file_id: str) -> None:
        await self._delete(f"/storage/files/{file_id}")


class MonitoringResource(Resource):
    """Metrics, health and alerts."""

    async def get_metrics(self, params: Any) -> MetricsResponse:
        return await self._post("/monitoring/metrics", params, MetricsResponse)

    async def get_health(self) -> HealthResponse:
        return await self._get("/monitoring/health", HealthResponse)

    async def list_alerts(self) -> list[AlertResponse]:
        return await self._get("/monitoring/alerts", list[AlertResponse])


class UsersResource(Resource):
    """Profile and API key management for the calling user."""

    async def get_profile(self) -> UserProfile:
        return await self._get("/users/profile", UserProfile)

    async def update_profile(self, updates: Any) -> UserProfile:
        return await self._put("/users/profile", updates, UserProfile)

    async def list_api_keys(self) -> list[ApiKeyInfo]:
        return await self._get("/users/api-keys", list[ApiKeyInfo])

    async def create_api_key(self, name: str) -> ApiKeyInfo:
        return await self._post("/users/api-keys", {"name": name}, ApiKeyInfo)

    async def revoke_api_key(self, key_id: str) -> None:
        await self._delete(f"/users/api-keys/{key_id}")


class AdminResource(Resource):
    """Administrative endpoints (admin API keys only)."""

    async def list_users(self, params: ListParams | None = None) -> list[UserSummary]:
        return await self._get(with_query("/admin/users", params), list[UserSummary])

    async def get_system_stats(self) -> SystemStats:
        return await self._get("/admin/stats", SystemStats)
