"""
Schlep-engine Client SDK.

Example Usage:
    ```python
    from schlep_engine import SchlepClient, APIError

    client = SchlepClient(api_key="sk_live_...")

    try:
        job = await client.upload("id,name\\n1,Alice")
        status = await client.status(job.job_id)
    except APIError as e:
        print(f"Rejected ({e.status_code}): {e.message}")
    finally:
        await client.close()
    ```
"""

from schlep_engine.client.client import SchlepClient
from schlep_engine.client.dispatcher import Dispatcher
from schlep_engine.client.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    InvalidResponseError,
    InvalidURLError,
    RateLimitError,
    RequestTimeoutError,
    ResourceNotFoundError,
    SchlepError,
    StreamError,
    TransportError,
)
from schlep_engine.client.models import (
    AlertResponse,
    ApiKeyInfo,
    DatasetResponse,
    DeploymentResponse,
    DeployResponse,
    ExtractionResponse,
    FileMetadata,
    FileUploadResponse,
    HealthResponse,
    ImageExtractionResponse,
    ListParams,
    MetricsResponse,
    OCRResponse,
    PaginatedResponse,
    PipelineResponse,
    PredictionResponse,
    ProcessingJobResponse,
    QualityAssessmentResponse,
    QualityIssue,
    QualityRuleResponse,
    QueryResponse,
    ReportResponse,
    StatusResponse,
    StreamConfig,
    StreamEvent,
    SystemStats,
    TableExtractionResponse,
    TrainConfig,
    TrainingJobResponse,
    TrainResponse,
    TransformationResponse,
    UploadResponse,
    UserProfile,
    UserSummary,
    ValidationResponse,
    ValidationResult,
    ValidationResultResponse,
)
from schlep_engine.client.retry import RetryConfig, retry_async
from schlep_engine.client.transport import FilePart, HTTPTransport, MultipartForm, Transport

__all__ = [
    # Client
    "SchlepClient",
    "Dispatcher",
    # Transport
    "Transport",
    "HTTPTransport",
    "FilePart",
    "MultipartForm",
    # Exceptions
    "ErrorKind",
    "SchlepError",
    "ConfigurationError",
    "InvalidURLError",
    "TransportError",
    "RequestTimeoutError",
    "InvalidResponseError",
    "APIError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "RateLimitError",
    "StreamError",
    # Models
    "ListParams",
    "PaginatedResponse",
    "UploadResponse",
    "TrainConfig",
    "TrainResponse",
    "DeployResponse",
    "StatusResponse",
    "StreamConfig",
    "StreamEvent",
    "ProcessingJobResponse",
    "TransformationResponse",
    "ValidationResponse",
    "PipelineResponse",
    "TrainingJobResponse",
    "DeploymentResponse",
    "PredictionResponse",
    "QueryResponse",
    "ReportResponse",
    "DatasetResponse",
    "ExtractionResponse",
    "TableExtractionResponse",
    "ImageExtractionResponse",
    "OCRResponse",
    "QualityIssue",
    "QualityAssessmentResponse",
    "QualityRuleResponse",
    "ValidationResult",
    "ValidationResultResponse",
    "FileUploadResponse",
    "FileMetadata",
    "MetricsResponse",
    "HealthResponse",
    "AlertResponse",
    "UserProfile",
    "ApiKeyInfo",
    "UserSummary",
    "SystemStats",
    # Retry
    "RetryConfig",
    "retry_async",
]
