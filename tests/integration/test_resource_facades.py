"""
Tests for the resource facades: each call must hit the right verb and path
with the right payload, and decode into the right model.
"""

import pytest

from schlep_engine import APIError, ListParams, ResourceNotFoundError, TrainConfig
from schlep_engine.client.models import (
    FileMetadata,
    PipelineResponse,
    QualityAssessmentResponse,
    UserSummary,
)


class TestDataResource:
    """Test data processing endpoints."""

    @pytest.mark.asyncio
    async def test_process_file_is_multipart(self, fake_api):
        fake_api.route("POST", "/data/process", json={"job_id": "proc_1", "status": "queued"})
        client = await fake_api.client()

        job = await client.data.process_file(b"id,name\n1,Alice\n", "csv")

        assert job.job_id == "proc_1"
        request = fake_api.requests[0]
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert request.headers["Authorization"] == "Bearer test-api-key"
        assert request.files["file"] == {
            "filename": "upload",
            "content": b"id,name\n1,Alice\n",
            "content_type": "application/octet-stream",
        }
        assert request.form == {"format": "csv"}

    @pytest.mark.asyncio
    async def test_transform_and_validate(self, fake_api):
        fake_api.route("POST", "/data/transform", json={
            "job_id": "proc_1", "status": "applied", "transformations_applied": ["filter"],
        })
        fake_api.route("POST", "/data/validate", json={"valid": False, "errors": ["age: not an integer"]})
        client = await fake_api.client()

        transformations = {"operations": [{"type": "filter", "column": "age", "operator": ">", "value": 18}]}
        transformed = await client.data.transform_data("proc_1", transformations)
        validation = await client.data.validate_schema("proc_1", {"fields": [{"name": "age", "type": "integer"}]})

        assert transformed.transformations_applied == ["filter"]
        assert validation.valid is False
        assert validation.errors == ["age: not an integer"]
        assert fake_api.requests[0].json == {"job_id": "proc_1", "transformations": transformations}
        assert fake_api.requests[1].json["schema"] == {"fields": [{"name": "age", "type": "integer"}]}

    @pytest.mark.asyncio
    async def test_get_and_list_jobs(self, fake_api):
        job = {"job_id": "proc_1", "status": "completed"}
        fake_api.route("GET", "/data/jobs/proc_1", json=job)
        fake_api.route("GET", "/data/jobs", json=[job])
        client = await fake_api.client()

        assert (await client.data.get_job("proc_1")).status == "completed"
        jobs = await client.data.list_jobs(ListParams(status="completed"))

        assert [j.job_id for j in jobs] == ["proc_1"]
        assert fake_api.requests[1].raw_path == "/data/jobs?status=completed"


class TestMLResource:
    """Test ML pipeline endpoints."""

    @pytest.mark.asyncio
    async def test_pipeline_lifecycle(self, fake_api):
        fake_api.route("POST", "/ml/pipelines", json={
            "pipeline_id": "pipe_1", "name": "Customer Churn Prediction", "status": "created",
        })
        fake_api.route("POST", "/ml/train", json={"job_id": "train_1", "pipeline_id": "pipe_1", "status": "training"})
        fake_api.route("GET", "/ml/training/train_1", json={
            "job_id": "train_1", "status": "completed", "progress": 100.0,
            "model_id": "model_1", "metrics": {"accuracy": 0.93},
        })
        fake_api.route("POST", "/ml/deploy", json={
            "deployment_id": "dep_1", "model_id": "model_1",
            "endpoint_url": "https://models.example/dep_1", "status": "deploying",
        })
        fake_api.route("POST", "/ml/predict", json={"predictions": [1, 0], "model_id": "model_1"})
        client = await fake_api.client()

        pipeline = await client.ml.create_pipeline({"name": "Customer Churn Prediction", "task_type": "classification"})
        training = await client.ml.train_pipeline(pipeline.pipeline_id, {"epochs": 10})
        finished = await client.ml.get_training_job(training.job_id)
        deployment = await client.ml.deploy_model(finished.model_id)
        prediction = await client.ml.predict(deployment.endpoint_url, [{"age": 30}, {"age": 61}])

        assert finished.metrics == {"accuracy": 0.93}
        assert prediction.predictions == [1, 0]

        bodies = [r.json for r in fake_api.requests if r.method == "POST"]
        assert bodies[1] == {"pipeline_id": "pipe_1", "config": {"epochs": 10}}
        assert bodies[2] == {"model_id": "model_1", "config": {}}
        assert bodies[3] == {"endpoint": "https://models.example/dep_1", "data": [{"age": 30}, {"age": 61}]}

    @pytest.mark.asyncio
    async def test_train_pipeline_with_config_model(self, fake_api):
        fake_api.route("POST", "/ml/train", json={"job_id": "train_2", "pipeline_id": "p", "status": "training"})
        client = await fake_api.client()

        job = await client.ml.train_pipeline("p", TrainConfig(model_type="rf", dataset_id="d"))

        assert job.job_id == "train_2"
        assert fake_api.requests[0].json == {
            "pipeline_id": "p",
            "config": {"model_type": "rf", "dataset_id": "d", "parameters": {}},
        }

    @pytest.mark.asyncio
    async def test_deploy_model_with_config(self, fake_api):
        fake_api.route("POST", "/ml/deploy", json={
            "deployment_id": "d", "model_id": "m", "endpoint_url": "https://e", "status": "deploying",
        })
        client = await fake_api.client()

        await client.ml.deploy_model("m", {"replicas": 2})

        assert fake_api.requests[0].json == {"model_id": "m", "config": {"replicas": 2}}

    @pytest.mark.asyncio
    async def test_get_and_list_pipelines(self, fake_api):
        pipeline = {"pipeline_id": "pipe_1", "name": "p", "status": "active"}
        fake_api.route("GET", "/ml/pipelines/pipe_1", json=pipeline)
        fake_api.route("GET", "/ml/pipelines", json=[pipeline])
        client = await fake_api.client()

        assert await client.ml.get_pipeline("pipe_1") == PipelineResponse(**pipeline)
        await client.ml.list_pipelines()
        await client.ml.list_pipelines(ListParams())
        await client.ml.list_pipelines(ListParams(page=2, page_size=10))

        assert [r.raw_path for r in fake_api.requests[1:]] == [
            "/ml/pipelines",
            "/ml/pipelines",
            "/ml/pipelines?page=2&page_size=10",
        ]


class TestAnalyticsResource:
    """Test analytics endpoints."""

    @pytest.mark.asyncio
    async def test_query_reports_datasets(self, fake_api):
        fake_api.route("POST", "/analytics/query", json={
            "query_id": "q1", "results": [{"n": 3}], "row_count": 1, "execution_time_ms": 12,
        })
        fake_api.route("POST", "/analytics/reports", json={"report_id": "r1", "name": "weekly", "status": "generating"})
        fake_api.route("GET", "/analytics/reports/r1", json={"report_id": "r1", "name": "weekly", "status": "ready", "data": {}})
        fake_api.route("POST", "/analytics/datasets", json={"dataset_id": "ds1", "name": "users"})
        fake_api.route("GET", "/analytics/datasets/ds1", json={"dataset_id": "ds1", "name": "users", "row_count": 1000})
        client = await fake_api.client()

        query = await client.analytics.execute_query({"sql": "SELECT count(*) AS n FROM users"})
        await client.analytics.create_report({"name": "weekly"})
        report = await client.analytics.get_report("r1")
        await client.analytics.create_dataset({"name": "users", "source": "proc_1"})
        dataset = await client.analytics.get_dataset("ds1")

        assert query.row_count == 1
        assert query.execution_time_ms == 12
        assert report.status == "ready"
        assert dataset.row_count == 1000
        assert fake_api.requests[0].json == {"sql": "SELECT count(*) AS n FROM users"}


class TestDocumentResource:
    """Test document extraction endpoints."""

    @pytest.mark.asyncio
    async def test_extractions(self, fake_api):
        fake_api.route("POST", "/document/extract/text", json={"text": "Hello", "page_count": 1})
        fake_api.route("POST", "/document/extract/tables", json={"tables": [[["a", "b"]]], "table_count": 1})
        fake_api.route("POST", "/document/extract/images", json={"images": ["img_1.png"], "image_count": 1})
        client = await fake_api.client()

        text = await client.document.extract_text(b"%PDF-1.7", "pdf")
        tables = await client.document.extract_tables(b"%PDF-1.7")
        images = await client.document.extract_images(b"%PDF-1.7")

        assert text.text == "Hello"
        assert tables.table_count == 1
        assert images.images == ["img_1.png"]

        assert fake_api.requests[0].form == {"format": "pdf"}
        for request in fake_api.requests:
            assert request.files["file"]["filename"] == "document"
            assert request.files["file"]["content"] == b"%PDF-1.7"
        assert fake_api.requests[1].form == {}

    @pytest.mark.asyncio
    async def test_ocr_language_is_optional(self, fake_api):
        fake_api.route("POST", "/document/ocr", json={"text": "Invoice", "confidence": 0.97, "language": "eng"})
        client = await fake_api.client()

        await client.document.ocr(b"\x89PNG")
        result = await client.document.ocr(b"\x89PNG", language="eng")

        assert result.confidence == 0.97
        assert fake_api.requests[0].form == {}
        assert fake_api.requests[1].form == {"language": "eng"}
        assert fake_api.requests[1].files["file"]["filename"] == "image"


class TestQualityResource:
    """Test data quality endpoints."""

    @pytest.mark.asyncio
    async def test_assess_rules_validate(self, fake_api):
        fake_api.route("GET", "/quality/assess/proc_1", json={
            "quality_score": 87.5,
            "issues": [{"issue_type": "missing_values", "severity": "medium", "description": "12 nulls"}],
        })
        fake_api.route("POST", "/quality/rules", json={"rule_id": "rule_1", "name": "age_range", "config": {"min": 0}})
        fake_api.route("POST", "/quality/validate", json={
            "passed": False, "results": [{"rule_id": "rule_1", "passed": False, "error": "age -1"}],
        })
        client = await fake_api.client()

        assessment = await client.quality.assess_quality("proc_1")
        rule = await client.quality.create_rule({"name": "age_range", "column": "age", "min": 0})
        validation = await client.quality.validate_data("proc_1", [rule.rule_id])

        assert isinstance(assessment, QualityAssessmentResponse)
        assert assessment.issues[0].severity == "medium"
        assert validation.failed_rules() == ["rule_1"]
        assert fake_api.requests[2].json == {"job_id": "proc_1", "rules": ["rule_1"]}


class TestStorageResource:
    """Test storage endpoints."""

    @pytest.mark.asyncio
    async def test_upload_download_list_delete(self, fake_api):
        fake_api.route("POST", "/storage/upload", json={"file_id": "file_1", "url": "https://files/file_1", "size": 5})
        fake_api.route("GET", "/storage/files/file_1/download", body=b"\x00\xffdata")
        fake_api.route("GET", "/storage/files", json=[{"file_id": "file_1", "filename": "data.csv", "size": 5}])
        fake_api.route("DELETE", "/storage/files/file_1", json={})
        client = await fake_api.client()

        uploaded = await client.storage.upload_file(b"a,b\n", "data.csv")
        content = await client.storage.download_file(uploaded.file_id)
        files = await client.storage.list_files(ListParams(page=1, page_size=20))
        deleted = await client.storage.delete_file("file_1")

        assert uploaded.size == 5
        assert content == b"\x00\xffdata"
        assert files == [FileMetadata(file_id="file_1", filename="data.csv", size=5)]
        assert deleted is None

        assert fake_api.requests[0].files["file"]["filename"] == "data.csv"
        assert fake_api.requests[1].headers["Authorization"] == "Bearer test-api-key"
        assert fake_api.requests[2].raw_path == "/storage/files?page=1&page_size=20"
        assert fake_api.requests[3].method == "DELETE"

    @pytest.mark.asyncio
    async def test_download_missing_file(self, fake_api):
        fake_api.route("GET", "/storage/files/nope/download", status=404, json={"message": "File not found"})
        client = await fake_api.client()

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await client.storage.download_file("nope")

        assert exc_info.value.message == "File not found"

    @pytest.mark.asyncio
    async def test_delete_with_empty_body(self, fake_api):
        fake_api.route("DELETE", "/storage/files/file_2", status=204)
        client = await fake_api.client()

        assert await client.storage.delete_file("file_2") is None


class TestMonitoringResource:
    """Test monitoring endpoints."""

    @pytest.mark.asyncio
    async def test_metrics_health_alerts(self, fake_api):
        fake_api.route("POST", "/monitoring/metrics", json={"metrics": {"cpu": 0.4}, "timestamp": "2026-01-01T00:00:00Z"})
        fake_api.route("GET", "/monitoring/health", json={"status": "healthy", "components": {"db": "ok"}})
        fake_api.route("GET", "/monitoring/alerts", json=[{
            "alert_id": "a1", "alert_type": "latency", "severity": "warning",
            "message": "p99 > 1s", "timestamp": "2026-01-01T00:00:00Z",
        }])
        client = await fake_api.client()

        metrics = await client.monitoring.get_metrics({"names": ["cpu"], "window": "1h"})
        health = await client.monitoring.get_health()
        alerts = await client.monitoring.list_alerts()

        assert metrics.metrics == {"cpu": 0.4}
        assert health.components == {"db": "ok"}
        assert alerts[0].severity == "warning"
        assert fake_api.requests[0].json == {"names": ["cpu"], "window": "1h"}


class TestUsersResource:
    """Test user profile and API key endpoints."""

    @pytest.mark.asyncio
    async def test_profile_and_keys(self, fake_api):
        profile = {"user_id": "u1", "email": "ada@example.com", "name": "Ada"}
        key = {"key_id": "k1", "name": "ci", "key_prefix": "sk_live_ab"}
        fake_api.route("GET", "/users/profile", json=profile)
        fake_api.route("PUT", "/users/profile", json={**profile, "name": "Ada L."})
        fake_api.route("GET", "/users/api-keys", json=[key])
        fake_api.route("POST", "/users/api-keys", json=key)
        fake_api.route("DELETE", "/users/api-keys/k1", json={"revoked": True})
        client = await fake_api.client()

        assert (await client.users.get_profile()).email == "ada@example.com"
        updated = await client.users.update_profile({"name": "Ada L."})
        keys = await client.users.list_api_keys()
        created = await client.users.create_api_key("ci")
        revoked = await client.users.revoke_api_key("k1")

        assert updated.name == "Ada L."
        assert keys[0].key_prefix == "sk_live_ab"
        assert created.key_id == "k1"
        assert revoked is None
        assert fake_api.requests[1].method == "PUT"
        assert fake_api.requests[1].json == {"name": "Ada L."}
        assert fake_api.requests[3].json == {"name": "ci"}


class TestAdminResource:
    """Test admin endpoints."""

    @pytest.mark.asyncio
    async def test_list_users_and_stats(self, fake_api):
        fake_api.route("GET", "/admin/users", json=[{"user_id": "u1", "email": "ada@example.com", "status": "active"}])
        fake_api.route("GET", "/admin/stats", json={
            "total_users": 10, "total_jobs": 250, "active_jobs": 3, "additional_stats": {"storage_gb": 1.5},
        })
        client = await fake_api.client()

        users = await client.admin.list_users(ListParams(page=1, page_size=50, status="active"))
        stats = await client.admin.get_system_stats()

        assert users == [UserSummary(user_id="u1", email="ada@example.com", status="active")]
        assert stats.additional_stats == {"storage_gb": 1.5}
        assert fake_api.requests[0].raw_path == "/admin/users?page=1&page_size=50&status=active"
        assert fake_api.requests[0].query == {"page": "1", "page_size": "50", "status": "active"}

    @pytest.mark.asyncio
    async def test_forbidden(self, fake_api):
        fake_api.route("GET", "/admin/stats", status=403, json={"message": "Admin privileges required"})
        client = await fake_api.client()

        with pytest.raises(APIError) as exc_info:
            await client.admin.get_system_stats()

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Admin privileges required"
