"""
Quickstart: process a CSV, train a pipeline and follow it on the event stream.

Run with: SCHLEP_API_KEY=sk_... python -m examples.quickstart
"""

import asyncio

from schlep_engine import (
    APIError,
    ListParams,
    SchlepClient,
    SchlepError,
    StreamConfig,
    StreamEvent,
    retry_async,
)
from schlep_engine.utils import enable_logging


CSV_DATA = b"id,name,age\n1,Alice,30\n2,Bob,61\n"


async def main():
    enable_logging(level="INFO")

    async with SchlepClient.from_env() as client:
        health = await retry_async(client.monitoring.get_health)
        print(f"API status: {health.status}")

        job = await client.data.process_file(CSV_DATA, "csv")
        print(f"Processing job: {job.job_id} ({job.status})")

        assessment = await client.quality.assess_quality(job.job_id)
        print(f"Quality score: {assessment.quality_score}")
        if assessment.has_issues("high"):
            print("High severity issues found, stopping here")
            return

        pipeline = await client.ml.create_pipeline({
            "name": "Customer Churn Prediction",
            "task_type": "classification",
            "source_job": job.job_id,
        })
        training = await client.ml.train_pipeline(pipeline.pipeline_id, {"epochs": 10})
        print(f"Training job: {training.job_id}")

        ws = await client.stream(StreamConfig(
            event_types=["training_progress", "training_completed"],
            filters={"job_id": training.job_id},
        ))
        try:
            async for message in ws:
                event = StreamEvent.model_validate_json(message.data)
                print(f"{event.timestamp} {event.event_type}: {event.data}")
                if event.event_type == "training_completed":
                    break
        finally:
            await ws.close()

        finished = await client.ml.get_training_job(training.job_id)
        if finished.model_id:
            deployment = await client.ml.deploy_model(finished.model_id)
            print(f"Deployed at {deployment.endpoint_url}")

        for pipeline in await client.ml.list_pipelines(ListParams(page=1, page_size=10)):
            print(f"- {pipeline.name}: {pipeline.status}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except APIError as e:
        print(f"API rejected the request: {e}")
    except SchlepError as e:
        print(f"Request failed ({e.kind.value}): {e.message}")
