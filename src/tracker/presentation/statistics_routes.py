from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.tracker.application.services import StatisticsService
from src.tracker.domain.models import TaskStatistics

router = APIRouter(prefix="/api/statistics", tags=["statistics"])
logger = logging.getLogger(__name__)


class StatisticsHealthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    service: str = Field(description="Service name.")
    status: str = Field(description="Liveness marker of this service.")
    task_service_available: bool = Field(description="Whether the task source answered.")


def get_statistics_service() -> StatisticsService:
    return StatisticsService()


@router.get(
    "",
    response_model=TaskStatistics,
    summary="Aggregate task statistics",
    description=(
        "Totals, completion rate and priority/category distributions over the current "
        "task collection. Returns all-zero statistics when the task source is down."
    ),
)
def get_statistics(service: StatisticsService = Depends(get_statistics_service)):
    if not service.is_source_available():
        logger.warning("Task source unavailable, statistics may be empty")
    statistics = service.compute_statistics()
    logger.info("Statistics returned", extra={"total": statistics.total})
    return statistics


@router.get(
    "/health",
    response_model=StatisticsHealthResponse,
    summary="Statistics service health check",
)
def health(service: StatisticsService = Depends(get_statistics_service)):
    return StatisticsHealthResponse(
        service="Statistics Service",
        status="UP",
        task_service_available=service.is_source_available(),
    )
