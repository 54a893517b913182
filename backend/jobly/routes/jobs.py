import logging

from fastapi import APIRouter, Depends, Path, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.errors import BadRequestError
from jobly.repositories.job import JobRepository
from jobly.schemas.job import (
    DeletedResponse,
    JobDetailResponse,
    JobListResponse,
    JobNew,
    JobResponse,
    JobSearch,
    JobUpdate,
)
from jobly.utils.db import get_db
from jobly.utils.token_utils import require_admin

logger = logging.getLogger(__name__)

router = APIRouter()

# Largest id a 64-bit INTEGER/BIGINT column can hold
MAX_JOB_ID = 2**63 - 1


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def job_search(request: Request) -> JobSearch:
    # Query keys are whitelisted: anything other than title/minSalary/hasEquity is a 400
    try:
        return JobSearch.model_validate(dict(request.query_params))
    except ValidationError as exc:
        messages = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
        raise BadRequestError("; ".join(messages) or "Invalid parameters")


@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobNew,
    current=Depends(require_admin()),
    jobs: JobRepository = Depends(get_job_repository),
):
    logger.info("Create job %r requested by %s", payload.title, current["username"])
    job = jobs.create(
        title=payload.title,
        salary=payload.salary,
        equity=payload.equity,
        company_handle=payload.companyHandle,
    )
    logger.info("Created job %s", job["id"])
    return {"job": job}


@router.get("/jobs", response_model=JobListResponse)
def list_jobs(
    search: JobSearch = Depends(job_search),
    jobs: JobRepository = Depends(get_job_repository),
):
    criteria = search.model_dump(exclude_none=True)
    items = jobs.filter(criteria)
    logger.info("Listed %d jobs for filters %s", len(items), criteria)
    return {"jobs": items}


@router.get("/jobs/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int = Path(ge=1, le=MAX_JOB_ID), jobs: JobRepository = Depends(get_job_repository)):
    return {"job": jobs.get(job_id)}


@router.patch("/jobs/{job_id}", response_model=JobResponse)
def update_job(
    payload: JobUpdate,
    job_id: int = Path(ge=1, le=MAX_JOB_ID),
    current=Depends(require_admin()),
    jobs: JobRepository = Depends(get_job_repository),
):
    data = payload.model_dump(exclude_unset=True)
    logger.info("Update job %s fields %s requested by %s", job_id, sorted(data), current["username"])
    job = jobs.update(job_id, data)
    return {"job": job}


@router.delete("/jobs/{job_id}", response_model=DeletedResponse)
def delete_job(
    job_id: int = Path(ge=1, le=MAX_JOB_ID),
    current=Depends(require_admin()),
    jobs: JobRepository = Depends(get_job_repository),
):
    title = jobs.remove(job_id)
    logger.info("Deleted job %s (%s) by %s", job_id, title, current["username"])
    return {"deleted": job_id}
