from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class JobNew(BaseModel):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(min_length=1, max_length=25)
    model_config = ConfigDict(extra="forbid")


class JobUpdate(BaseModel):
    # companyHandle is not accepted: a job never moves to another company
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    model_config = ConfigDict(extra="forbid")


class JobSearch(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    minSalary: Optional[int] = Field(default=None, ge=0)
    hasEquity: Optional[bool] = None
    model_config = ConfigDict(extra="forbid")


class CompanyOut(BaseModel):
    handle: str
    name: str
    description: Optional[str]
    numEmployees: Optional[int]
    logoUrl: Optional[str]


class JobOut(BaseModel):
    id: int
    title: str
    salary: Optional[int]
    equity: Optional[float]
    companyHandle: str


class JobListItem(JobOut):
    companyName: Optional[str]


class JobDetail(BaseModel):
    id: int
    title: str
    salary: Optional[int]
    equity: Optional[float]
    company: CompanyOut


class JobResponse(BaseModel):
    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobListResponse(BaseModel):
    jobs: List[JobListItem]


class DeletedResponse(BaseModel):
    deleted: int
