"""Jobs repository.

Data access for the ``jobs`` table. Every statement is parameterized; the
dynamic WHERE and SET clauses come from ``jobly.utils.sql``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import BadRequestError, DuplicateError, NotFoundError
from jobly.utils.sql import bind_params, placeholder, sql_for_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Logical field -> column. company_handle is immutable once a job exists.
UPDATABLE_COLUMNS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        title: str,
        salary: Optional[int],
        equity: Optional[float],
        company_handle: str,
    ) -> Dict[str, Any]:
        """Insert a job and return it with its store-assigned id.

        Raises:
            DuplicateError: another job already has this title.
            BadRequestError: ``company_handle`` does not reference a company,
                or a column constraint (salary, equity) rejected the row.
        """
        try:
            row = self.db.execute(
                text(
                    f"""
                    INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES (:title, :salary, :equity, :company_handle)
                    RETURNING {JOB_COLUMNS}
                    """
                ),
                {"title": title, "salary": salary, "equity": equity, "company_handle": company_handle},
            ).mappings().one()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self._title_taken(title):
                logger.warning("Duplicate job title rejected: %s", title)
                raise DuplicateError(f"Duplicate job: {title}")
            if not self._company_exists(company_handle):
                logger.warning("Job references unknown company: %s", company_handle)
                raise BadRequestError(f"No company: {company_handle}")
            raise BadRequestError(f"Invalid data for job: {title}")

        logger.debug("Created job %s (%s)", row["id"], title)
        return dict(row)

    def find_all(self) -> List[Dict[str, Any]]:
        rows = self.db.execute(
            text(f"SELECT {JOB_COLUMNS} FROM jobs ORDER BY title")
        ).mappings().all()
        return [dict(r) for r in rows]

    def get(self, job_id: int) -> Dict[str, Any]:
        """Return a job with its company embedded under ``company``.

        A job whose company row has disappeared is reported as not found too.
        """
        job = self.db.execute(
            text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :id"),
            {"id": job_id},
        ).mappings().first()
        if not job:
            raise NotFoundError(f"No job: {job_id}")

        company = self.db.execute(
            text(
                """
                SELECT handle,
                       name,
                       description,
                       num_employees AS "numEmployees",
                       logo_url AS "logoUrl"
                FROM companies
                WHERE handle = :handle
                """
            ),
            {"handle": job["companyHandle"]},
        ).mappings().first()
        if not company:
            raise NotFoundError(f"No company: {job['companyHandle']}")

        return {
            "id": job["id"],
            "title": job["title"],
            "salary": job["salary"],
            "equity": job["equity"],
            "company": dict(company),
        }

    def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Change any non-empty subset of title/salary/equity.

        Raises:
            BadRequestError: ``data`` is empty or names a field that cannot change.
            DuplicateError: the new title belongs to another job.
            NotFoundError: no job with ``job_id``.
        """
        set_cols, values = sql_for_partial_update(data, UPDATABLE_COLUMNS)
        values.append(job_id)

        statement = text(
            f"""
            UPDATE jobs
            SET {set_cols}
            WHERE id = {placeholder(values)}
            RETURNING {JOB_COLUMNS}
            """
        )
        try:
            row = self.db.execute(statement, bind_params(values)).mappings().first()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            title = data.get("title")
            if title is not None and self._title_taken(title):
                logger.warning("Update of job %s conflicts with title %s", job_id, title)
                raise DuplicateError(f"Duplicate job: {title}")
            raise BadRequestError(f"Invalid data for job: {job_id}")

        if not row:
            raise NotFoundError(f"No job: {job_id}")

        logger.debug("Updated job %s fields %s", job_id, sorted(data))
        return dict(row)

    def remove(self, job_id: int) -> str:
        """Delete a job and return its title."""
        row = self.db.execute(
            text("DELETE FROM jobs WHERE id = :id RETURNING title"),
            {"id": job_id},
        ).mappings().first()
        self.db.commit()

        if not row:
            raise NotFoundError(f"No job: {job_id}")

        logger.debug("Removed job %s (%s)", job_id, row["title"])
        return row["title"]

    def filter(self, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Search jobs by title substring, minimum salary and equity.

        Jobs whose company no longer exists are still listed with
        ``companyName`` set to ``None``.
        """
        where, values = sql_for_filter(criteria or {})
        query = f"""
            SELECT j.id,
                   j.title,
                   j.salary,
                   j.equity,
                   j.company_handle AS "companyHandle",
                   c.name AS "companyName"
            FROM jobs j
            LEFT JOIN companies c ON j.company_handle = c.handle
            {where}
            ORDER BY j.title
        """
        rows = self.db.execute(text(query), bind_params(values)).mappings().all()
        return [dict(r) for r in rows]

    def _title_taken(self, title: str) -> bool:
        row = self.db.execute(
            text("SELECT id FROM jobs WHERE title = :title"),
            {"title": title},
        ).first()
        return row is not None

    def _company_exists(self, handle: str) -> bool:
        row = self.db.execute(
            text("SELECT handle FROM companies WHERE handle = :handle"),
            {"handle": handle},
        ).first()
        return row is not None
