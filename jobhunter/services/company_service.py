"""
Company Service - admin-managed company records.

Update and delete check that the company exists inside the same
transaction as the mutation.
"""

import logging
import uuid

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobhunter.core.errors import InternalError, NotFoundError
from jobhunter.db.postgres import get_db_session
from jobhunter.schemas.schemas import CompanyCreate, CompanyResponse, CompanyUpdate

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = "id, name, description, created_at, updated_at"


def _ensure_exists(db: Session, company_id: str) -> None:
    row = db.execute(text("SELECT 1 FROM companies WHERE id = :id"), {"id": company_id}).fetchone()
    if row is None:
        raise NotFoundError("Company not found")


class CompanyService:

    def create_company(self, data: CompanyCreate) -> CompanyResponse:
        try:
            with get_db_session() as db:
                row = db.execute(
                    text(f"""
                        INSERT INTO companies (id, name, description)
                        VALUES (:id, :name, :description)
                        RETURNING {COMPANY_COLUMNS}
                    """),
                    {"id": str(uuid.uuid4()), "name": data.name, "description": data.description},
                ).mappings().fetchone()
        except SQLAlchemyError as exc:
            raise InternalError("Failed to create company") from exc

        logger.info("Created company %s", row["id"])
        return CompanyResponse.model_validate(dict(row))

    def update_company(self, company_id, data: CompanyUpdate) -> CompanyResponse:
        """Partial update: fields left out of the request keep their value."""
        company_id = str(company_id)
        try:
            with get_db_session() as db:
                _ensure_exists(db, company_id)
                row = db.execute(
                    text(f"""
                        UPDATE companies
                        SET name = COALESCE(:name, name),
                            description = COALESCE(:description, description),
                            updated_at = CURRENT_TIMESTAMP
                        WHERE id = :id
                        RETURNING {COMPANY_COLUMNS}
                    """),
                    {"id": company_id, "name": data.name, "description": data.description},
                ).mappings().fetchone()
                if row is None:
                    raise NotFoundError("Company not found")
        except SQLAlchemyError as exc:
            raise InternalError("Failed to update company") from exc

        logger.info("Updated company %s", company_id)
        return CompanyResponse.model_validate(dict(row))

    def delete_company(self, company_id) -> None:
        company_id = str(company_id)
        try:
            with get_db_session() as db:
                _ensure_exists(db, company_id)
                db.execute(text("DELETE FROM companies WHERE id = :id"), {"id": company_id})
        except SQLAlchemyError as exc:
            raise InternalError("Failed to delete company") from exc

        logger.info("Deleted company %s", company_id)


def get_company_service() -> CompanyService:
    """Get company service instance."""
    return CompanyService()
