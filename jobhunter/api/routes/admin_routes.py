"""
Admin Routes (admin role required for every endpoint)

POST /admin/create-admin - Create another admin account
POST /admin/create-recruiter - Create a recruiter account
POST /admin/company - Create company
PATCH /admin/company/{company_id} - Update company name and/or description
DELETE /admin/company/{company_id} - Delete company
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from jobhunter.core.auth import require_role
from jobhunter.schemas.schemas import (
    CompanyCreate,
    CompanyMessageResponse,
    CompanyUpdate,
    CreateAdminRequest,
    CreateRecruiterRequest,
    CreateUserResponse,
    MessageResponse,
    UserRole,
)
from jobhunter.services.account_service import AccountService, get_account_service
from jobhunter.services.company_service import CompanyService, get_company_service

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_role(UserRole.admin))],
)


@router.post("/create-admin", response_model=CreateUserResponse, status_code=201)
def create_admin(data: CreateAdminRequest, accounts: AccountService = Depends(get_account_service)):
    user = accounts.create_admin(data)
    return CreateUserResponse(message="Admin created successfully", user=user)


@router.post("/create-recruiter", response_model=CreateUserResponse, status_code=201)
def create_recruiter(data: CreateRecruiterRequest, accounts: AccountService = Depends(get_account_service)):
    user = accounts.create_recruiter(data)
    return CreateUserResponse(message="Recruiter created successfully", user=user)


@router.post("/company", response_model=CompanyMessageResponse, status_code=201)
def create_company(data: CompanyCreate, companies: CompanyService = Depends(get_company_service)):
    company = companies.create_company(data)
    return CompanyMessageResponse(message="Company created successfully", company=company)


@router.patch("/company/{company_id}", response_model=CompanyMessageResponse)
def update_company(
    company_id: UUID,
    data: CompanyUpdate,
    companies: CompanyService = Depends(get_company_service),
):
    """Only the provided fields are changed."""
    company = companies.update_company(company_id, data)
    return CompanyMessageResponse(message="Company updated successfully", company=company)


@router.delete("/company/{company_id}", response_model=MessageResponse)
def delete_company(company_id: UUID, companies: CompanyService = Depends(get_company_service)):
    companies.delete_company(company_id)
    return MessageResponse(message="Company deleted successfully")
