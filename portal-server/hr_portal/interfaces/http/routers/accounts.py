"""Administrative account management endpoints."""
from fastapi import APIRouter, Depends, status

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.modules.accounts import AccountCreateInput
from hr_portal.schemas import AccountResponse, AccountSave, PasswordReset, SuccessResponse
from hr_portal.services import PortalService

router = APIRouter()


def _to_input(payload: AccountSave) -> AccountCreateInput:
    return AccountCreateInput(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        password=payload.password or "",
        role=payload.role,
        verified=payload.verified,
    )


@router.get("", response_model=list[AccountResponse], summary="List accounts")
async def list_accounts(portal: PortalService = Depends(get_portal)):
    return [AccountResponse.model_validate(account) for account in portal.list_accounts()]


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED, summary="Create an account")
async def create_account(payload: AccountSave, portal: PortalService = Depends(get_portal)):
    return AccountResponse.model_validate(portal.save_account(_to_input(payload)))


@router.put("/{email}", response_model=AccountResponse, summary="Edit an account")
async def update_account(email: str, payload: AccountSave, portal: PortalService = Depends(get_portal)):
    account = portal.save_account(_to_input(payload), editing_email=email)
    return AccountResponse.model_validate(account)


@router.post("/{email}/password", response_model=SuccessResponse, summary="Reset an account password")
async def reset_password(email: str, payload: PasswordReset, portal: PortalService = Depends(get_portal)):
    portal.reset_password(email, payload.new_password)
    return SuccessResponse(message="Password reset successfully")


@router.delete("/{email}", response_model=SuccessResponse, summary="Delete an account")
async def delete_account(email: str, portal: PortalService = Depends(get_portal)):
    portal.delete_account(email)
    return SuccessResponse(message="Account deleted successfully")
