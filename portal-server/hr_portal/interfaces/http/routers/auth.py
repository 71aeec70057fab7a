"""Login, registration, verification and session endpoints."""
from fastapi import APIRouter, Depends, status

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.schemas import AccountResponse, LoginRequest, RegisterRequest, SessionResponse, SuccessResponse
from hr_portal.services import PortalService

router = APIRouter()


@router.post("/login", response_model=AccountResponse, summary="Log in with a verified account")
async def login(payload: LoginRequest, portal: PortalService = Depends(get_portal)):
    account = portal.login(payload.email, payload.password)
    return AccountResponse.model_validate(account)


@router.post(
    "/register",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an account pending email verification",
)
async def register(payload: RegisterRequest, portal: PortalService = Depends(get_portal)):
    account = portal.register(payload.first_name, payload.last_name, payload.email, payload.password)
    return AccountResponse.model_validate(account)


@router.post("/verify", response_model=AccountResponse, summary="Verify the pending email")
async def verify(portal: PortalService = Depends(get_portal)):
    account = portal.verify_pending_email()
    return AccountResponse.model_validate(account)


@router.post("/logout", response_model=SuccessResponse, summary="Log out")
async def logout(portal: PortalService = Depends(get_portal)):
    portal.logout()
    return SuccessResponse(message="You have been logged out")


@router.get("/session", response_model=SessionResponse, summary="Current session state")
async def current_session(portal: PortalService = Depends(get_portal)):
    identity = portal.current_identity
    return SessionResponse(
        authenticated=identity is not None,
        account=AccountResponse.model_validate(identity) if identity is not None else None,
        pending_email=portal.pending_email(),
    )
