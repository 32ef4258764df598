from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.auth_dependency import RequestContext, get_request_context
from app.core.security import verify_password, create_access_token
from app.schemas.auth import SignupRequest, TokenResponse, IdentityResponse
from app.services.user_service import create_user, get_identity, get_user_by_email

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    user = create_user(db, name=payload.name, email=payload.email, password=payload.password)
    return {
        "message": "User created successfully",
        "user_id": user.id
    }


# OAuth2 form login so Swagger's "Authorize" works; username carries the email
@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    user = get_user_by_email(db, form_data.username.lower())

    if not user or not verify_password(form_data.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token({"sub": user.id, "email": user.email})
    return TokenResponse(access_token=token)


@router.get("/me", response_model=IdentityResponse)
def me(ctx: RequestContext = Depends(get_request_context)):
    return get_identity(ctx)
