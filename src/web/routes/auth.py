"""
Routes d'authentification.

Inscription et connexion par mot de passe, connexion Google,
validation d'un jeton existant (restauration de session du front-end).
"""

from fastapi import APIRouter

from ..deps import AuthServiceDep, BearerToken
from ..schemas import (
    AuthResponse,
    GoogleLoginRequest,
    LoginRequest,
    RegisterRequest,
    ValidateResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register(body: RegisterRequest, auth: AuthServiceDep):
    result = await auth.register(body.username, body.password, email=body.email)
    return result.to_dict()


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, auth: AuthServiceDep):
    result = await auth.login(body.username, body.password)
    return result.to_dict()


@router.post("/google", response_model=AuthResponse)
async def google_login(body: GoogleLoginRequest, auth: AuthServiceDep):
    """Échange un ID token Google Sign-In contre un jeton de l'application."""
    result = await auth.google_login(body.credential)
    return result.to_dict()


@router.get("/validate", response_model=ValidateResponse)
async def validate(token: BearerToken, auth: AuthServiceDep):
    user = await auth.validate(token)
    return {"user": user.to_public()}
