from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backoffice.core.errors import ApplicationError, error_response
from backoffice.db.models import User
from backoffice.schemas.authentication import CurrentUser, SignInBody, SignUpBody
from backoffice.schemas.common import ERROR_RESPONSES, ErrorBody, MessageBody
from backoffice.services.auth_service import AuthService
from backoffice.services.token_service import (
    REFRESH_COOKIE_NAME,
    clear_auth_cookies,
    require_user,
    set_access_cookie,
    set_auth_cookies,
)

router = APIRouter(prefix="/authentication", tags=["Authentication"], responses=ERROR_RESPONSES)
auth_service = AuthService()


@router.post(
    "/sign-up",
    status_code=201,
    response_model=MessageBody,
    responses={409: {"model": ErrorBody, "description": "Email já está em uso"}},
    summary="Cadastro de usuário",
)
def sign_up(payload: SignUpBody):
    result = auth_service.sign_up(payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return {"message": "Usuário criado com sucesso"}


@router.post("/sign-in", response_model=MessageBody, summary="Login de usuário")
def sign_in(payload: SignInBody):
    result = auth_service.sign_in(payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    response = JSONResponse({"message": "Login realizado com sucesso"})
    set_auth_cookies(response, result)
    return response


@router.post("/refresh", response_model=MessageBody, summary="Renovar token de acesso")
def refresh(request: Request):
    result = auth_service.refresh(request.cookies.get(REFRESH_COOKIE_NAME))
    if isinstance(result, ApplicationError):
        response = error_response(result)
        clear_auth_cookies(response)
        return response
    response = JSONResponse({"message": "Token renovado com sucesso"})
    set_access_cookie(response, result)
    return response


@router.post("/sign-out", response_model=MessageBody, summary="Logout")
def sign_out():
    response = JSONResponse({"message": "Logout realizado com sucesso"})
    clear_auth_cookies(response)
    return response


@router.get("/me", response_model=CurrentUser, summary="Usuário autenticado")
def me(user: User = Depends(require_user)):
    return CurrentUser.model_validate(user)
