"""Sign-up, log-in and log-out routes plus the current-user dependency."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from clubhouse.core.templates import templates
from clubhouse.models import User
from clubhouse.schemas.auth import ErrorsResponse, FieldError
from clubhouse.services.authentication import LocalStrategy
from clubhouse.services.registration import DuplicateAccountError, register_user
from clubhouse.services.sessions import SessionManager, get_session_manager
from clubhouse.services.user_store import UserStore, get_user_store
from clubhouse.services.validation import validate_sign_up

logger = logging.getLogger(__name__)
router = APIRouter()


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


def _errors_response(errors: list[FieldError]) -> JSONResponse:
    body = ErrorsResponse(errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def get_current_user_optional(
    request: Request,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> User | None:
    """Dependency: the logged-in user, or None for anonymous requests."""
    return sessions.current_user(request.session)


@router.get("/sign-up", response_class=HTMLResponse)
def sign_up_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "sign-up-form.html", {})


@router.post("/sign-up", response_model=None, responses={400: {"model": ErrorsResponse}})
def sign_up(
    store: Annotated[UserStore, Depends(get_user_store)],
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    username: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form(alias="confirm-password")] = "",
) -> RedirectResponse | JSONResponse:
    """
    Register a new account. Validation and duplicate errors return 400 with
    {"errors": [{"msg", "param"}]}; success redirects home without logging in.
    """
    result = validate_sign_up(
        {
            "first_name": first_name,
            "last_name": last_name,
            "username": username,
            "email": email,
            "password": password,
            "confirm-password": confirm_password,
        }
    )
    if not result.ok:
        logger.info(
            "Sign-up rejected: invalid fields %s",
            sorted({e.param for e in result.errors}),
        )
        return _errors_response(result.errors)

    try:
        register_user(store, result.data)
    except DuplicateAccountError as e:
        return _errors_response([FieldError(msg=e.message, param=e.field)])
    return _redirect_home()


@router.post("/log-in")
def log_in(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Authenticate and start a session; both outcomes redirect home."""
    result = LocalStrategy(store).authenticate(username, password)
    if not result.ok:
        logger.info("Log-in failed for username=%r: %s", username, result.message)
        return _redirect_home()
    sessions.log_in(request.session, result.user)
    return _redirect_home()


@router.get("/log-out")
def log_out(
    request: Request,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> RedirectResponse:
    sessions.log_out(request.session)
    return _redirect_home()
