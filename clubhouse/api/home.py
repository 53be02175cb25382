"""Home page: shows the log-in form or greets the current user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from clubhouse.api.auth import get_current_user_optional
from clubhouse.core.templates import templates
from clubhouse.models import User
from clubhouse.schemas.auth import CurrentUser

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    user: Annotated[User | None, Depends(get_current_user_optional)],
) -> HTMLResponse:
    principal = CurrentUser.model_validate(user) if user is not None else None
    return templates.TemplateResponse(request, "index.html", {"user": principal})
