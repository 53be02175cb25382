"""HTTP routes."""

from fastapi import APIRouter

from clubhouse.api import auth, home

router = APIRouter()
router.include_router(home.router, tags=["home"])
router.include_router(auth.router, tags=["auth"])
