"""HTTP endpoints for posts.

Thin adapters over ``posts_api.services.posts``: the raw request body is
handed to the service untouched so malformed JSON gets the same 400 as in
the event handlers, and the service's status code is returned as is.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from posts_api.services import posts
from posts_api.services.responses import ServiceResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _json(response: ServiceResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.payload)


@router.post("", status_code=201)
async def create_post(request: Request) -> JSONResponse:
    """Create a post from the JSON body."""
    return _json(posts.create_post(await request.body()))


@router.get("", status_code=200)
async def list_posts() -> JSONResponse:
    """Return every post, newest first."""
    return _json(posts.list_posts())


@router.get("/latest/{number}", status_code=200)
async def list_recent_posts(number: str) -> JSONResponse:
    """Return the *number* most recent posts."""
    return _json(posts.list_recent_posts(number))


@router.get("/{post_id}", status_code=200)
async def get_post(post_id: str) -> JSONResponse:
    return _json(posts.get_post(post_id))


@router.put("/{post_id}", status_code=200)
async def update_post(post_id: str, request: Request) -> JSONResponse:
    """Replace title and body of an existing post."""
    return _json(posts.update_post(post_id, await request.body()))


@router.delete("/{post_id}", status_code=200)
async def delete_post(post_id: str) -> JSONResponse:
    return _json(posts.delete_post(post_id))
