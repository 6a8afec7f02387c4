"""
Blog post endpoints.

CRUD over the post store.  Bodies are validated by the ``PostCreate``
and ``PostUpdate`` schemas before a handler runs; a path id that is
not plain ASCII digits within uint64 range is rejected with 400.  An unknown id
surfaces from the service as ``NotFoundError`` and becomes 404.

Handlers are plain ``def`` functions so FastAPI runs them in its
worker thread pool; the store's lock is the only synchronisation.
"""

from fastapi import APIRouter, Depends, Response, status

from blog_api_gateway.app.api.deps import error_responses, get_post_service, post_id_path
from blog_api_gateway.app.schemas.post import Post, PostCreate, PostId, PostList, PostUpdate
from blog_api_gateway.app.services.post_service import PostService

router = APIRouter()


@router.get("", response_model=PostList, responses=error_responses(500))
def list_posts(service: PostService = Depends(get_post_service)) -> PostList:
    """Return every post as ``{"posts": [...]}``."""
    return PostList(posts=service.list_posts())


@router.get("/{post_id}", response_model=Post, responses=error_responses(400, 404, 500))
def get_post(
    post_id: int = Depends(post_id_path),
    service: PostService = Depends(get_post_service),
) -> Post:
    """Retrieve a single post by its ID."""
    return service.get_post(post_id)


@router.post("", response_model=PostId, responses=error_responses(400, 500))
def create_post(
    post_in: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostId:
    """Create a post and return the id assigned by the store.

    Any ``id`` in the body is ignored.
    """
    return PostId(id=service.create_post(post_in.to_record()))


@router.put("", response_model=PostId, responses=error_responses(400, 404, 500))
def update_post(
    post_in: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostId:
    """Replace the title, author and content of the post addressed by ``id``.

    This is a full replace: omitted optional fields are reset to
    their defaults.
    """
    post = post_in.to_record()
    service.update_post(post)
    return PostId(id=post.id)


@router.delete("/{post_id}", responses=error_responses(400, 404, 500))
def delete_post(
    post_id: int = Depends(post_id_path),
    service: PostService = Depends(get_post_service),
) -> Response:
    """Delete a post.  Responds 200 with an empty body."""
    service.delete_post(post_id)
    return Response(status_code=status.HTTP_200_OK)
