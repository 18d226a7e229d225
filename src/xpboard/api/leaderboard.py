# src/xpboard/api/leaderboard.py

"""API endpoint serving leaderboard render snapshots."""

from fastapi import APIRouter, Depends, Header

from xpboard import config
from xpboard.clients.friends_api import FriendsAPIClient
from xpboard.exceptions import ConfigurationError
from xpboard.schemas.leaderboard import LeaderboardSnapshot, ViewerProfile
from xpboard.services.leaderboard_view import LeaderboardSource, LeaderboardView

# - prefix="/leaderboard": All routes here will be prefixed with /leaderboard
# - tags=["Leaderboard"]: Groups these endpoints under "Leaderboard" in the API docs
router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


def get_viewer(
    viewer_id: str | None = Header(None, alias="X-Viewer-Id"),
    name: str | None = Header(None, alias="X-Viewer-Name"),
    email: str | None = Header(None, alias="X-Viewer-Email"),
    level: int | None = Header(None, alias="X-Viewer-Level", ge=0),
    xp: int | None = Header(None, alias="X-Viewer-Xp", ge=0),
    tasks: int | None = Header(None, alias="X-Viewer-Tasks", ge=0),
    avatar: str | None = Header(None, alias="X-Viewer-Avatar"),
) -> ViewerProfile | None:
    """
    Viewer profile forwarded by the authenticating proxy.

    Returns None when no viewer header is present at all.
    """
    fields = {
        "id": viewer_id,
        "name": name,
        "email": email,
        "level": level,
        "xp": xp,
        "total_tasks_completed": tasks,
        "avatar": avatar,
    }
    if all(value is None for value in fields.values()):
        return None
    return ViewerProfile(**fields)


def get_leaderboard_source(
    authorization: str | None = Header(None),
) -> LeaderboardSource:
    """FastAPI dependency providing the upstream leaderboard client."""
    if not config.FRIENDS_API_URL:
        raise ConfigurationError("FRIENDS_API_URL")
    return FriendsAPIClient(
        config.FRIENDS_API_URL,
        authorization=authorization,
        timeout=config.FRIENDS_API_TIMEOUT,
        path=config.FRIENDS_LEADERBOARD_PATH,
    )


@router.get("", response_model=LeaderboardSnapshot)
async def read_leaderboard(
    viewer: ViewerProfile | None = Depends(get_viewer),
    source: LeaderboardSource = Depends(get_leaderboard_source),
) -> LeaderboardSnapshot:
    """
    Load the friends leaderboard for the requesting viewer.

    Always answers 200: when upstream ranking data is unavailable the
    snapshot has status ``loaded_with_fallback``, an ``error`` message and
    the viewer alone at rank 1.
    """
    view = LeaderboardView(source, viewer=viewer)
    return await view.activate()
