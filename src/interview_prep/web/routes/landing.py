"""Landing page endpoint."""

from fastapi import APIRouter, Depends

from interview_prep.core.auth import AuthSession
from interview_prep.core.landing import LandingView
from interview_prep.web.dependencies import optional_session, page_fields
from interview_prep.web.schemas import (
    ActionResponse,
    FeatureResponse,
    LandingResponse,
)

router = APIRouter(tags=["pages"])


@router.get("/", response_model=LandingResponse)
async def landing(
    session: AuthSession | None = Depends(optional_session),
) -> LandingResponse:
    """Render the landing page; the call-to-action depends on the session."""
    view = LandingView(session)
    page = view.render()

    signup_prompt = None
    if page.signup_prompt is not None:
        signup_prompt = ActionResponse(**page.signup_prompt.to_dict())

    return LandingResponse(
        headline=page.headline,
        tagline=page.tagline,
        signed_in=page.signed_in,
        features=[FeatureResponse(**f) for f in page.features],
        actions=[ActionResponse(**a.to_dict()) for a in page.actions],
        signup_prompt=signup_prompt,
        **page_fields(view),
    )
