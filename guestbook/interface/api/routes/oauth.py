"""OAuth login routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from guestbook.application.usecase.auth import BeginLoginUseCase, CompleteLoginUseCase
from guestbook.application.usecase.auth.begin_login import BeginLoginRequest
from guestbook.application.usecase.auth.complete_login import (
    CompleteLoginRequest,
    CompleteLoginResponse,
)
from guestbook.domain.error import ExchangeFailureError, SetupFailureError
from guestbook.domain.value import RequestOrigin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["authentication"], route_class=DishkaRoute)


def request_origin(request: Request) -> RequestOrigin:
    """Capture where the request was addressed to.

    Honors the X-Forwarded-Scheme and X-Server-Port headers set by a
    fronting proxy.
    """
    return RequestOrigin(
        scheme=request.url.scheme,
        host=request.headers.get("host", request.url.netloc),
        forwarded_scheme=request.headers.get("x-forwarded-scheme"),
        server_port=request.headers.get("x-server-port"),
    )


@router.get("/login")
async def login(
    request: Request,
    use_case: FromDishka[BeginLoginUseCase],
) -> RedirectResponse:
    """Start the Google login flow.

    Redirects the browser to Google's consent page. The callback URL given
    to Google is derived from this request's scheme and host.

    Raises:
        HTTPException: 500 if the provider client cannot be set up
    """
    try:
        response = await use_case.execute(
            BeginLoginRequest(origin=request_origin(request))
        )
    except SetupFailureError as e:
        logger.error(f"Login setup failed at {e.state.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return RedirectResponse(
        url=response.authorization_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/callback", response_model=CompleteLoginResponse)
async def callback(
    request: Request,
    use_case: FromDishka[CompleteLoginUseCase],
) -> CompleteLoginResponse:
    """Handle the redirect back from Google.

    Exchanges the authorization code, fetches the profile and stores the
    identity. The whole query string is handed to the provider client.

    Returns:
        The resolved identity

    Raises:
        HTTPException: 500 with the failure message if any step fails
    """
    try:
        return await use_case.execute(
            CompleteLoginRequest(
                origin=request_origin(request),
                params=dict(request.query_params),
            )
        )
    except (SetupFailureError, ExchangeFailureError) as e:
        logger.error(f"Login callback failed at {e.state.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
