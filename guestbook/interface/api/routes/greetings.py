"""Guestbook page and signing routes."""

import html
import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from guestbook.application.usecase.guestbook import (
    ListGreetingsUseCase,
    SignGuestbookUseCase,
)
from guestbook.application.usecase.guestbook.list_greetings import (
    GreetingInfo,
    ListGreetingsRequest,
)
from guestbook.application.usecase.guestbook.sign_guestbook import SignGuestbookRequest
from guestbook.config import AuthSettings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["guestbook"], route_class=DishkaRoute)

# Prefix the Google front-end proxy puts before the account email
PRINCIPAL_PREFIX = "accounts.google.com:"

PAGE_TEMPLATE = """<html>
  <head>
    <title>Guestbook</title>
  </head>
  <body>
    <a href="/oauth/login">Google Login</a>
{greetings}
    <form action="/sign" method="post">
      <div><textarea name="content" rows="3" cols="60"></textarea></div>
      <div><input type="submit" value="Sign Guestbook"></div>
    </form>
  </body>
</html>
"""


def current_principal(request: Request, header: str) -> str:
    """Signed-in user as reported by the fronting proxy, or "" if none."""
    principal = request.headers.get(header, "")
    if principal.startswith(PRINCIPAL_PREFIX):
        principal = principal[len(PRINCIPAL_PREFIX) :]
    return principal


def render_greeting(greeting: GreetingInfo) -> str:
    if greeting.anonymous:
        heading = "<p>An anonymous person wrote:</p>"
    else:
        heading = f"<p><b>{html.escape(greeting.author)}</b> wrote:</p>"
    return f"    {heading}\n    <pre>{html.escape(greeting.content)}</pre>"


@router.get("/", response_class=HTMLResponse)
async def root(use_case: FromDishka[ListGreetingsUseCase]) -> HTMLResponse:
    """Render the guestbook with the most recent greetings, newest first."""
    response = await use_case.execute(ListGreetingsRequest())
    body = "\n".join(render_greeting(g) for g in response.greetings)
    return HTMLResponse(PAGE_TEMPLATE.format(greetings=body))


@router.post("/sign")
async def sign(
    request: Request,
    use_case: FromDishka[SignGuestbookUseCase],
    auth_settings: FromDishka[AuthSettings],
    content: str = Form(""),
) -> RedirectResponse:
    """Sign the guestbook and go back to it.

    The author is the signed-in principal, or anonymous when the request
    carries no principal header.
    """
    author = current_principal(request, auth_settings.principal_header)
    logger.info(f"Signing guestbook (anonymous={not author})")

    await use_case.execute(SignGuestbookRequest(author=author, content=content))

    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
