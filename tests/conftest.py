"""Shared fixtures: an in-process HTTP site served through httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from web_fetch.agent.fetch_agent import FetchAgent
from web_fetch.config.loader import Config

BASE_URL = "http://testserver"

TEST_PAGE = """
<!DOCTYPE html>
<html>
  <head><title>Test Page</title></head>
  <body>
    <h1>Test Heading</h1>
    <div class="content">
      <p>This is a test paragraph.</p>
    </div>
  </body>
</html>
"""

MULTI_PAGE = """
<html><body>
  <section id="intro"><p>First</p></section>
  <ul>
    <li class="item">one</li>
    <li class="item">two</li>
    <li class="item">three</li>
  </ul>
</body></html>
"""

TEST_POST = {"id": 1, "title": "Test Post", "body": "This is a test post body"}

PNG_BYTES = bytes(range(256)) + b"\x89PNG\r\n\x1a\n\x00\xff"


async def stalled_body():
    """Body that sends one chunk after the headers, then stalls."""
    yield b"a"
    await asyncio.sleep(2)
    yield b"b"


async def site(request: httpx.Request) -> httpx.Response:
    path = request.url.path

    if path == "/":
        return httpx.Response(200, headers={"Content-Type": "text/html"}, content=TEST_PAGE.encode())
    if path == "/multi":
        return httpx.Response(
            200, headers={"Content-Type": "text/html; charset=utf-8"}, content=MULTI_PAGE.encode()
        )
    if path == "/json":
        return httpx.Response(
            200, headers={"Content-Type": "application/json"}, content=json.dumps(TEST_POST).encode()
        )
    if path == "/bad-json":
        return httpx.Response(200, headers={"Content-Type": "application/json"}, content=b"{not json")
    if path == "/binary":
        return httpx.Response(200, headers={"Content-Type": "image/png"}, content=PNG_BYTES)
    if path == "/latin1":
        return httpx.Response(
            200,
            headers={"Content-Type": "text/plain; charset=iso-8859-1"},
            content="café".encode("iso-8859-1"),
        )
    if path == "/redirect":
        return httpx.Response(302, headers={"Location": "/"})
    if path == "/status":
        return httpx.Response(200, content=b"OK")
    if path == "/cookies":
        return httpx.Response(
            200,
            headers=[("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")],
            content=b"",
        )
    if path == "/gone":
        return httpx.Response(404, headers={"Content-Type": "text/html"}, content=TEST_PAGE.encode())
    if path == "/echo":
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "headers": dict(request.headers),
                "body": request.content.decode("utf-8"),
            },
        )
    if path == "/slow":
        await asyncio.sleep(2)
        return httpx.Response(200, content=b"late")
    if path == "/slow-body":
        return httpx.Response(200, content=stalled_body())
    if path == "/error":
        raise httpx.ReadError("Connection reset by peer", request=request)
    return httpx.Response(404, content=b"Not Found")


@pytest.fixture
def transport():
    return httpx.MockTransport(site)


@pytest.fixture
def agent(transport):
    return FetchAgent(Config(), transport=transport)


def run(coro):
    return asyncio.run(coro)


def call_tool(agent, name, arguments):
    """Invoke a tool and return (is_error, payload); payload is parsed JSON on success."""
    envelope = run(agent.call(name, arguments))
    if envelope.is_error:
        return True, envelope.text
    return False, json.loads(envelope.text)
