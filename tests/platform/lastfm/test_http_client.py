"""Tests for the requests-based transport."""

from __future__ import annotations

import pytest
import requests
from pytest_mock import MockerFixture

from audioscrobbler.errors import TransportError
from audioscrobbler.platform.lastfm.http_client import RequestsTransport
from audioscrobbler.platform.lastfm.user_agent import DEFAULT_USER_AGENT, format_user_agent

URL = "https://ws.example.test/2.0/"


def _response(mocker: MockerFixture, status: int, text: str) -> object:
    response = mocker.Mock()
    response.status_code = status
    response.headers = {"Content-Type": "text/xml; charset=utf-8"}
    response.text = text
    return response


def test_send_posts_form_body_and_returns_text(mocker: MockerFixture) -> None:
    post = mocker.patch(
        "audioscrobbler.platform.lastfm.http_client.requests.post",
        return_value=_response(mocker, 200, "<lfm status='ok'/>"),
    )

    body = RequestsTransport().send(URL, {"api_key": "k", "method": "artist.getInfo"})

    assert body == "<lfm status='ok'/>"
    post.assert_called_once_with(
        URL,
        data={"api_key": "k", "method": "artist.getInfo"},
        headers={"User-Agent": DEFAULT_USER_AGENT},
        timeout=(5.0, 30.0),
    )


def test_non_2xx_raises_transport_error_with_body(mocker: MockerFixture) -> None:
    error_body = "<lfm status='failed'><error code='10'>Invalid API key</error></lfm>"
    _ = mocker.patch(
        "audioscrobbler.platform.lastfm.http_client.requests.post",
        return_value=_response(mocker, 403, error_body),
    )

    with pytest.raises(TransportError) as excinfo:
        _ = RequestsTransport().send(URL, {})

    assert excinfo.value.status == 403
    assert excinfo.value.body == error_body


def test_network_failure_raises_transport_error(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "audioscrobbler.platform.lastfm.http_client.requests.post",
        side_effect=requests.ConnectionError("connection refused"),
    )

    with pytest.raises(TransportError, match="connection refused") as excinfo:
        _ = RequestsTransport().send(URL, {})

    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_session_is_used_when_given(mocker: MockerFixture) -> None:
    session = mocker.create_autospec(requests.Session, instance=True)
    session.post.return_value = _response(mocker, 200, "<lfm/>")

    transport = RequestsTransport(session=session, timeout=(1.0, 2.0), user_agent="ua/1")

    assert transport.send(URL, {"a": "b"}) == "<lfm/>"
    session.post.assert_called_once_with(
        URL, data={"a": "b"}, headers={"User-Agent": "ua/1"}, timeout=(1.0, 2.0)
    )


def test_missing_charset_decodes_body_as_utf8(mocker: MockerFixture) -> None:
    response = requests.Response()
    response.status_code = 200
    response.headers["Content-Type"] = "text/xml"
    response.encoding = "ISO-8859-1"
    response._content = "<name>Bj\u00f6rk</name>".encode()  # pyright: ignore[reportPrivateUsage]
    _ = mocker.patch(
        "audioscrobbler.platform.lastfm.http_client.requests.post",
        return_value=response,
    )

    body = RequestsTransport().send(URL, {})

    assert body == "<name>Bj\u00f6rk</name>"


def test_declared_charset_is_respected(mocker: MockerFixture) -> None:
    response = requests.Response()
    response.status_code = 200
    response.headers["Content-Type"] = "text/xml; charset=ISO-8859-1"
    response.encoding = "ISO-8859-1"
    response._content = "<name>Bj\u00f6rk</name>".encode("latin-1")  # pyright: ignore[reportPrivateUsage]
    _ = mocker.patch(
        "audioscrobbler.platform.lastfm.http_client.requests.post",
        return_value=response,
    )

    assert RequestsTransport().send(URL, {}) == "<name>Bj\u00f6rk</name>"


def test_format_user_agent() -> None:
    assert format_user_agent("app", "1.2.3", "mailto:me@example.com") == "app/1.2.3 (mailto:me@example.com)"
    assert format_user_agent("app", "1.2.3") == "app/1.2.3"
    assert DEFAULT_USER_AGENT.startswith("audioscrobbler/")
