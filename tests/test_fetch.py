import pytest
import requests

from aocsolver.fetch import (
    Date,
    Fetcher,
    InputError,
    InputNotFoundError,
    UnauthorizedError,
    input_url,
)

DATE = Date("2021", "25")


class FakeResponse:
    def __init__(self, status, body=b"", fail_read=False):
        self.status_code = status
        self._body = body
        self._fail = fail_read
        self.reason = "reason"

    @property
    def content(self):
        if self._fail:
            raise OSError("custom error")
        return self._body


class FakeClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, cookies=None, timeout=None):
        self.calls.append((url, cookies, timeout))
        if self.error:
            raise self.error
        return self.response


def test_ok():
    client = FakeClient(FakeResponse(200, b"test"))
    assert Fetcher(client, 5).fetch(DATE, "123") == b"test"
    url, cookies, timeout = client.calls[0]
    assert url == input_url(DATE)
    assert cookies == {"session": "123"}
    assert timeout == 5


def test_empty_body():
    with pytest.raises(InputError):
        Fetcher(FakeClient(FakeResponse(200, b"")), 5).fetch(DATE, "123")


def test_not_found():
    with pytest.raises(InputNotFoundError):
        Fetcher(FakeClient(FakeResponse(404)), 5).fetch(DATE, "123")


def test_bad_request_unauthorized():
    with pytest.raises(UnauthorizedError):
        Fetcher(FakeClient(FakeResponse(400, b"no session")), 5).fetch(DATE, "123")


def test_server_error():
    with pytest.raises(InputError) as info:
        Fetcher(FakeClient(FakeResponse(500, b"no session")), 5).fetch(DATE, "123")
    assert not isinstance(info.value, (UnauthorizedError, InputNotFoundError))


def test_send_error():
    client = FakeClient(error=requests.ConnectionError("error in test"))
    with pytest.raises(InputError):
        Fetcher(client, 5).fetch(DATE, "123")


def test_read_error():
    with pytest.raises(InputError):
        Fetcher(FakeClient(FakeResponse(200, fail_read=True)), 5).fetch(DATE, "123")


def test_date_and_url():
    assert str(DATE) == "2021/25"
    assert input_url(DATE) == "https://adventofcode.com/2021/day/25/input"