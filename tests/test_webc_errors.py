import pytest

from genaikit.webc.errors import ResponseFailedNotJson, ResponseFailedStatus, WebcError


def test_not_json():
    err = ResponseFailedNotJson("text/html")
    assert err.content_type == "text/html"
    assert str(err) == "Response content type 'text/html' is not JSON as expected."


def test_failed_status_known():
    err = ResponseFailedStatus(404, "nope")
    assert err.status == 404
    assert err.body == "nope"
    assert str(err) == "Request failed with status code '404 Not Found'. Response body:\nnope"


def test_failed_status_unknown_code():
    err = ResponseFailedStatus(599, "")
    assert "'599 <unknown status code>'" in str(err)


def test_hierarchy():
    err = ResponseFailedStatus(500, "down")
    assert isinstance(err, WebcError)
    assert str(err) == (
        "Request failed with status code '500 Internal Server Error'. Response body:\ndown"
    )
    with pytest.raises(WebcError, match="500 Internal Server Error") as info:
        raise err
    assert info.value.status == 500
    assert info.value.body == "down"

    not_json = ResponseFailedNotJson("text/plain")
    assert isinstance(not_json, WebcError)
    with pytest.raises(WebcError, match="text/plain"):
        raise not_json