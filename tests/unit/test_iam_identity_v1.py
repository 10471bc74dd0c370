from concurrent.futures import Future

import pytest

from ibm_platform_services import IamIdentityV1
from ibm_platform_services.core.exceptions import MissingParametersError


@pytest.fixture()
def iam(make_service):
    return make_service(IamIdentityV1, service_url="https://iam.example.com")


@pytest.mark.parametrize(
    "method_name, params, http_method, url, accept",
    [
        ("list_api_keys", {}, "GET", "/v1/apikeys", "application/json"),
        ("create_api_key", {"name": "k", "iam_id": "iam-1"}, "POST", "/v1/apikeys", "application/json"),
        ("get_api_key_details", {}, "GET", "/v1/apikeys/details", "application/json"),
        ("get_api_key", {"id": "k1"}, "GET", "/v1/apikeys/k1", "application/json"),
        ("update_api_key", {"id": "k1", "if_match": "*"}, "PUT", "/v1/apikeys/k1", "application/json"),
        ("delete_api_key", {"id": "k1"}, "DELETE", "/v1/apikeys/k1", None),
        ("lock_api_key", {"id": "k1"}, "POST", "/v1/apikeys/k1/lock", None),
        ("unlock_api_key", {"id": "k1"}, "DELETE", "/v1/apikeys/k1/lock", None),
        ("list_service_ids", {}, "GET", "/v1/serviceids", "application/json"),
        ("create_service_id", {"account_id": "a", "name": "n"}, "POST", "/v1/serviceids", "application/json"),
        ("get_service_id", {"id": "s1"}, "GET", "/v1/serviceids/s1", "application/json"),
        ("update_service_id", {"id": "s1", "if_match": "2"}, "PUT", "/v1/serviceids/s1", "application/json"),
        ("delete_service_id", {"id": "s1"}, "DELETE", "/v1/serviceids/s1", None),
        ("lock_service_id", {"id": "s1"}, "POST", "/v1/serviceids/s1/lock", "application/json"),
        ("unlock_service_id", {"id": "s1"}, "DELETE", "/v1/serviceids/s1/lock", "application/json"),
    ],
)
def test_request_shape(iam, sent_request, method_name, params, http_method, url, accept):
    result = getattr(iam, method_name)(params)

    assert isinstance(result, Future)
    request = sent_request(iam)
    assert request.method == http_method
    assert request.url == url
    assert request.headers.get("Accept") == accept
    assert request.headers["X-IBMCloud-SDK-Analytics"].endswith(f"operation_id={method_name}")


@pytest.mark.parametrize(
    "method_name, missing",
    [
        ("create_api_key", ["name", "iam_id"]),
        ("get_api_key", ["id"]),
        ("update_api_key", ["id", "if_match"]),
        ("delete_api_key", ["id"]),
        ("lock_api_key", ["id"]),
        ("unlock_api_key", ["id"]),
        ("create_service_id", ["account_id", "name"]),
        ("get_service_id", ["id"]),
        ("update_service_id", ["id", "if_match"]),
        ("delete_service_id", ["id"]),
        ("lock_service_id", ["id"]),
        ("unlock_service_id", ["id"]),
    ],
)
def test_required_parameters_enforced(iam, method_name, missing):
    future = getattr(iam, method_name)()

    with pytest.raises(MissingParametersError) as exc:
        future.result()
    assert exc.value.missing == missing
    assert "Missing required parameters" in str(exc.value)
    iam.client.send.assert_not_called()


def test_get_api_key(iam, sent_request):
    iam.get_api_key(id="abc123")

    request = sent_request(iam)
    assert request.method == "GET"
    assert request.url == "/v1/apikeys/abc123"
    assert request.json is None
    assert request.headers["Accept"] == "application/json"


def test_update_api_key_keeps_empty_name(iam, sent_request):
    iam.update_api_key({"id": "abc123", "if_match": "*", "name": ""})

    request = sent_request(iam)
    assert request.method == "PUT"
    assert request.url == "/v1/apikeys/abc123"
    assert request.headers["If-Match"] == "*"
    assert request.headers["Content-Type"] == "application/json"
    assert request.json == {"name": ""}


def test_update_api_key_partial_failure_lists_remaining_field(iam):
    future = iam.update_api_key(id="abc123")
    with pytest.raises(MissingParametersError, match="if_match"):
        future.result()


def test_list_api_keys_query(iam, sent_request):
    iam.list_api_keys(account_id="acc", iam_id="iam-1", pagesize="10", pagetoken=None)

    assert sent_request(iam).params == {"account_id": "acc", "iam_id": "iam-1", "pagesize": "10"}


def test_create_api_key_body_and_lock_header(iam, sent_request):
    iam.create_api_key(
        name="build-key",
        iam_id="iam-ServiceId-123",
        description="CI",
        account_id="acc",
        apikey="raw-value",
        entity_lock="true",
    )

    request = sent_request(iam)
    assert request.json == {
        "name": "build-key",
        "iam_id": "iam-ServiceId-123",
        "description": "CI",
        "account_id": "acc",
        "apikey": "raw-value",
    }
    assert request.headers["Entity-Lock"] == "true"
    assert "entity_lock" not in request.json


def test_create_api_key_without_lock_omits_header(iam, sent_request):
    iam.create_api_key(name="k", iam_id="iam-1")
    assert "Entity-Lock" not in sent_request(iam).headers


def test_get_api_key_details_sends_apikey_header(iam, sent_request):
    iam.get_api_key_details(iam_api_key="secret-value")

    request = sent_request(iam)
    assert request.headers["IAM-ApiKey"] == "secret-value"
    assert request.params == {}


def test_list_service_ids_query(iam, sent_request):
    iam.list_service_ids(account_id="acc", name="svc", sort="name", order="desc")

    assert sent_request(iam).params == {"account_id": "acc", "name": "svc", "sort": "name", "order": "desc"}


def test_create_service_id_with_nested_apikey(iam, sent_request):
    apikey = {"name": "key", "iam_id": "iam-1", "description": "d"}
    iam.create_service_id(account_id="acc", name="svc", unique_instance_crns=["crn:v1:a"], apikey=apikey)

    assert sent_request(iam).json == {
        "account_id": "acc",
        "name": "svc",
        "unique_instance_crns": ["crn:v1:a"],
        "apikey": apikey,
    }


def test_update_service_id_empty_crn_list_clears(iam, sent_request):
    iam.update_service_id(id="s1", if_match="3", unique_instance_crns=[], description="")

    request = sent_request(iam)
    assert request.json == {"description": "", "unique_instance_crns": []}
    assert request.headers["If-Match"] == "3"


def test_user_headers_take_priority(iam, sent_request):
    iam.update_api_key(
        id="k1",
        if_match="1",
        headers={"Accept": "fake/accept", "Content-Type": "fake/contentType", "If-Match": "override"},
    )

    headers = sent_request(iam).headers
    assert headers["Accept"] == "fake/accept"
    assert headers["Content-Type"] == "fake/contentType"
    assert headers["If-Match"] == "override"


def test_path_values_escaped(iam, sent_request):
    iam.get_service_id(id="ServiceId-1/../2")
    assert sent_request(iam).url == "/v1/serviceids/ServiceId-1%2F..%2F2"


def test_transport_result_returned_unchanged(iam):
    sentinel = Future()
    iam.client.send.side_effect = None
    iam.client.send.return_value = sentinel

    assert iam.get_api_key(id="k1") is sentinel


def test_transport_failure_propagates(iam):
    failure = RuntimeError("boom")
    failed = Future()
    failed.set_exception(failure)
    iam.client.send.side_effect = None
    iam.client.send.return_value = failed

    with pytest.raises(RuntimeError) as exc:
        iam.get_api_key(id="k1").result()
    assert exc.value is failure
