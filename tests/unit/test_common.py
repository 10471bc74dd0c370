from ibm_platform_services import common
from ibm_platform_services.version import __version__


def test_sdk_headers_identify_operation():
    headers = common.get_sdk_headers("case_management", "v1", "get_case")

    assert headers["X-IBMCloud-SDK-Analytics"] == "service_name=case_management;service_version=v1;operation_id=get_case"
    assert headers["User-Agent"].startswith(f"platform-services-python-sdk/{__version__} (lang=python;")


def test_user_agent_is_stable():
    assert common.get_user_agent() == common.get_user_agent()
