import json

import pytest
import responses

from build_client import APIError, CodeRevisionLong
from tests.conftest import API_URL


def test_list_revisions(client, mocked):
    mocked.add(responses.GET, f"{API_URL}/models/m1/revisions", json={
        "success": True,
        "revisions": [
            {"version": 1, "created_at": "2014-01-01T00:00:00Z", "release_notes": "first"},
            {"version": 2, "created_at": "2014-01-02T00:00:00Z", "release_notes": ""},
        ],
    })

    revisions = client.list_revisions("m1")

    assert [r.version for r in revisions] == [1, 2]
    assert revisions[0].release_notes == "first"


def test_get_revision(client, mocked):
    mocked.add(responses.GET, f"{API_URL}/models/m1/revisions/2", json={
        "success": True,
        "revision": {
            "version": 2,
            "created_at": "2014-01-02T00:00:00Z",
            "device_code": "server.log(\"hi\");",
            "agent_code": "",
        },
    })

    revision = client.get_revision("m1", 2)

    assert revision.version == 2
    assert revision.device_code == "server.log(\"hi\");"


def test_update_revision_posts_code(client, mocked):
    mocked.add(responses.POST, f"{API_URL}/models/m1/revisions", json={
        "success": True,
        "revision": {"version": 3, "created_at": "2014-01-03T00:00:00Z"},
    })

    revision = client.update_revision(
        "m1", CodeRevisionLong(device_code="imp.sleep(1);", agent_code="")
    )

    assert revision.version == 3
    assert json.loads(mocked.calls[0].request.body) == {
        "device_code": "imp.sleep(1);",
        "agent_code": "",
    }


def test_update_revision_compile_errors(client, mocked):
    mocked.add(responses.POST, f"{API_URL}/models/m1/revisions", json={
        "success": False,
        "error": {
            "code": "CompileFailed",
            "message_short": "Compilation failed",
            "message_full": "Device code did not compile",
            "details": {
                "device_errors": [{"row": 4, "column": 12, "error": "expected ';'"}],
                "agent_errors": [],
            },
        },
    })

    with pytest.raises(APIError) as excinfo:
        client.update_revision("m1", CodeRevisionLong(device_code="bad code"))

    assert excinfo.value.message_short == "Compilation failed"
    assert excinfo.value.diagnostics == [("device", 4, 12, "expected ';'")]
