import json

import pytest


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._text = text if text is not None else json.dumps(body)
        self.closed = False

    def json(self):
        return json.loads(self._text)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


def entity_search_body(*guids, query="domainId=123"):
    return {
        "data": {
            "actor": {
                "entitySearch": {
                    "count": len(guids),
                    "query": query,
                    "results": {
                        "entities": [
                            {"entityType": "APM_APPLICATION_ENTITY", "guid": guid, "name": f"app-{guid}"}
                            for guid in guids
                        ]
                    },
                }
            }
        }
    }


@pytest.fixture
def fake_post(monkeypatch):
    """Replace requests.post; set .response or .exc before the call."""
    class Recorder:
        response = FakeResponse(body=entity_search_body("G1"))
        exc = None
        calls = []

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.exc is not None:
                raise self.exc
            return self.response

    recorder = Recorder()
    recorder.calls = []
    monkeypatch.setattr("newrelic_app_guid.client.requests.post", recorder)
    return recorder
