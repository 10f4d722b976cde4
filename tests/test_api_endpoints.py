"""Integration tests for the document and processing endpoints."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

ENDPOINT = "https://hooks.example.com/webhook/translate-formal"


@pytest.fixture
def mock_webhook():
    """WebhookClient double that echoes its input."""
    from services.webhook_client import WebhookClient

    client = Mock(spec=WebhookClient)
    client.transform.side_effect = lambda endpoint, text: text
    return client


@pytest.fixture
def client(mock_webhook):
    """Create a test client with a session backed by the mocked webhook."""
    # Import after path is set
    import main
    from models.document import EditorDocument
    from services.editor_session import EditorSession
    from services.webhook_processor import WebhookProcessor

    # TestClient is not entered as a context manager, so startup does not run
    main.editor_session = EditorSession(
        document=EditorDocument(),
        processor=WebhookProcessor(client=mock_webhook),
        webhook_url=ENDPOINT
    )
    yield TestClient(main.app)
    main.editor_session = None


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["webhook_configured"] is True


def test_put_and_get_document(client):
    response = client.put("/document", json={"content": "<p>Hello there</p><p>General Kenobi</p>"})

    assert response.status_code == 200
    assert response.json() == {
        "content": "<p>Hello there</p><p>General Kenobi</p>",
        "plain_text": "Hello there\n\nGeneral Kenobi",
        "word_count": 4
    }
    assert client.get("/document").json()["word_count"] == 4


def test_process_document(client, mock_webhook):
    """Test processing replaces the document content with the webhook output."""
    mock_webhook.transform.side_effect = None
    mock_webhook.transform.return_value = "Good afternoon.\n\nKind regards"
    client.put("/document", json={"content": "<p>hey</p><p>cheers</p>"})

    response = client.post("/document/process", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "<p>Good afternoon.</p><p>Kind regards</p>"
    assert data["word_count"] == 4
    assert data["state"] == {
        "is_processing": False,
        "progress": 100,
        "current_chunk": 1,
        "total_chunks": 1,
        "error": None
    }
    assert client.get("/document").json()["content"] == data["content"]
    mock_webhook.transform.assert_called_once_with(ENDPOINT, "hey cheers")


def test_process_empty_document(client, mock_webhook):
    response = client.post("/document/process", json={})

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "EMPTY_DOCUMENT"
    mock_webhook.transform.assert_not_called()


def test_process_missing_endpoint(client, mock_webhook):
    client.put("/document", json={"content": "<p>text</p>"})

    response = client.post("/document/process", json={"webhook_url": ""})

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "MISSING_ENDPOINT"
    mock_webhook.transform.assert_not_called()


def test_process_webhook_failure(client, mock_webhook):
    """Test webhook failures map to 502 and leave the error in the progress state."""
    from services.errors import RemoteCallFailedError

    mock_webhook.transform.side_effect = RemoteCallFailedError(503)
    client.put("/document", json={"content": "<p>text</p>"})

    response = client.post("/document/process", json={})

    assert response.status_code == 502
    error = response.json()["detail"]["error"]
    assert error["code"] == "REMOTE_CALL_FAILED"
    assert error["message"] == "Webhook request failed: 503"
    assert error["details"]["status_code"] == 503

    progress = client.get("/progress").json()
    assert progress["is_processing"] is False
    assert progress["error"] == "Webhook request failed: 503"
    assert client.get("/document").json()["content"] == "<p>text</p>"


def test_process_in_progress_conflict(client):
    import main
    from services.errors import ProcessingInProgressError

    main.editor_session.processor = Mock()
    main.editor_session.processor.process.side_effect = ProcessingInProgressError()
    client.put("/document", json={"content": "<p>text</p>"})

    response = client.post("/document/process", json={})

    assert response.status_code == 409
    assert response.json()["detail"]["error"]["code"] == "PROCESSING_IN_PROGRESS"


def test_process_unexpected_error(client, mock_webhook):
    mock_webhook.transform.side_effect = RuntimeError("boom")
    client.put("/document", json={"content": "<p>text</p>"})

    response = client.post("/document/process", json={})

    assert response.status_code == 500
    assert "boom" in response.json()["detail"]


def test_process_raw_text(client, mock_webhook):
    response = client.post("/process", json={"text": "plain words here"})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "<p>plain words here</p>"
    assert data["word_count"] == 3
    assert client.get("/document").json()["content"] == ""


def test_process_raw_text_empty(client, mock_webhook):
    response = client.post("/process", json={"text": "   "})

    assert response.status_code == 200
    assert response.json()["content"] == ""
    mock_webhook.transform.assert_not_called()


def test_progress_and_reset(client, mock_webhook):
    client.post("/process", json={"text": "one two"})
    assert client.get("/progress").json()["progress"] == 100

    response = client.post("/progress/reset")

    assert response.status_code == 200
    assert response.json() == {
        "is_processing": False,
        "progress": 0,
        "current_chunk": 0,
        "total_chunks": 0,
        "error": None
    }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
