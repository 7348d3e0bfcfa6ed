"""Integration tests for the /api/documents endpoints."""
import pytest
from fastapi.testclient import TestClient

from doc_analytics.application.api.main import CREATE_STATUS, app, document_service_dep


@pytest.fixture
def client(service):
    """Test client wired to a fresh in-memory service."""
    app.dependency_overrides[document_service_dep] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(client, sample_text):
    client.post("/api/documents/", json={"id": 1, "text": sample_text})
    client.post("/api/documents/", json={"id": 2, "text": "Odor of the leo. Second doc!"})
    return client


class TestRoot:

    def test_meta(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["store"] == "memory"


class TestCreateDocument:

    def test_create(self, client):
        response = client.post("/api/documents/", json={"id": 1, "text": "Hello."})

        assert response.status_code == 200
        assert response.json() == {"createStatus": CREATE_STATUS}

    @pytest.mark.parametrize("payload", [{"text": "no id"}, {"id": 1}, {"id": 1, "text": ""}, {"id": 1, "text": "  "}])
    def test_invalid_payload(self, client, payload):
        response = client.post("/api/documents/", json=payload)

        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "Error while creating the document!"}


class TestDocumentEndpoints:

    def test_get_round_trip(self, seeded, sample_text):
        response = seeded.get("/api/documents/1")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "text": sample_text}

    def test_get_missing(self, client):
        response = client.get("/api/documents/99")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Document not found!"}

    @pytest.mark.parametrize("suffix", ["normalized", "statistics", "top-words", "bigrams"])
    def test_per_document_missing(self, client, suffix):
        response = client.get(f"/api/documents/99/{suffix}")

        assert response.status_code == 404
        assert response.json()["code"] == 404

    def test_normalized(self, seeded, sample_text):
        response = seeded.get("/api/documents/2/normalized")

        assert response.json() == {"id": 2, "text": "odor leo second doc"}
        # stored text unchanged
        assert seeded.get("/api/documents/2").json()["text"] == "Odor of the leo. Second doc!"

    def test_statistics(self, seeded):
        response = seeded.get("/api/documents/2/statistics")

        assert response.status_code == 200
        assert response.json() == {
            "word_count": 4,
            "unique_word_count": 4,
            "avg_word_length": 4,
            "sentence_count": 2,
        }

    def test_top_words_keeps_ranking_order(self, seeded):
        response = seeded.get("/api/documents/1/top-words")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 10
        assert list(body.items())[:5] == [("leo", 5), ("внимание", 4), ("odor", 3), ("gravida", 2), ("conubia", 2)]

    def test_bigrams(self, seeded):
        response = seeded.get("/api/documents/2/bigrams")

        assert response.json() == {"odor leo": 1, "leo second": 1, "second doc": 1}


class TestCorpusEndpoints:

    def test_all_statistics_empty(self, client):
        response = client.get("/api/documents/statistics")

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "No documents found!"}

    def test_search_empty(self, client):
        response = client.get("/api/documents/search", params={"word": "leo"})

        assert response.status_code == 404
        assert response.json()["message"] == "No documents found!"

    def test_all_statistics(self, seeded):
        response = seeded.get("/api/documents/statistics")

        assert response.status_code == 200
        body = response.json()
        assert list(body)[0] == "documents_count"
        assert body["documents_count"] == 2
        assert body["word_count"] == 51
        assert body["sentence_count"] == 6

    def test_search(self, seeded):
        assert seeded.get("/api/documents/search", params={"word": "Leo"}).json() == [1, 2]
        assert seeded.get("/api/documents/search", params={"word": "second"}).json() == [2]
        assert seeded.get("/api/documents/search", params={"word": "absent"}).json() == []
