"""
Pytest configuration and shared fixtures

The fake cluster keeps index and document state in memory and raises the
same opensearch-py exceptions a real cluster would trigger.
"""
import pytest
from opensearchpy.exceptions import ConflictError, NotFoundError, RequestError

from opensearch_exercise.client import OpenSearchClient
from opensearch_exercise.config import ConnectionConfig


def _error_body(error_type: str, reason: str, status: int) -> dict:
    cause = {"type": error_type, "reason": reason}
    return {"error": {"root_cause": [cause], **cause}, "status": status}


class FakeCluster:
    """In-memory index -> {doc_id: source} store."""

    def __init__(self):
        self.indices = {}
        self.calls = []


class FakeIndicesClient:
    def __init__(self, cluster: FakeCluster):
        self.cluster = cluster

    def create(self, index, body=None, **params):
        self.cluster.calls.append(("indices.create", index))
        if index in self.cluster.indices:
            reason = f"index [{index}/abc123] already exists"
            raise RequestError(
                400,
                "resource_already_exists_exception",
                _error_body("resource_already_exists_exception", reason, 400),
            )
        self.cluster.indices[index] = {}
        return {"acknowledged": True, "shards_acknowledged": True, "index": index}

    def delete(self, index, ignore_unavailable=False, **params):
        self.cluster.calls.append(("indices.delete", index))
        if index not in self.cluster.indices:
            if ignore_unavailable:
                return {"acknowledged": True}
            raise NotFoundError(
                404,
                "index_not_found_exception",
                _error_body("index_not_found_exception", f"no such index [{index}]", 404),
            )
        del self.cluster.indices[index]
        return {"acknowledged": True}


class FakeOpenSearch:
    """Stands in for opensearchpy.OpenSearch in tests."""

    def __init__(self, cluster: FakeCluster, **config):
        self.cluster = cluster
        self.config = config
        self.indices = FakeIndicesClient(cluster)
        self.closed = False

    def ping(self):
        return True

    def info(self):
        return {"cluster_name": "fake", "version": {"number": "2.11.0"}}

    def create(self, index, id, body, **params):
        self.cluster.calls.append(("create", index, id))
        docs = self.cluster.indices.setdefault(index, {})
        if id in docs:
            reason = f"[{id}]: version conflict, document already exists (current version [1])"
            raise ConflictError(
                409,
                "version_conflict_engine_exception",
                _error_body("version_conflict_engine_exception", reason, 409),
            )
        docs[id] = body
        return {"_index": index, "_id": id, "_version": 1, "result": "created"}

    def delete(self, index, id, **params):
        self.cluster.calls.append(("delete", index, id))
        docs = self.cluster.indices.get(index, {})
        if id not in docs:
            raise NotFoundError(
                404,
                "not_found",
                {"_index": index, "_id": id, "_version": 1, "result": "not_found"},
            )
        del docs[id]
        return {"_index": index, "_id": id, "_version": 2, "result": "deleted"}

    def close(self):
        self.closed = True


@pytest.fixture
def fake_cluster():
    """Fresh, empty cluster state."""
    return FakeCluster()


@pytest.fixture
def fake_opensearch(monkeypatch, fake_cluster):
    """Patch OpenSearch construction; returns the list of created fakes."""
    created = []

    def factory(**config):
        instance = FakeOpenSearch(fake_cluster, **config)
        created.append(instance)
        return instance

    monkeypatch.setattr("opensearch_exercise.client.OpenSearch", factory)
    return created


@pytest.fixture
def client(fake_opensearch):
    """OpenSearchClient wired to the fake cluster."""
    return OpenSearchClient(ConnectionConfig(password="secret"))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every OPENSEARCH_* variable the config reads."""
    for name in (
        "OPENSEARCH_INITIAL_ADMIN_PASSWORD",
        "OPENSEARCH_URL",
        "OPENSEARCH_USERNAME",
        "OPENSEARCH_VERIFY_CERTS",
        "OPENSEARCH_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
