"""Tests for task API endpoints."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from fastapi import status
from fastapi.testclient import TestClient

from taskflow.infrastructure.task.sources import FileTaskSource, TaskSource


class TestGetTask:
    """Test suite for GET /task endpoint."""

    def test_get_task(self, client: TestClient) -> None:
        """Test the bundled task is served in camelCase."""
        response = client.get("/api/v1/task")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == "task-hotel-checkin"
        assert data["taskModelLanguage"] == "en"
        assert data["taskModel"]["physicalScene"].startswith("The front desk")
        assert len(data["phases"]) == 6

    def test_get_task_load_failure(
        self,
        client: TestClient,
        tmp_path: Path,
        use_task_source: Callable[[TaskSource], None],
    ) -> None:
        """Test a missing task file is reported as a bad gateway."""
        use_task_source(FileTaskSource(tmp_path / "missing.json"))

        response = client.get("/api/v1/task")

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert "file not found" in response.json()["detail"]

    def test_get_task_invalid_document(
        self, client: TestClient, use_task_document: Callable[[Any], None]
    ) -> None:
        """Test a structurally invalid document is rejected."""
        use_task_document({"id": "t1"})

        response = client.get("/api/v1/task")

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert "invalid task document" in response.json()["detail"]


class TestGetTaskFlow:
    """Test suite for GET /task/flow endpoint."""

    def test_get_flow(self, client: TestClient) -> None:
        """Test the flattened flow of the bundled task."""
        response = client.get("/api/v1/task/flow")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["task_id"] == "task-hotel-checkin"
        assert [item["phase_index"] for item in data["guidance_items"]] == [0, 2, 3, 4, 5]
        assert len(data["flow_items"]) == 18

    def test_flow_item_payloads(self, client: TestClient) -> None:
        """Test kind-specific fields of flow items."""
        items = client.get("/api/v1/task/flow").json()["flow_items"]

        first = items[0]
        assert first["kind"] == "question"
        assert first["step_type"] == "phase1_task_entry"
        assert first["label"] == "Phase 1 / Step 1 / Question 1"
        assert first["question"]["correctOptionIndexes"] == [0]
        assert first["question"]["options"][0]["imageAssetId"] == "img_front_desk"

        words = items[3:6]
        assert [item["item_index"] for item in words] == [1, 2, 2]
        assert {item["item_count"] for item in words} == {2}

        subtask = items[8]
        assert subtask["kind"] == "phase4_subtask"
        assert subtask["subtask"]["dialogueId"] == "d1"

        cloze = items[11]
        assert cloze["kind"] == "phase5_phrase_cloze"
        assert cloze["label"] == "Phrase p1 - Round 1 of 3"
        assert cloze["answer"] == "check in"

        roleplay = items[17]
        assert roleplay["kind"] == "phase6_roleplay"
        assert roleplay["roleplay"]["dialogueId"] == "d3"

    def test_empty_sentences_placeholder(
        self, client: TestClient, use_task_document: Callable[[Any], None]
    ) -> None:
        """Test an empty sentences step still yields one item."""
        use_task_document(
            {
                "version": "1",
                "id": "t2",
                "title": "Sentences",
                "taskModel": {},
                "phases": [
                    {
                        "type": "phase5",
                        "steps": [{"id": "s", "type": "phase5_sentences", "sentences": []}],
                    }
                ],
            }
        )

        response = client.get("/api/v1/task/flow")

        assert response.status_code == status.HTTP_200_OK
        items = response.json()["flow_items"]
        assert len(items) == 1
        assert items[0]["sentence"] == ""
        assert items[0]["sentence_index"] == 0
