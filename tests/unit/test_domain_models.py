"""Unit tests for task and index domain models."""

import pytest
from pydantic import ValidationError

from src.domain.models.index import DEFAULT_INDEX_MODELS, IndexModelSpec, ModelOption
from src.domain.models.task import TaskStatus


class TestTaskStatus:
    """Tests for TaskStatus enum."""

    def test_values(self):
        assert {s.value for s in TaskStatus} == {
            "ready",
            "uploading",
            "validating",
            "pending",
            "queued",
            "indexing",
            "failed",
        }

    def test_deletable_statuses(self):
        assert TaskStatus.deletable() == {TaskStatus.READY, TaskStatus.FAILED}

    @pytest.mark.parametrize("status", ["ready", "failed"])
    def test_is_deletable(self, status):
        assert TaskStatus.is_deletable(status) is True

    @pytest.mark.parametrize(
        "status",
        ["indexing", "pending", "queued", "uploading", "validating", "READY", "", None],
    )
    def test_is_not_deletable(self, status):
        assert TaskStatus.is_deletable(status) is False


class TestIndexModelSpec:
    """Tests for IndexModelSpec."""

    def test_default_options(self):
        spec = IndexModelSpec(model_name="marengo2.7")
        assert spec.model_options == (ModelOption.VISUAL, ModelOption.AUDIO)

    def test_to_payload(self):
        spec = IndexModelSpec(model_name="pegasus1.2", model_options=["visual"])
        assert spec.to_payload() == {
            "model_name": "pegasus1.2",
            "model_options": ["visual"],
        }

    def test_requires_an_option(self):
        with pytest.raises(ValidationError):
            IndexModelSpec(model_name="marengo2.7", model_options=[])

    def test_rejects_unknown_option(self):
        with pytest.raises(ValidationError):
            IndexModelSpec(model_name="marengo2.7", model_options=["smell"])

    def test_default_pairing(self):
        assert [spec.model_name for spec in DEFAULT_INDEX_MODELS] == [
            "marengo2.7",
            "pegasus1.2",
        ]
