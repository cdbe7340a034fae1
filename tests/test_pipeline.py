"""Tests for semver_action.pipeline."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import semver

from semver_action.exceptions import UnknownBumpError
from semver_action.models import (
    ActionConfig,
    ActionContext,
    BumpMapping,
    DetectionMode,
    ReleaseDecision,
)
from semver_action.pipeline import decide, gather_context, list_version_tags, run_action


class TestListVersionTags:
    @patch("semver_action.pipeline.git")
    def test_prefixed_then_bare(self, mock_git: MagicMock) -> None:
        mock_git.side_effect = ["v1.4.1\nv1.2.3-rc1\nv1.4.0", "0.9.0"]

        assert list_version_tags() == ["v1.4.1", "v1.4.0", "0.9.0"]
        mock_git.assert_any_call(
            "tag", "--list", "--sort=-creatordate", "v[0-9]*.[0-9]*.[0-9]*", check=False
        )

    @patch("semver_action.pipeline.git")
    def test_no_tags(self, mock_git: MagicMock) -> None:
        mock_git.return_value = ""

        assert list_version_tags() == []


class TestGatherContext:
    @patch("semver_action.pipeline.read_commit_subject")
    def test_commit_mode_reads_subject(self, mock_subject: MagicMock) -> None:
        mock_subject.return_value = "fix: x"

        ctx = gather_context(DetectionMode.COMMIT)

        assert ctx == ActionContext(commit_subject="fix: x")

    @patch("semver_action.pipeline.read_branch_name")
    def test_branch_mode_passes_ref(self, mock_branch: MagicMock) -> None:
        mock_branch.return_value = "feature/x"

        ctx = gather_context(DetectionMode.BRANCH, ref_name="feature/x")

        assert ctx.ref_name == "feature/x"
        mock_branch.assert_called_once_with("feature/x")

    def test_label_mode_reads_event(
        self, event_file: Callable[[list[str]], Path]
    ) -> None:
        ctx = gather_context(
            DetectionMode.LABEL, event_path=event_file(["fix"]), labels="feature"
        )

        assert ctx.event_labels == ["fix"]
        assert ctx.fallback_labels == "feature"


class TestDecide:
    def test_label_minor_bump(
        self, make_config: Callable[[DetectionMode], ActionConfig]
    ) -> None:
        ctx = ActionContext(event_labels=["feature"])

        decision = decide(make_config(DetectionMode.LABEL), ctx, tags=lambda: ["v1.4.1"])

        assert decision.outputs() == {
            "version": "v1.5.0",
            "release_needed": "true",
            "release_id": "1.5.0",
        }

    def test_commit_major_bump_without_tags(
        self, make_config: Callable[[DetectionMode], ActionConfig]
    ) -> None:
        ctx = ActionContext(commit_subject="[breaking] redo API")

        decision = decide(make_config(DetectionMode.COMMIT), ctx, tags=lambda: [])

        assert decision.version == semver.Version(1, 0, 0)
        assert decision.release_needed

    def test_unmapped_branch_skips(
        self, make_config: Callable[[DetectionMode], ActionConfig]
    ) -> None:
        tags = MagicMock(return_value=["v1.0.0"])
        ctx = ActionContext(ref_name="chore/cleanup")

        decision = decide(make_config(DetectionMode.BRANCH), ctx, tags=tags)

        assert decision == ReleaseDecision.skip()
        assert decision.outputs()["version"] == ""
        tags.assert_not_called()

    def test_no_token_skips(
        self, make_config: Callable[[DetectionMode], ActionConfig]
    ) -> None:
        tags = MagicMock(return_value=["v1.0.0"])

        decision = decide(make_config(DetectionMode.BRANCH), ActionContext(ref_name="main"), tags=tags)

        assert not decision.release_needed
        tags.assert_not_called()

    def test_uses_most_recently_created_tag(
        self, make_config: Callable[[DetectionMode], ActionConfig]
    ) -> None:
        ctx = ActionContext(event_labels=["fix"])

        decision = decide(
            make_config(DetectionMode.LABEL), ctx, tags=lambda: ["v1.0.5", "v2.0.0"]
        )

        assert decision.version == semver.Version(1, 0, 6)

    def test_idempotent(self, make_config: Callable[[DetectionMode], ActionConfig]) -> None:
        config = make_config(DetectionMode.LABEL)
        ctx = ActionContext(fallback_labels="bug feature")

        first = decide(config, ctx, tags=lambda: ["v0.3.9"])
        second = decide(config, ctx, tags=lambda: ["v0.3.9"])

        assert first == second
        assert first.outputs()["release_id"] == "0.3.10"

    def test_unknown_category_raises(self) -> None:
        config = ActionConfig(
            mode=DetectionMode.LABEL,
            mapping=BumpMapping(categories={"hotfix": ["urgent"]}),
        )

        with pytest.raises(UnknownBumpError):
            decide(config, ActionContext(event_labels=["urgent"]), tags=lambda: [])


@patch("semver_action.pipeline.git")
@patch("semver_action.tokens.git")
def test_run_action_commit_mode(
    mock_tokens_git: MagicMock,
    mock_pipeline_git: MagicMock,
    make_config: Callable[[DetectionMode], ActionConfig],
) -> None:
    """Commit mode reads the subject, then the v-prefixed and bare tag lists."""
    mock_tokens_git.return_value = "fix: handle timeouts"
    mock_pipeline_git.side_effect = ["v2.3.4", ""]

    decision = run_action(make_config(DetectionMode.COMMIT))

    assert decision.version == semver.Version(2, 3, 5)
    assert mock_pipeline_git.call_count == 2
