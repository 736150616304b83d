"""
Unit tests for data models.
"""

import pytest
from pydantic import ValidationError

from pr_changed_files.exceptions import ConfigurationError
from pr_changed_files.models import ChangedFileEntry, InvocationParameters, FetchResult


class TestChangedFileEntry:
    """Test ChangedFileEntry model."""

    def test_minimal_entry(self):
        entry = ChangedFileEntry.model_validate({"filename": "src/Program.cs"})
        assert entry.filename == "src/Program.cs"
        assert entry.status is None

    def test_extra_fields_ignored(self):
        entry = ChangedFileEntry.model_validate({
            "filename": "a/b.cs",
            "status": "modified",
            "additions": 3,
            "deletions": 1,
            "changes": 4,
            "blob_url": "https://github.com/...",
            "patch": "@@ -1 +1 @@",
        })
        assert entry.filename == "a/b.cs"
        assert entry.status == "modified"
        assert not hasattr(entry, "patch")

    def test_missing_filename(self):
        with pytest.raises(ValidationError):
            ChangedFileEntry.model_validate({"status": "added"})

    def test_empty_filename(self):
        with pytest.raises(ValidationError):
            ChangedFileEntry.model_validate({"filename": ""})


class TestInvocationParameters:
    """Test InvocationParameters dataclass."""

    def test_has_credentials(self):
        params = InvocationParameters(output="out.txt", pull_request_id="1", username="u", token="t")
        assert params.has_credentials

    @pytest.mark.parametrize("username,token", [(None, "t"), ("u", None), ("", "t"), ("u", ""), (None, None)])
    def test_missing_credentials(self, username, token):
        params = InvocationParameters(output="out.txt", pull_request_id="1", username=username, token=token)
        assert not params.has_credentials

    def test_pull_request_id_normalized_to_string(self):
        params = InvocationParameters(output="out.txt", pull_request_id=123)
        assert params.pull_request_id == "123"

    def test_empty_output_allowed_until_validated(self):
        params = InvocationParameters(output="", pull_request_id="1")
        assert not params.has_credentials

    def test_output_required(self):
        params = InvocationParameters(output="", pull_request_id="1", username="u", token="t")
        with pytest.raises(ConfigurationError, match="output path is required"):
            params.validate()

    @pytest.mark.parametrize("pull_request_id", [None, "", "   "])
    def test_pull_request_id_required(self, pull_request_id):
        params = InvocationParameters(output="out.txt", pull_request_id=pull_request_id, username="u", token="t")
        with pytest.raises(ConfigurationError, match="pull request id is required"):
            params.validate()

    def test_validate_accepts_complete_parameters(self):
        InvocationParameters(output="out.txt", pull_request_id="42", username="u", token="t").validate()


def test_fetch_result_exit_code():
    assert FetchResult(skipped=True).exit_code == 0
    assert FetchResult(skipped=False, filenames=["a"]).exit_code == 0
