"""
Property-based tests for the changed files output.

Property: for any API response, the output file holds exactly one line per
entry, in response order.
"""

import tempfile
from pathlib import Path
from unittest.mock import patch
from hypothesis import given, settings, strategies as st

from pr_changed_files.fetcher import ChangedFilesFetcher


path_segment = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=('Lu', 'Ll', 'Nd'), whitelist_characters='._-'),
)
file_paths = st.lists(path_segment, min_size=1, max_size=4).map('/'.join)
statuses = st.sampled_from(['added', 'modified', 'removed', 'renamed'])


@settings(max_examples=50, deadline=None)
@given(entries=st.lists(st.tuples(file_paths, statuses), max_size=30))
def test_output_matches_response_order(entries):
    files_data = [{"filename": name, "status": status} for name, status in entries]

    with tempfile.TemporaryDirectory() as tmp, patch('pr_changed_files.fetcher.GitHubClient') as mock_client_cls:
        mock_client_cls.return_value.get_pull_request_files.return_value = files_data
        output = Path(tmp) / "changed.txt"

        ChangedFilesFetcher().fetch_changed_files("octocat", "s3cret", str(output), "1")

        content = output.read_text(encoding="utf-8")

    lines = content.splitlines()
    assert lines == [name for name, _ in entries]
    assert content == "".join(f"{name}\n" for name, _ in entries)
