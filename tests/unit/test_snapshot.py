#
# tests/unit/test_snapshot.py
#
"""
Tests for the SnapshotAggregator and file enumeration.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from suitediff.exceptions import ParseFailure
from suitediff.extraction import BlockStyleExtractor
from suitediff.files import enumerate_files, relative_path
from suitediff.snapshot import SnapshotAggregator
from suitediff.syntax import TreeSitterProvider


@pytest.fixture
def workspace(tmp_path: Path, login_spec: str) -> Path:
    (tmp_path / "tests" / "auth").mkdir(parents=True)
    (tmp_path / "tests" / "auth" / "login.spec.js").write_text(login_spec)
    (tmp_path / "tests" / "cart.spec.js").write_text(
        "describe('Cart', () => {\n  it('adds item', () => {});\n  xit('removes item', () => {});\n});\n"
    )
    (tmp_path / "tests" / "helpers.txt").write_text("not a test")
    return tmp_path


def _aggregator(provider: TreeSitterProvider, root: Path, **kwargs) -> SnapshotAggregator:
    return SnapshotAggregator(provider=provider, extractor=BlockStyleExtractor(), root=root, **kwargs)


class TestEnumerateFiles:
    def test_recursive_pattern_is_sorted(self, workspace: Path) -> None:
        files = enumerate_files("tests/**/*.js", workspace)
        assert [relative_path(f, workspace) for f in files] == [
            "tests/auth/login.spec.js",
            "tests/cart.spec.js",
        ]

    def test_no_matches(self, workspace: Path) -> None:
        assert enumerate_files("spec/**/*.js", workspace) == []

    def test_relative_path_outside_root(self, tmp_path: Path) -> None:
        outside = Path("/elsewhere/a.js")
        assert relative_path(outside, tmp_path) == "/elsewhere/a.js"


class TestSnapshotAggregator:
    def test_compute_builds_snapshot_in_scan_order(self, provider: TreeSitterProvider, workspace: Path) -> None:
        files = enumerate_files("tests/**/*.js", workspace)
        inventory = _aggregator(provider, workspace).compute(files)
        snapshot = inventory.snapshot

        assert snapshot.tests == (
            "Login > succeeds",
            "Login > fails on bad password",
            "Cart > adds item",
            "Cart > removes item",
        )
        assert snapshot.skipped == ("Login > fails on bad password", "Cart > removes item")
        assert snapshot.files == ("tests/auth/login.spec.js", "tests/cart.spec.js")
        assert inventory.decorator.count() == 4

    def test_records_get_relative_file(self, provider: TreeSitterProvider, workspace: Path) -> None:
        records = _aggregator(provider, workspace).extract_file(workspace / "tests" / "cart.spec.js")
        assert {record.file for record in records} == {"tests/cart.spec.js"}

    def test_include_file_prefixes_names(self, provider: TreeSitterProvider, workspace: Path) -> None:
        files = enumerate_files("tests/*.js", workspace)
        snapshot = _aggregator(provider, workspace, include_file=True).compute(files).snapshot
        assert snapshot.tests == ("tests/cart.spec.js > Cart > adds item", "tests/cart.spec.js > Cart > removes item")

    def test_workers_keep_scan_order(self, provider: TreeSitterProvider, workspace: Path) -> None:
        for index in range(6):
            (workspace / "tests" / f"extra_{index}.spec.js").write_text(
                f"describe('Extra {index}', () => {{ it('runs', () => {{}}); }});"
            )
        files = enumerate_files("tests/**/*.js", workspace)

        serial = _aggregator(provider, workspace).compute(files).snapshot
        parallel = _aggregator(provider, workspace, workers=4).compute(files).snapshot

        assert parallel == serial

    def test_parse_failure_aborts_revision(self, provider: TreeSitterProvider, workspace: Path) -> None:
        (workspace / "tests" / "broken.spec.js").write_text("describe('x', () => {")
        files = enumerate_files("tests/**/*.js", workspace)

        with pytest.raises(ParseFailure) as exc_info:
            _aggregator(provider, workspace).compute(files)
        assert exc_info.value.file_path == "tests/broken.spec.js"

    def test_undecodable_file_is_a_parse_failure(self, provider: TreeSitterProvider, workspace: Path) -> None:
        binary = workspace / "tests" / "binary.spec.js"
        binary.write_bytes(b"\xff\xfe\x00describe")

        with pytest.raises(ParseFailure) as exc_info:
            _aggregator(provider, workspace).compute([binary])
        assert exc_info.value.file_path == "tests/binary.spec.js"
        assert isinstance(exc_info.value.details, UnicodeDecodeError)

    def test_provider_receives_relative_path(self, workspace: Path) -> None:
        provider = MagicMock(spec=TreeSitterProvider)
        provider.parse.side_effect = ParseFailure("tests/cart.spec.js")

        with pytest.raises(ParseFailure):
            _aggregator(provider, workspace).compute([workspace / "tests" / "cart.spec.js"])
        assert provider.parse.call_args.args[1] == "tests/cart.spec.js"

    def test_empty_file_list(self, provider: TreeSitterProvider, workspace: Path) -> None:
        inventory = _aggregator(provider, workspace).compute([])
        assert inventory.snapshot.tests == ()
        assert inventory.decorator.count() == 0
