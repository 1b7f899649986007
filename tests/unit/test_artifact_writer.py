"""
Unit tests for writing compiled artifacts.
"""

from pathlib import Path

from tinct.compiler import compile_tokens, load_schema, stale_artifacts, write_artifacts
from tinct.core.config import BuildConfig


class TestWriteArtifacts:
    """Tests for write_artifacts() and stale_artifacts()."""

    def test_writes_all_files(self, tmp_path: Path, base_source, brand_source):
        """Every configured artifact is written."""
        build = BuildConfig(output_dir=tmp_path / "generated")
        artifacts = compile_tokens(base_source, brand_source)

        written = write_artifacts(artifacts, build)

        assert sorted(p.name for p in written) == [
            "preset.json",
            "schema.json",
            "tokens.css",
            "utilities.css",
        ]
        assert build.css_path.read_text(encoding="utf-8") == artifacts.css_sheet
        assert load_schema(build.schema_path).entries == artifacts.schema.entries

    def test_unchanged_files_not_rewritten(self, tmp_path: Path, base_source, brand_source):
        """A second build with the same input writes nothing."""
        build = BuildConfig(output_dir=tmp_path)
        artifacts = compile_tokens(base_source, brand_source)
        write_artifacts(artifacts, build)

        assert write_artifacts(artifacts, build) == []

    def test_utilities_can_be_disabled(self, tmp_path: Path, base_source, brand_source):
        """An empty utilities_file skips the utilities CSS."""
        build = BuildConfig(output_dir=tmp_path, utilities_file="")
        written = write_artifacts(compile_tokens(base_source, brand_source), build)
        assert "utilities.css" not in [p.name for p in written]

    def test_stale_detection(self, tmp_path: Path, base_source, brand_source):
        """Missing or edited artifacts are reported as stale."""
        build = BuildConfig(output_dir=tmp_path)
        artifacts = compile_tokens(base_source, brand_source)

        assert len(stale_artifacts(artifacts, build)) == 4

        write_artifacts(artifacts, build)
        assert stale_artifacts(artifacts, build) == []

        build.css_path.write_text("/* edited */\n", encoding="utf-8")
        assert stale_artifacts(artifacts, build) == [build.css_path]
