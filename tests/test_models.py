"""
Tests for domain models — defaults, copies, config resolution.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from suitegen.core.models import Defaults, GeneratedFile, ScriptRequest, SuitegenConfig


class TestScriptRequest:
    def test_minimal(self):
        req = ScriptRequest(path="test.js")
        assert req.script_type == ""
        assert req.api_version is None
        assert req.modules == []
        assert req.copyright_path == ""

    def test_with_defaults_fills_unset(self):
        req = ScriptRequest(path="t.js").with_defaults(
            api_version="2.1", script_type="client", copyright_path="c.txt",
        )
        assert (req.api_version, req.script_type, req.copyright_path) == ("2.1", "client", "c.txt")

    def test_with_defaults_keeps_explicit(self):
        original = ScriptRequest(path="t.js", api_version="bogus", script_type="restlet")
        req = original.with_defaults(api_version="2.1", script_type="client")
        assert req.api_version == "bogus"
        assert req.script_type == "restlet"

    def test_with_defaults_returns_copy(self):
        original = ScriptRequest(path="t.js")
        original.with_defaults(api_version="2.1")
        assert original.api_version is None

    def test_path_required(self):
        with pytest.raises(ValidationError):
            ScriptRequest()  # type: ignore[call-arg]


class TestGeneratedFile:
    def test_defaults(self):
        f = GeneratedFile(path="t.js", content="x")
        assert f.overwrite is False
        assert f.reason == ""


class TestSuitegenConfig:
    def test_empty(self):
        config = SuitegenConfig()
        assert config.version == 1
        assert config.defaults.api_version is None
        assert config.copyright_path() == ""

    def test_relative_copyright(self, tmp_path: Path):
        config = SuitegenConfig(defaults=Defaults(copyright="legal/c.txt"), root=tmp_path)
        assert config.copyright_path() == str(tmp_path / "legal" / "c.txt")

    def test_absolute_copyright(self, tmp_path: Path):
        absolute = tmp_path / "c.txt"
        config = SuitegenConfig(defaults=Defaults(copyright=str(absolute)), root=Path("/elsewhere"))
        assert config.copyright_path() == str(absolute)

    def test_numeric_version_coerced(self):
        assert Defaults.model_validate({"api_version": 2.0}).api_version == "2.0"

    def test_root_not_serialized(self, tmp_path: Path):
        assert "root" not in SuitegenConfig(root=tmp_path).model_dump()

    def test_extra_defaults_rejected(self):
        with pytest.raises(ValidationError):
            Defaults.model_validate({"moduels": ["record"]})
