"""
Tests for name normalization — display spellings for script types and modules.
"""

import pytest

from suitegen.core.services.normalize import (
    normalize_module,
    normalize_modules,
    normalize_script_type,
)


class TestNormalizeScriptType:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("mapreduce", "MapReduce"),
            ("MAPREDUCE", "MapReduce"),
            ("mApReDuCe", "MapReduce"),
            ("userevent", "UserEvent"),
            ("Scheduled", "Scheduled"),
            ("CLIENT", "Client"),
            ("suitelet", "Suitelet"),
            ("portlet", "Portlet"),
            ("restlet", "RESTlet"),
            ("RESTlet", "RESTlet"),
        ],
    )
    def test_canonical_spelling(self, raw, expected):
        assert normalize_script_type(raw) == expected

    def test_empty_is_unspecified(self):
        assert normalize_script_type("") is None

    def test_unknown_is_unspecified(self):
        assert normalize_script_type("workflowaction") is None


class TestNormalizeModule:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("currentrecord", "currentRecord"),
            ("recordcontext", "recordContext"),
            ("keycontrol", "keyControl"),
            ("certificatecontrol", "certificateControl"),
            ("suiteappinfo", "suiteAppInfo"),
            ("ui/serverwidget", "serverWidget"),
        ],
    )
    def test_special_display_forms(self, raw, expected):
        assert normalize_module(raw) == expected

    def test_plain_modules_lowercase(self):
        assert normalize_module("RECORD") == "record"
        assert normalize_module("Search") == "search"
        assert normalize_module("crypto/Certificate") == "crypto/certificate"

    @pytest.mark.parametrize(
        "raw",
        ["record", "currentrecord", "CURRENTRECORD", "ui/serverwidget", "format/i18n"],
    )
    def test_idempotent(self, raw):
        once = normalize_module(raw)
        assert normalize_module(once) == once

    def test_deterministic(self):
        assert normalize_module("KeyControl") == normalize_module("KeyControl")


class TestNormalizeModules:
    def test_preserves_order(self):
        assert normalize_modules(["search", "Record", "currentrecord"]) == [
            "search", "record", "currentRecord",
        ]

    def test_drops_empty_entries(self):
        assert normalize_modules(["", "log", ""]) == ["log"]

    def test_empty(self):
        assert normalize_modules([]) == []
