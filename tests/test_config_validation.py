"""Tests for config validation (error codes, messages, ordering)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from skills_lint.config import validate_config_file, validate_config_payload
from skills_lint.constants.validation import (
    ALL_CFG_CODES,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from skills_lint.exceptions.validation import ValidationError, format_errors, sort_errors


def _valid_payload() -> dict[str, Any]:
    return {
        "patterns": ["./.github/**/SKILL.md"],
        "rules": {
            "token-limit": {"models": {"gpt-4o": {"warning": 8000, "error": 16000}}},
        },
    }


def _codes(errors: list[ValidationError]) -> list[str]:
    return [e.code for e in errors]


def _fields(errors: list[ValidationError]) -> list[str]:
    return [e.field for e in errors]


def test_validation_error_format_with_hint() -> None:
    err = ValidationError(
        code=CFG004,
        path="/repo/.skills-lint.config.json",
        field="patern",
        message="unknown key `patern`",
        hint="did you mean `patterns`?",
    )

    assert err.format() == (
        "[CFG004] /repo/.skills-lint.config.json unknown key `patern` (did you mean `patterns`?)"
    )


def test_validation_error_format_without_hint() -> None:
    err = ValidationError(code=CFG008, path="cfg.json", field="rules", message="missing required key `rules`")

    assert err.format() == "[CFG008] cfg.json missing required key `rules`"


def test_sort_errors_orders_by_code_path_field() -> None:
    errors = [
        ValidationError(code=CFG008, path="a", field="z", message="m"),
        ValidationError(code=CFG004, path="b", field="a", message="m"),
        ValidationError(code=CFG004, path="a", field="b", message="m"),
    ]

    assert [(e.code, e.path, e.field) for e in sort_errors(errors)] == [
        (CFG004, "a", "b"),
        (CFG004, "b", "a"),
        (CFG008, "a", "z"),
    ]
    assert format_errors(errors).count("\n") == 2


def test_valid_payload_has_no_errors() -> None:
    assert validate_config_payload(_valid_payload(), "cfg.json") == []


def test_full_payload_with_every_rule_is_valid() -> None:
    payload = _valid_payload()
    payload["$schema"] = "./node_modules/skills-lint/schema.json"
    payload["cache"] = False
    payload["rules"].update(
        {
            "frontmatter-limit": {"models": {"gpt-4": {"warning": 1, "error": 2, "encoding": "cl100k_base"}}},
            "skill-index-budget": {"models": {"gpt-5": {"warning": 3, "error": 4}}},
            "skill-structure": True,
            "unique-name": False,
            "unique-description": True,
        }
    )
    payload["overrides"] = [
        {"files": ["a/SKILL.md"], "rules": {"token-limit": {"models": {"gpt-4o": {"error": 20000}}}}},
    ]

    assert validate_config_payload(payload, "cfg.json") == []


def test_missing_file_is_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path / "nope.json")

    assert _codes(errors) == [CFG001]
    assert "skills-lint init" in errors[0].hint


def test_invalid_json_is_cfg002(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf-8")

    errors = validate_config_file(path)

    assert _codes(errors) == [CFG002]
    assert "line 1" in errors[0].message


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param([], id="list"),
        pytest.param("text", id="string"),
        pytest.param(None, id="null"),
    ],
)
def test_non_object_payload_is_cfg003(payload: object) -> None:
    assert _codes(validate_config_payload(payload, "cfg.json")) == [CFG003]


def test_unknown_top_level_key_suggests_close_match() -> None:
    payload = _valid_payload()
    payload["patern"] = ["x"]

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG004]
    assert errors[0].field == "patern"
    assert errors[0].hint == "did you mean `patterns`?"


def test_unknown_nested_keys_are_reported_with_full_path() -> None:
    payload = _valid_payload()
    payload["rules"]["token-limits"] = {}
    payload["rules"]["token-limit"]["models"]["gpt-4o"]["warn"] = 1

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG004, CFG004]
    assert "rules.token-limits" in _fields(errors)
    assert "rules.token-limit.models.gpt-4o.warn" in _fields(errors)


def test_missing_required_keys_are_cfg008() -> None:
    errors = validate_config_payload({}, "cfg.json")

    assert _codes(errors) == [CFG008, CFG008]
    assert _fields(errors) == ["patterns", "rules"]


def test_missing_token_limit_rule_is_cfg008() -> None:
    payload = _valid_payload()
    payload["rules"] = {"skill-structure": True}

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG008]
    assert errors[0].field == "rules.token-limit"


def test_missing_thresholds_are_cfg008() -> None:
    payload = _valid_payload()
    payload["rules"]["token-limit"]["models"]["gpt-4o"] = {"warning": 10}

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG008]
    assert errors[0].field == "rules.token-limit.models.gpt-4o.error"


@pytest.mark.parametrize(
    ("mutate", "field"),
    [
        pytest.param(lambda p: p.update(patterns="x"), "patterns", id="patterns-string"),
        pytest.param(lambda p: p.update(patterns=[1]), "patterns", id="patterns-non-string"),
        pytest.param(lambda p: p.update(cache="yes"), "cache", id="cache-string"),
        pytest.param(lambda p: p.update(rules=[]), "rules", id="rules-list"),
        pytest.param(lambda p: p.update(overrides={}), "overrides", id="overrides-object"),
        pytest.param(
            lambda p: p["rules"].update({"skill-structure": "on"}),
            "rules.skill-structure",
            id="toggle-string",
        ),
        pytest.param(
            lambda p: p["rules"]["token-limit"]["models"]["gpt-4o"].update(warning="10"),
            "rules.token-limit.models.gpt-4o.warning",
            id="threshold-string",
        ),
        pytest.param(
            lambda p: p["rules"]["token-limit"]["models"]["gpt-4o"].update(error=True),
            "rules.token-limit.models.gpt-4o.error",
            id="threshold-bool",
        ),
        pytest.param(
            lambda p: p["rules"]["token-limit"].update(models=[]),
            "rules.token-limit.models",
            id="models-list",
        ),
    ],
)
def test_type_errors_are_cfg005(mutate: Any, field: str) -> None:
    payload = _valid_payload()
    mutate(payload)

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG005]
    assert errors[0].field == field


def test_unsupported_model_is_cfg006() -> None:
    payload = _valid_payload()
    payload["rules"]["token-limit"]["models"]["claude-9"] = {"warning": 1, "error": 2}

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG006]
    assert errors[0].field == "rules.token-limit.models.claude-9"
    assert "gpt-4o" in errors[0].hint


def test_unsupported_encoding_is_cfg006() -> None:
    payload = _valid_payload()
    payload["rules"]["token-limit"]["models"]["gpt-4o"]["encoding"] = "gpt2"

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG006]
    assert errors[0].field == "rules.token-limit.models.gpt-4o.encoding"
    assert "'gpt2'" in errors[0].hint


def test_negative_threshold_is_cfg007() -> None:
    payload = _valid_payload()
    payload["rules"]["token-limit"]["models"]["gpt-4o"]["warning"] = -1

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG007]
    assert "got -1" in errors[0].message


@pytest.mark.parametrize("rule_id", ["token-limit", "frontmatter-limit", "skill-index-budget"])
def test_empty_models_is_cfg007(rule_id: str) -> None:
    payload = _valid_payload()
    payload["rules"][rule_id] = {"models": {}}

    errors = validate_config_payload(payload, "cfg.json")

    assert _codes(errors) == [CFG007]
    assert errors[0].field == f"rules.{rule_id}.models"
    assert "at least one model" in errors[0].message


def test_override_thresholds_are_optional() -> None:
    payload = _valid_payload()
    payload["overrides"] = [
        {"files": ["a.md"], "rules": {"token-limit": {"models": {"gpt-4o": {"encoding": "cl100k_base"}}}}},
    ]

    assert validate_config_payload(payload, "cfg.json") == []


def test_override_entry_errors() -> None:
    payload = _valid_payload()
    payload["overrides"] = [
        "not-an-object",
        {"rules": {"token-limit": {"models": {}}}},
        {"files": ["a.md"]},
        {"files": ["a.md"], "rules": {"frontmatter-limit": {"models": {}}}},
    ]

    errors = validate_config_payload(payload, "cfg.json")

    assert sorted(zip(_codes(errors), _fields(errors), strict=True)) == [
        (CFG004, "overrides[3].rules.frontmatter-limit"),
        (CFG005, "overrides[0]"),
        (CFG008, "overrides[1].files"),
        (CFG008, "overrides[2].rules"),
        (CFG008, "overrides[3].rules.token-limit"),
    ]


def test_validation_collects_errors_across_sections() -> None:
    payload = {
        "patterns": "x",
        "rules": {"token-limit": {"models": {"gpt-4o": {"warning": -5, "error": 1}}}},
        "cahce": True,
    }

    errors = validate_config_payload(payload, "cfg.json")

    assert sorted(_codes(errors)) == [CFG004, CFG005, CFG007]


def test_error_codes_are_unique_and_stable() -> None:
    assert ALL_CFG_CODES == (CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007, CFG008)
    assert len(set(ALL_CFG_CODES)) == len(ALL_CFG_CODES)
