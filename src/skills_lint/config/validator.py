"""Config file validation for lint runs."""

from __future__ import annotations

import difflib
import json
from pathlib import Path
from typing import Any

from skills_lint.constants.models import SUPPORTED_ENCODINGS, SUPPORTED_MODEL_NAMES
from skills_lint.constants.rules import BUDGET_RULES, TOGGLE_RULES, TOKEN_LIMIT
from skills_lint.constants.validation import (
    ALLOWED_BUDGET_KEYS,
    ALLOWED_BUDGET_RULE_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_OVERRIDE_KEYS,
    ALLOWED_OVERRIDE_RULE_KEYS,
    ALLOWED_RULE_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    REQUIRED_CONFIG_KEYS,
)
from skills_lint.exceptions.validation import ValidationError


def read_config_payload(path: Path) -> tuple[object, list[ValidationError]]:
    """Read and JSON-decode *path*, returning the payload or read/parse errors."""
    path_str = str(path)
    if not path.is_file():
        return None, [
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"config file not found: {path}",
                hint="run `skills-lint init` to create one",
            )
        ]

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return None, [
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"failed to read config file: {exc}",
            )
        ]

    try:
        return json.loads(text), []
    except json.JSONDecodeError as exc:
        return None, [
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid JSON: {exc.msg} at line {exc.lineno} column {exc.colno}",
            )
        ]


def validate_config_file(path: Path) -> list[ValidationError]:
    """Validate a config file and return all validation errors.

    This is the collect-all entry point shared by ``skills-lint validate-config``
    and the lint run itself.  It never raises; every problem is returned as a
    :class:`ValidationError`.
    """
    raw, errors = read_config_payload(path)
    if errors:
        return errors
    return validate_config_payload(raw, str(path))


def validate_config_payload(raw: object, path_str: str) -> list[ValidationError]:
    """Validate an already-decoded config payload."""
    errors: list[ValidationError] = []

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a JSON object, got {type(raw).__name__}",
            )
        )
        return errors

    _check_unknown_keys(raw, ALLOWED_CONFIG_KEYS, "", path_str, errors)

    for key in REQUIRED_CONFIG_KEYS:
        if key not in raw:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=key,
                    message=f"missing required key `{key}`",
                )
            )

    if "patterns" in raw and not _is_string_list(raw["patterns"]):
        errors.append(_type_error(path_str, "patterns", "expected a list of strings"))

    if "cache" in raw and not isinstance(raw["cache"], bool):
        errors.append(_type_error(path_str, "cache", "expected a boolean"))

    if "rules" in raw:
        _validate_rules_block(raw["rules"], path_str, errors)

    if "overrides" in raw:
        _validate_overrides_block(raw["overrides"], path_str, errors)

    return errors


def _validate_rules_block(rules: Any, path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``rules`` object."""
    if not isinstance(rules, dict):
        errors.append(_type_error(path_str, "rules", "expected an object"))
        return

    _check_unknown_keys(rules, ALLOWED_RULE_KEYS, "rules", path_str, errors)

    if TOKEN_LIMIT not in rules:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=f"rules.{TOKEN_LIMIT}",
                message=f"missing required rule `{TOKEN_LIMIT}`",
            )
        )

    for rule_id in BUDGET_RULES:
        if rule_id in rules:
            _validate_budget_rule(rules[rule_id], f"rules.{rule_id}", path_str, errors, partial=False)

    for rule_id in TOGGLE_RULES:
        if rule_id in rules and not isinstance(rules[rule_id], bool):
            errors.append(_type_error(path_str, f"rules.{rule_id}", "expected a boolean"))


def _validate_overrides_block(overrides: Any, path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``overrides`` list."""
    if not isinstance(overrides, list):
        errors.append(_type_error(path_str, "overrides", "expected a list of objects"))
        return

    for index, entry in enumerate(overrides):
        prefix = f"overrides[{index}]"
        if not isinstance(entry, dict):
            errors.append(_type_error(path_str, prefix, "expected an object"))
            continue

        _check_unknown_keys(entry, ALLOWED_OVERRIDE_KEYS, prefix, path_str, errors)

        if "files" not in entry:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{prefix}.files",
                    message=f"missing required key `{prefix}.files`",
                )
            )
        elif not _is_string_list(entry["files"]):
            errors.append(_type_error(path_str, f"{prefix}.files", "expected a list of strings"))

        rules = entry.get("rules")
        if rules is None:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{prefix}.rules",
                    message=f"missing required key `{prefix}.rules`",
                )
            )
            continue
        if not isinstance(rules, dict):
            errors.append(_type_error(path_str, f"{prefix}.rules", "expected an object"))
            continue

        _check_unknown_keys(rules, ALLOWED_OVERRIDE_RULE_KEYS, f"{prefix}.rules", path_str, errors)
        if TOKEN_LIMIT not in rules:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{prefix}.rules.{TOKEN_LIMIT}",
                    message=f"missing required rule `{TOKEN_LIMIT}` in override",
                )
            )
            continue
        _validate_budget_rule(
            rules[TOKEN_LIMIT],
            f"{prefix}.rules.{TOKEN_LIMIT}",
            path_str,
            errors,
            partial=True,
        )


def _validate_budget_rule(
    rule: Any,
    field: str,
    path_str: str,
    errors: list[ValidationError],
    *,
    partial: bool,
) -> None:
    """Validate a ``{"models": {...}}`` budget block.

    With ``partial=True`` (overrides) the thresholds are optional and an
    empty ``models`` object is allowed.
    """
    if not isinstance(rule, dict):
        errors.append(_type_error(path_str, field, "expected an object with a `models` key"))
        return

    _check_unknown_keys(rule, ALLOWED_BUDGET_RULE_KEYS, field, path_str, errors)

    models = rule.get("models")
    if models is None:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=f"{field}.models",
                message=f"missing required key `{field}.models`",
            )
        )
        return
    if not isinstance(models, dict):
        errors.append(_type_error(path_str, f"{field}.models", "expected an object keyed by model name"))
        return
    if not models and not partial:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=f"{field}.models",
                message=f"`{field}.models` must name at least one model",
            )
        )
        return

    for model in sorted(models):
        model_field = f"{field}.models.{model}"
        if model not in SUPPORTED_MODEL_NAMES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=model_field,
                    message=f"unsupported model `{model}`",
                    hint=f"supported models: {', '.join(SUPPORTED_MODEL_NAMES)}",
                )
            )

        budget = models[model]
        if not isinstance(budget, dict):
            errors.append(_type_error(path_str, model_field, "expected an object"))
            continue

        _check_unknown_keys(budget, ALLOWED_BUDGET_KEYS, model_field, path_str, errors)

        if "encoding" in budget:
            encoding = budget["encoding"]
            if not isinstance(encoding, str) or encoding not in SUPPORTED_ENCODINGS:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field=f"{model_field}.encoding",
                        message="unsupported value for `encoding`",
                        hint=f"expected one of: {', '.join(SUPPORTED_ENCODINGS)}; got: {encoding!r}",
                    )
                )

        for threshold in ("warning", "error"):
            threshold_field = f"{model_field}.{threshold}"
            if threshold not in budget:
                if not partial:
                    errors.append(
                        ValidationError(
                            code=CFG008,
                            path=path_str,
                            field=threshold_field,
                            message=f"missing required key `{threshold_field}`",
                        )
                    )
                continue
            value = budget[threshold]
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(_type_error(path_str, threshold_field, "expected a non-negative integer"))
            elif value < 0:
                errors.append(
                    ValidationError(
                        code=CFG007,
                        path=path_str,
                        field=threshold_field,
                        message=f"`{threshold_field}` must be a non-negative integer, got {value}",
                    )
                )


def _check_unknown_keys(
    mapping: dict[Any, Any],
    allowed: frozenset[str],
    parent: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    for key in sorted(str(k) for k in mapping):
        if key in allowed:
            continue
        field = f"{parent}.{key}" if parent else key
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=field,
                message=f"unknown key `{field}`",
                hint=_suggest_key(key, allowed),
            )
        )


def _type_error(path_str: str, field: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint=hint,
    )


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
