"""
Validation and sanitization of todo item input.

Two entry points:
- validate_and_sanitize(): every field required (create / full replace).
  All failed checks are collected.
- validate_partial(): only the fields present are checked (partial update).
  A SQL keyword in the name aborts with that single error.

Neither function raises on bad input; callers inspect ValidationResult.
"""
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

SQL_KEYWORDS = ("select", "insert", "update", "delete", "drop")

HTML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "'": "&#39;",
    '"': "&quot;",
}

_ID_PREFIX = re.compile(r"\s*([+-]?\d+)")


# =============================================================================
# Result types
# =============================================================================

@dataclass(frozen=True)
class FieldError:
    field: str
    rule: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one payload."""
    is_valid: bool
    errors: List[FieldError] = field(default_factory=list)
    sanitized: dict = field(default_factory=dict)

    @property
    def message(self) -> str:
        return "; ".join(error.message for error in self.errors)


# =============================================================================
# Field helpers
# =============================================================================

def escape_html(value: str) -> str:
    """Escape the characters that can open markup. Applied exactly once."""
    return "".join(HTML_ESCAPES.get(char, char) for char in value)


def find_sql_keyword(value: str) -> Optional[str]:
    """
    Return the first denylisted keyword appearing as a whole
    whitespace-delimited word in value, or None.
    """
    words = value.lower().split()
    for keyword in SQL_KEYWORDS:
        if keyword in words:
            return keyword
    return None


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def as_integer(value: Any) -> Any:
    # 3.0 arrives from JSON as a float but is a whole number
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_item_id(raw: str) -> Optional[int]:
    """
    Parse a path segment as a base-10 integer.

    Leading whitespace and a sign are accepted and anything after the
    leading digits is ignored, so "3abc" parses as 3. Returns None when
    there are no leading digits.
    """
    match = _ID_PREFIX.match(raw or "")
    if not match:
        return None
    return int(match.group(1))


def _keyword_error(keyword: str) -> FieldError:
    return FieldError(
        field="name",
        rule="sql_keyword",
        message=f'Invalid name format: contains SQL keyword "{keyword}"',
    )


# =============================================================================
# Validators
# =============================================================================

def validate_and_sanitize(data: dict, require_id: bool = True) -> ValidationResult:
    """
    Validate a complete todo item payload.

    Expects the keys todoItemId, name, priority and completed. The sanitized
    record is returned even when invalid; callers must discard it then.
    """
    todo_item_id = data.get("todoItemId")
    name = data.get("name")
    priority = data.get("priority")
    completed = data.get("completed")

    errors = []

    if require_id and not is_integer(todo_item_id):
        errors.append(FieldError("todoItemId", "type", "Invalid ID format"))

    if not isinstance(name, str) or name.strip() == "":
        errors.append(FieldError("name", "type", "Invalid name format"))

    if not is_integer(priority):
        errors.append(FieldError("priority", "type", "Invalid priority format"))

    if not isinstance(completed, bool):
        errors.append(FieldError("completed", "type", "Invalid completed format"))

    sanitized_name = name
    if isinstance(name, str):
        sanitized_name = escape_html(name)
        keyword = find_sql_keyword(sanitized_name)
        if keyword:
            errors.append(_keyword_error(keyword))

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        sanitized={
            "todo_item_id": as_integer(todo_item_id),
            "name": sanitized_name,
            "priority": as_integer(priority),
            "completed": completed,
        },
    )


def validate_partial(data: dict) -> ValidationResult:
    """
    Validate a partial update payload.

    Absent fields are neither checked nor returned. Type errors are collected
    together; the keyword scan runs on the raw name only once types pass and
    stops at the first hit with that single error.
    """
    errors = []

    if "name" in data and not isinstance(data["name"], str):
        errors.append(FieldError("name", "type", "Invalid name format"))

    if "priority" in data and not is_integer(data["priority"]):
        errors.append(FieldError("priority", "type", "Invalid priority format"))

    if "completed" in data and not isinstance(data["completed"], bool):
        errors.append(FieldError("completed", "type", "Invalid completed format"))

    if errors:
        return ValidationResult(is_valid=False, errors=errors)

    sanitized = {}

    if "name" in data:
        keyword = find_sql_keyword(data["name"])
        if keyword:
            return ValidationResult(is_valid=False, errors=[_keyword_error(keyword)])
        sanitized["name"] = escape_html(data["name"])

    if "priority" in data:
        sanitized["priority"] = as_integer(data["priority"])

    if "completed" in data:
        sanitized["completed"] = data["completed"]

    return ValidationResult(is_valid=True, sanitized=sanitized)
