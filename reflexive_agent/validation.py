# reflexive_agent/validation.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

# keys that must never be copied into a record that may later be merged elsewhere
DANGEROUS_KEYS = frozenset({"__proto__", "constructor", "prototype"})

ANONYMOUS_USER = "anonymous"
SUCCESS_MESSAGE = "User analysis completed successfully"

ERR_NULL_INPUT = "Input cannot be null or undefined"
ERR_NOT_OBJECT = "Input must be a valid object"
ERR_EMPTY_OBJECT = "Input object cannot be empty"
ERR_INVALID_STRUCTURE = "Invalid data structure provided"


@dataclass(frozen=True)
class Success:
    message: str
    processed_field_count: int

    success = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "processedFields": self.processed_field_count,
        }


@dataclass(frozen=True)
class Failure:
    error_reason: str

    success = False

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error_reason}


AnalysisResult = Union[Success, Failure]


def sanitize_user_data(data: Mapping) -> Dict[str, Any]:
    """
    Defensive copy of `data`:
    - drops non-string keys and anything in DANGEROUS_KEYS
    - strips surrounding whitespace from string values
    The input mapping is never modified.
    """
    cleaned: Dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str) or key in DANGEROUS_KEYS:
            continue
        cleaned[key] = value.strip() if isinstance(value, str) else value
    return cleaned


def is_valid_data_structure(data: Any) -> bool:
    return isinstance(data, Mapping) and len(data) > 0


def log_analysis_attempt(user_id: str) -> None:
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    logger.info("Analysis attempted for user: %s at %s", user_id, ts)


def analyze_user_data(data: Any) -> AnalysisResult:
    """
    Validate -> sanitize -> re-check -> audit log.
    Every rejection comes back as a Failure; nothing here raises.
    """
    if data is None:
        return Failure(ERR_NULL_INPUT)

    # str/list/tuple/numbers all land here
    if not isinstance(data, Mapping):
        return Failure(ERR_NOT_OBJECT)

    if len(data) == 0:
        return Failure(ERR_EMPTY_OBJECT)

    sanitized = sanitize_user_data(data)

    if not is_valid_data_structure(sanitized):
        return Failure(ERR_INVALID_STRUCTURE)

    user_id = sanitized.get("id")
    if not isinstance(user_id, str) or not user_id:
        user_id = ANONYMOUS_USER
    log_analysis_attempt(user_id)

    return Success(SUCCESS_MESSAGE, len(sanitized))


# short names used by callers that think in validator/sanitizer terms
classify = analyze_user_data
sanitize = sanitize_user_data
