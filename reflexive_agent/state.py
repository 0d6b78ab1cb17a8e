# reflexive_agent/state.py
from typing import TypedDict, Optional


class ReviewState(TypedDict):
    code: str
    issue: str
    prompt: str

    review_output: Optional[str]

    # message of the transport error, if the model call failed
    error: Optional[str]
    used_fallback: bool

    next: str
