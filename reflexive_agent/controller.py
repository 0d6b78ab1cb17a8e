from .state import ReviewState


def controller(state: ReviewState):
    """
    Deterministic routing:
    - Output present (model or fallback) -> finish
    - No output, no error -> review
    - Review failed -> fallback
    """
    if state["review_output"] is not None:
        nxt = "finish"
    elif state["error"] is None:
        nxt = "review"
    else:
        nxt = "fallback"

    return {"next": nxt}
