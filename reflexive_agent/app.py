from typing import Callable, Literal
from langgraph.graph import StateGraph, END

from .state import ReviewState
from .controller import controller
from .prompts import DEFAULT_REVIEW_REQUEST, MOCK_HEADER, ReviewRequest, build_review_prompt
from .reviewer_agent import fallback, make_reviewer


def route(state: ReviewState) -> Literal["review", "fallback", END]:
    if state["next"] == "finish":
        return END
    return state["next"]  # type: ignore


def build_app(llm=None, timeout: float | None = None):
    g = StateGraph(ReviewState)

    g.add_node("controller", controller)
    g.add_node("review", make_reviewer(llm, timeout))
    g.add_node("fallback", fallback)

    g.set_entry_point("controller")

    g.add_conditional_edges("controller", route, {
        "review": "review",
        "fallback": "fallback",
        END: END
    })

    # loop back
    g.add_edge("review", "controller")
    g.add_edge("fallback", "controller")

    return g.compile()


async def run_reflexive_review(
    request: ReviewRequest = DEFAULT_REVIEW_REQUEST,
    llm=None,
    timeout: float | None = None,
    out: Callable[..., None] = print,
) -> ReviewState:
    app = build_app(llm, timeout)
    init: ReviewState = {
        "code": request.code,
        "issue": request.issue,
        "prompt": build_review_prompt(request),
        "review_output": None,
        "error": None,
        "used_fallback": False,
        "next": "review",
    }
    final = await app.ainvoke(init)

    if final["used_fallback"]:
        out("❌ API Error:", final["error"])
        out(MOCK_HEADER)
        out(final["review_output"])
    else:
        out("🧩 Reflexive Intelligence Output:\n", final["review_output"])
    return final
