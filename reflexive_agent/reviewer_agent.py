import asyncio
import logging

from langchain_core.messages import HumanMessage, SystemMessage

from .llm import get_llm, get_preamble, get_timeout
from .prompts import REVIEW_PREAMBLE, ReviewRequest, mock_review_output
from .state import ReviewState

logger = logging.getLogger(__name__)

_default_llm = None


def get_default_llm():
    global _default_llm
    if _default_llm is None:
        _default_llm = get_llm("reviewer")
    return _default_llm


async def submit_prompt(prompt_text: str, llm=None, timeout: float | None = None) -> str:
    """
    One request/response with the chat model. The call runs as its own task,
    so callers can cancel it or bound it with `timeout` (seconds).
    Errors from the model are not caught here.
    """
    llm = llm or get_default_llm()
    prompt = [
        SystemMessage(content=get_preamble("reviewer") or REVIEW_PREAMBLE),
        HumanMessage(content=prompt_text),
    ]
    resp = await asyncio.wait_for(llm.ainvoke(prompt), timeout)
    content = resp.content
    return content if isinstance(content, str) else str(content)


def make_reviewer(llm=None, timeout: float | None = None):
    if timeout is None:
        timeout = get_timeout("reviewer")

    async def reviewer(state: ReviewState):
        try:
            text = await submit_prompt(state["prompt"], llm=llm, timeout=timeout)
        except Exception as exc:
            # single catch point for transport errors; the graph falls back
            logger.warning("review request failed: %s", exc)
            return {"error": str(exc) or exc.__class__.__name__}
        return {
            "review_output": text,
            "error": None,
        }

    return reviewer


def fallback(state: ReviewState):
    request = ReviewRequest(code=state["code"], issue=state["issue"])
    return {
        "review_output": mock_review_output(request),
        "used_fallback": True,
    }
