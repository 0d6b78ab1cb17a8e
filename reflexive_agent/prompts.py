# reflexive_agent/prompts.py
from dataclasses import dataclass

REVIEW_PREAMBLE = """You are a Reflexive Intelligence Agent, an autonomous system designed to observe, analyze, and improve your own reasoning and code structure.
Your objectives:
- Monitor and evaluate logical consistency, bias, and ethical soundness in AI outputs.
- Identify inefficiencies, flaws, or inconsistencies in reasoning or code.
- Suggest specific, actionable improvements for optimization.
- Maintain alignment with safe and ethical AI practices.
- Provide structured feedback with explanations for each recommendation.
"""


@dataclass(frozen=True)
class ReviewRequest:
    code: str
    issue: str


DEFAULT_REVIEW_REQUEST = ReviewRequest(
    code="""
    function analyzeUserData(data) {
      if (!data) return "Error: Missing input";
      return "User analysis complete";
    }
""",
    issue="The function does not validate data format or handle empty objects properly.",
)

REVIEW_TEMPLATE = """Review the following code for logical or ethical flaws.

Code to analyze:
{code}

Reported issue:
{issue}

Tasks:
1. Identify additional underlying problems.
2. Suggest improvements or a rewritten version of the code.
3. Explain how your revision improves reliability, security, or ethics.
4. End with a short "Reflexive Summary" of what you learned.
"""

MOCK_HEADER = "\n🧩 Demonstrating Reflexive Intelligence Analysis (Mock Response):\n"

# Canned analysis shown when the model can't be reached. Cosmetic only.
MOCK_TEMPLATE = """=== Code Review Analysis ===

Code Under Review:
{code}

Reported Issue: {issue}

🔍 Additional Problems Identified:
1. Type Safety: Function doesn't validate data type or structure
2. Security: No input sanitization against potential malicious payloads
3. Error Handling: Generic error message provides no actionable feedback
4. Functionality: Function always returns success regardless of data quality
5. Logging: No audit trail for data processing attempts

💡 Improved Implementation (Python):
Example usage: analyze_user_data({{"name": "John", "email": "john@example.com"}})
# See reflexive_agent.validation.analyze_user_data for details

🛡️ Security & Reliability Improvements:
- Input Validation: Checks for None, type, and mapping structure
- Reserved Key Protection: Filters dangerous keys before copying
- Structured Responses: Returns Success/Failure values with clear states
- Privacy-Conscious Logging: Logs an id or "anonymous", nothing else
- Error Specificity: Provides actionable error messages

🧠 Reflexive Summary:
Even simple functions can hide security and reliability issues. Robust implementations require input validation, structured error handling, and privacy-conscious logging.
"""


def build_review_prompt(request: ReviewRequest = DEFAULT_REVIEW_REQUEST) -> str:
    return REVIEW_TEMPLATE.format(code=request.code, issue=request.issue)


def mock_review_output(request: ReviewRequest = DEFAULT_REVIEW_REQUEST) -> str:
    return MOCK_TEMPLATE.format(code=request.code, issue=request.issue)
