"""
Prompt templates sent to the model.

Prompt construction is kept free of I/O so the exact text sent for each
summary style can be checked without calling the model.
"""

from .models import SummaryStyle

SUMMARY_WORD_LIMITS = {
    SummaryStyle.BRIEF: 100,
    SummaryStyle.NORMAL: 250,
    SummaryStyle.DETAILED: 500,
}

SUMMARY_PROMPT_TEMPLATE = """
Summarize the key information from this document into bullet points.
Keep the summary to no more than {word_limit} words.
Use one bullet point per idea and start each bullet with "- ".

Document:
{text}
"""

QUIZ_PROMPT_TEMPLATE = """
Create a multiple-choice quiz with {question_count} questions based ONLY on the summary below.

Instructions:
1. Number each question
2. Give exactly four options per question, labelled A), B), C) and D)
3. Exactly one option must be correct
4. After the options, add a line "Answer: <letter>" with the correct option

Summary:
{summary}
"""


def word_limit_for(style: SummaryStyle) -> int:
    """Return the word limit requested from the model for a summary style."""
    return SUMMARY_WORD_LIMITS[SummaryStyle(style)]


def build_summary_prompt(text: str, style: SummaryStyle = SummaryStyle.NORMAL) -> str:
    """
    Create the summary prompt for the extracted document text.

    Args:
        text: Text extracted from the PDF
        style: Requested summary style

    Returns:
        Formatted prompt string
    """
    prompt = SUMMARY_PROMPT_TEMPLATE.format(
        word_limit=word_limit_for(style),
        text=text,
    )
    return prompt.strip()


def build_quiz_prompt(summary: str, question_count: int = 5) -> str:
    """
    Create the quiz prompt from a generated summary.

    Args:
        summary: Summary returned by the model
        question_count: Number of questions to request

    Returns:
        Formatted prompt string
    """
    if question_count < 1:
        raise ValueError("question_count must be at least 1")

    prompt = QUIZ_PROMPT_TEMPLATE.format(
        question_count=question_count,
        summary=summary,
    )
    return prompt.strip()
