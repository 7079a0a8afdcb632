# Area: Game
"""Oracle prompt construction."""

from __future__ import annotations


PROMPT_TEMPLATE = """
You are an AI assistant for a 20 Questions game.
The secret answer is: "{secret}"

Here is some context about the secret answer: {context}

The user asks a Yes/No question. Follow these rules STRICTLY:
1. Prioritize answering based on the well-known, common understanding of the secret answer "{secret}".
2. Use the provided context *only* to supplement or clarify common knowledge, especially for specific details. Do not rely on context if it contradicts common knowledge about the item.
3. If you are uncertain based on common knowledge AND the context, lean towards "No". Do *not* guess or make assumptions.
4. Respond with *exactly* "Yes" or *exactly* "No". Do not add any explanations, apologies, or extra text.

User Question: {question}

Your Answer (Yes or No):"""


def build_oracle_prompt(secret: str, context: str, question: str) -> str:
    """Same inputs always produce the same prompt."""
    return PROMPT_TEMPLATE.format(
        secret=secret,
        context=context,
        question=question.strip(),
    ).strip()
