"""Heuristic gate for conversational turns that should skip skill matching."""

import re

SHORT_APPROVAL = re.compile(r"^(yes|no|ok|sure|nope|yep|yeah|nah)\s*$", re.IGNORECASE)
NUMBERED_RESPONSE = re.compile(r"^\d+(\.|\s|$)")
# Whole words only, so "however ..." and "whatever ..." stay tasks.
QUESTION_TO_ASSISTANT = re.compile(
    r"^(what|why|how|when|where|who|can you|could you|would you|do you)\b",
    re.IGNORECASE,
)
META_DISCUSSION = re.compile(
    r"(what do you think|your thoughts|any ideas|suggestions|recommend)",
    re.IGNORECASE,
)


def is_meta_conversation(message: str) -> bool:
    """
    True for turns that are conversational scaffolding rather than a task:
    - empty input
    - short approvals: yes, no, ok, sure, nope, yep, yeah, nah
    - numbered responses: "1", "2.", "3 something"
    - questions to the assistant: "what...", "how...", "can you...", ...
    - meta-discussion: "what do you think", "your thoughts", "any ideas", ...
    """
    trimmed = message.strip()
    if not trimmed:
        return True
    if SHORT_APPROVAL.match(trimmed):
        return True
    if NUMBERED_RESPONSE.match(trimmed):
        return True
    if QUESTION_TO_ASSISTANT.match(trimmed):
        return True
    if META_DISCUSSION.search(trimmed):
        return True
    return False


__all__ = ["is_meta_conversation"]
