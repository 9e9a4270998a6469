from .answer_checks import (
    check_choice,
    check_cloze_answer,
    check_roleplay_reply,
    check_sentence_order,
    sentence_tokens,
)

__all__ = [
    "check_choice",
    "check_cloze_answer",
    "check_roleplay_reply",
    "check_sentence_order",
    "sentence_tokens",
]
