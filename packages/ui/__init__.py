from .messages import MESSAGES, DEFAULT_LANG, translate, supported_languages
from .render import error_message, result_text, attempts_text, history_lines, game_over_text, share_text

__all__ = [
    "MESSAGES", "DEFAULT_LANG", "translate", "supported_languages",
    "error_message", "result_text", "attempts_text", "history_lines", "game_over_text", "share_text",
]
