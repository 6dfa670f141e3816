"""
Localized message tables.

Keys are shared across languages; a missing key falls back to the key itself
so a half-translated table never crashes the UI.
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LANG = "ko"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ko": {
        "title": "숫자 야구 게임",
        "instructions": "중복 없는 3자리 숫자를 맞혀 보세요!",
        "inputPlaceholder": "3자리 숫자 입력",
        "attempts": "시도 횟수",
        "submit": "확인",
        "reset": "새 게임",
        "strike": "S",
        "ball": "B",
        "out": "아웃",
        "alertThreeDigits": "3자리 숫자를 입력해주세요!",
        "alertNumbersOnly": "숫자만 입력해주세요!",
        "alertNoDuplicates": "중복되지 않는 숫자를 입력해주세요!",
        "alertGameOver": "게임이 끝났습니다. 새 게임을 시작해주세요!",
        "confirmReset": "새 게임을 시작하시겠습니까?",
        "gameOverTitle": "🎉 축하합니다!",
        "gameOverMsg": "정답을 맞혔습니다!",
        "gameOverAttempts": "시도 횟수:",
        "attemptsUnit": "{n}회",
        "shareBtn": "결과 공유하기",
        "shareTitle": "숫자 야구 게임",
        "shareText": "숫자 야구 게임을 클리어했습니다! 시도 횟수:",
        "shareCopied": "결과가 클립보드에 복사되었습니다!",
        "shareFailed": "복사에 실패했습니다.",
        "shareNotYet": "게임을 클리어한 뒤에 공유할 수 있습니다.",
    },
    "en": {
        "title": "Number Baseball",
        "instructions": "Guess the 3-digit number with no repeated digits!",
        "inputPlaceholder": "Enter 3 digits",
        "attempts": "Attempts",
        "submit": "Submit",
        "reset": "New Game",
        "strike": "S",
        "ball": "B",
        "out": "Out",
        "alertThreeDigits": "Please enter exactly 3 digits!",
        "alertNumbersOnly": "Please enter numbers only!",
        "alertNoDuplicates": "Please enter digits without duplicates!",
        "alertGameOver": "The game is over. Please start a new game!",
        "confirmReset": "Start a new game?",
        "gameOverTitle": "🎉 Congratulations!",
        "gameOverMsg": "You found the number!",
        "gameOverAttempts": "Attempts:",
        "attemptsUnit": "{n} attempts",
        "shareBtn": "Share Result",
        "shareTitle": "Number Baseball",
        "shareText": "I cleared Number Baseball in",
        "shareCopied": "Result copied to clipboard!",
        "shareFailed": "Copy failed.",
        "shareNotYet": "Win a game first to share your result.",
    },
}


def supported_languages():
    return sorted(MESSAGES.keys())


def translate(key: str, lang: str = DEFAULT_LANG) -> str:
    """Look up `key` in the `lang` table; unknown keys come back unchanged."""
    if lang not in MESSAGES:
        raise ValueError(f"Unsupported language: {lang}. Available: {supported_languages()}")
    return MESSAGES[lang].get(key, key)
