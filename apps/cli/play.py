# apps/cli/play.py
"""
Interactive terminal version of the number baseball game.

Type a 3-digit guess and press Enter. Commands:
  :new          start a new game (asks for confirmation)
  :share        print a shareable result line (after winning)
  :lang ko|en   switch language
  :quit         leave

The engine only returns values (states, scores, errors); every string shown
here comes from packages.ui.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Optional, TextIO

from packages.engine import GameState, reset_game, secret_to_str, start_game, submit_guess
from packages.ui import (
    DEFAULT_LANG,
    attempts_text,
    error_message,
    game_over_text,
    result_text,
    share_text,
    supported_languages,
    translate,
)


HELP = ":new | :share | :lang ko|en | :quit"


def _confirm(prompt: str, read: Callable[[str], str]) -> bool:
    return read(f"{prompt} [y/N] ").strip().lower() in ("y", "yes")


def play(
        *,
        lang: str = DEFAULT_LANG,
        seed: Optional[int] = None,
        url: str = "",
        read: Callable[[str], str] = input,
        out: TextIO = sys.stdout,
        show_secret: bool = False,
) -> GameState:
    """
    Run the read-eval-print loop until :quit or end of input.

    Returns the last game state (handy for tests).
    """
    rng = random.Random(seed)
    state = start_game(rng)

    def say(msg: str = "") -> None:
        print(msg, file=out)

    def banner() -> None:
        say(translate("title", lang))
        say(translate("instructions", lang))
        if show_secret:
            say(f"[debug] secret = {secret_to_str(state.secret)}")

    banner()
    while True:
        try:
            line = read(f"{translate('inputPlaceholder', lang)} > ")
        except EOFError:
            say()
            break
        line = line.strip()
        if not line:
            continue

        if line.startswith(":"):
            cmd, _, arg = line[1:].partition(" ")
            if cmd in ("q", "quit"):
                break
            if cmd == "new":
                if _confirm(translate("confirmReset", lang), read):
                    state = reset_game(rng)
                    banner()
            elif cmd == "share":
                if state.is_over:
                    say(share_text(state, lang, url))
                else:
                    say(translate("shareNotYet", lang))
            elif cmd == "lang":
                arg = arg.strip()
                if arg in supported_languages():
                    lang = arg
                    banner()
                else:
                    say(f"languages: {', '.join(supported_languages())}")
            else:
                say(HELP)
            continue

        res = submit_guess(state, line)
        if not res.ok:
            say(error_message(res.error, lang))
            continue

        state = res.value.state
        say(f"{line}  {result_text(res.value.score, lang)}   "
            f"({translate('attempts', lang)}: {attempts_text(state.attempt_count, lang)})")
        if state.is_over:
            say(game_over_text(state, lang))

    return state


def main():
    ap = argparse.ArgumentParser(description="Number baseball: guess the 3-digit number")
    ap.add_argument("--lang", choices=supported_languages(), default=DEFAULT_LANG,
                    help="message language")
    ap.add_argument("--seed", type=int, help="RNG seed (same seed -> same secrets)")
    ap.add_argument("--url", default="", help="link appended to the :share text")
    ap.add_argument("--show-secret", action="store_true", help="print the secret (debugging)")
    args = ap.parse_args()

    play(lang=args.lang, seed=args.seed, url=args.url, show_secret=args.show_secret)


if __name__ == "__main__":
    main()
