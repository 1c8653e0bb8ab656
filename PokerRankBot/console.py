import logging
import os
import sys

from hand_evaluator import classify
from hand_parser import ParseError, parse

PROMPT = ("Enter five cards separated by a comma (Format is AH, 2H, 3H, 4H, 5H, 6H, 7H, "
          "8H, 9H, TH, JH, QH, KH) or type 'EXIT' to quit: ")
EXIT_COMMAND = "EXIT"

CYAN = "\033[96m"
RESET = "\033[0m"


def highlight(text):
    return f"{CYAN}{text}{RESET}"


def rank_line(text):
    """Parse and classify one line. Returns the text to show the user."""
    try:
        hand = parse(text)
    except ParseError as e:
        return str(e)
    return highlight(f"Poker Rank: {classify(hand)}")


def run(stdin=sys.stdin, stdout=sys.stdout):
    """Prompt for hands until EXIT or end of input."""
    while True:
        print(PROMPT, file=stdout)
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line.upper() == EXIT_COMMAND:
            break
        if not line:
            continue
        print(rank_line(line), file=stdout)


def log_level():
    """Level named by POKER_LOG_LEVEL, or INFO when unset or unknown."""
    level = logging.getLevelName(os.getenv("POKER_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def main():
    logging.basicConfig(level=log_level())
    run()


if __name__ == "__main__":
    main()
