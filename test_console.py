import io
import logging

from console import CYAN, PROMPT, RESET, log_level, rank_line, run

def play(lines):
    out = io.StringIO()
    run(stdin=io.StringIO("".join(line + "\n" for line in lines)), stdout=out)
    return out.getvalue()

def test_rank_line_highlights_result():
    assert rank_line("2S, 2H, 3D, 3C, 3H") == f"{CYAN}Poker Rank: Full House{RESET}"

def test_rank_line_reports_parse_error():
    assert rank_line("ZH, 2H, 3H, 4H, 5H") == "Invalid rank character: Z"

def test_loop_until_exit():
    out = play(["4H, 5H, 6H, 7H, 8H", "exit", "2C, 5C, 7C, 9C, KC"])
    assert "Poker Rank: Straight Flush" in out
    assert "Poker Rank: Flush" not in out
    assert out.count(PROMPT) == 2

def test_bad_input_keeps_looping():
    out = play(["ZH, 2H, 3H, 4H, 5H", "2S, 2H, 5D, 5C, 9H"])
    assert "Invalid rank character: Z" in out
    assert "Poker Rank: Two Pair" in out
    assert out.count(PROMPT) == 3

def test_stops_at_end_of_input():
    assert play([]) == PROMPT + "\n"

def test_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("POKER_LOG_LEVEL", "LOUD")
    assert log_level() == logging.INFO
    monkeypatch.setenv("POKER_LOG_LEVEL", "warning")
    assert log_level() == logging.WARNING
