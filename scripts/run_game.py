from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from guessme import config
from guessme.domain.models import Question
from guessme.engine.achievements import progress_label
from guessme.engine.session import AnswerResult, GameSession
from guessme.persistence.db import SQLiteSnapshotStore
from guessme.subjects import load_subjects
from guessme.util.rng import Rng


def _format_duration(seconds: float) -> str:
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:d}h {minutes:02d}m {secs:02d}s"


def _status_line(session: GameSession) -> str:
    lives = session.lives_state()
    score = session.score_state()
    hearts = "*" * lives.lives + "." * (lives.max_lives - lives.lives)
    line = f"Lives [{hearts}]  Score {score.score}  Streak {score.streak}  Best {score.highest_streak}"
    if lives.time_until_next_life is not None:
        line += f"  Refill in {_format_duration(lives.time_until_next_life.total_seconds())}"
    return line


def _print_question(question: Question) -> None:
    print()
    print(f"[{question.category.label}] {question.text}")
    for idx, choice in enumerate(question.choices, start=1):
        print(f"{idx}) {choice}")


def _print_result(result: AnswerResult) -> None:
    if result.is_correct:
        print(f"Correct! +{result.points_awarded} points.")
    else:
        print(f"Wrong. The answer was {result.correct_answer}. Lives left: {result.lives}.")
    for achievement in result.new_achievements:
        print(f"Achievement unlocked: {achievement.name} - {achievement.description}")


def _choose(question: Question) -> str | None:
    choice = input("> ").strip().lower()
    if choice == "q":
        return None
    if not choice.isdigit():
        return ""
    index = int(choice) - 1
    if index < 0 or index >= len(question.choices):
        return ""
    return question.choices[index]


def _print_achievements(session: GameSession) -> None:
    stats = session.scores.stats()
    print("Achievements:")
    for definition in session.achievements:
        mark = "x" if definition.id in session.unlocked else " "
        print(f"[{mark}] {definition.name} ({definition.tier}) {progress_label(definition, stats)}")


def _run_round(session: GameSession, smoke: bool) -> None:
    question = session.question
    last_tick = session.clock.now()
    while question is not None:
        now = session.clock.now()
        if (now - last_tick).total_seconds() >= config.REGEN_CHECK_INTERVAL_SECONDS:
            session.tick(now)
            last_tick = now
        _print_question(question)
        print(_status_line(session))
        if smoke:
            answer = question.choices[0]
            print(f"> {answer}")
        else:
            answer = _choose(question)
            if answer is None:
                return
            if not answer:
                print("Pick one of the listed numbers, or q to quit.")
                continue
        result = session.submit_answer(answer)
        _print_result(result)
        question = result.next_question
    if session.is_game_over and session.lives.is_empty:
        print("Out of lives. " + _status_line(session))
    elif session.needs_subjects:
        print("No more people to guess about.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a round of Guess Me in the terminal.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--user", type=str, default="local-player")
    parser.add_argument(
        "--subjects",
        type=str,
        default=str(ROOT / "data" / "sample_subjects.yml"),
        help="YAML file listing the people to guess about.",
    )
    parser.add_argument(
        "--db",
        type=str,
        default=str(ROOT / "data" / "guessme.db"),
        help="SQLite database path for saved progress.",
    )
    parser.add_argument(
        "--no-db",
        action="store_true",
        help="Run without saving progress.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Forget saved progress for the user before starting.",
    )
    parser.add_argument(
        "--smoke",
        action="store_true",
        help="Answer the first choice of every question and exit.",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    store = None if args.no_db else SQLiteSnapshotStore(Path(args.db))
    if store is not None and args.reset:
        store.delete(args.user)
    try:
        session = GameSession(args.user, store=store, rng=Rng(args.seed))
        subjects = load_subjects(Path(args.subjects))
        session.start(subjects)
        if session.is_game_over and session.lives.is_empty:
            print("No lives left. " + _status_line(session))
            return
        _run_round(session, smoke=args.smoke)
        _print_achievements(session)
    finally:
        if store is not None:
            store.close()


if __name__ == "__main__":
    main()
