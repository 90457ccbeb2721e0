from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from guessme import config
from guessme.questions.generator import QuestionGenerator
from guessme.subjects import load_subjects
from guessme.util.rng import Rng


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the questions a seed generates.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--subjects", type=str, default=str(ROOT / "data" / "sample_subjects.yml"))
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    generator = QuestionGenerator(Rng(args.seed))
    for subject in load_subjects(Path(args.subjects)):
        question = generator.generate(subject)
        if question is None:
            print(f"{subject.id}: (no question)")
            continue
        print(f"{subject.id}: [{question.category.label}] {question.text}")
        for choice in question.choices:
            marker = "*" if choice == question.correct_answer else " "
            print(f"  {marker} {choice}")


if __name__ == "__main__":
    main()
