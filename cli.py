import argparse
import logging
import os
import random
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Callable

import uvicorn

from core.json_utils import read_json_file
from core.logging_setup import setup_console_logging
from document import QuizValidationError, parse_quiz
from models import MATCHING, MULTIPLE_CHOICE, Quiz, QuizQuestion
from scoring import ScoreReport, compute_report
from session import QuizSession

log = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: n = next, p = previous, g N = go to question N, "
    "s = show/hide answer, c = check, x = clear answer, q = submit, h = help. "
    "Anything else is recorded as your answer."
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Practice quizzes from JSON files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate a quiz file")
    check.add_argument("file", type=Path, help="Path to quiz .json file")

    practice = subparsers.add_parser("practice", help="Take a quiz in the terminal")
    practice.add_argument("file", type=Path, help="Path to quiz .json file")
    practice.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for option shuffling",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--data-dir", default="data/quizzes")
    return parser.parse_args(argv)


def load_quiz_file(path: Path) -> Quiz:
    return parse_quiz(read_json_file(path))


def parse_answer(question: QuizQuestion, options: list[str], raw: str):
    """Turn a typed line into an answer of the shape the question expects."""
    text = raw.strip()
    if question.type == MULTIPLE_CHOICE and options:
        picked = []
        for part in text.split(","):
            part = part.strip()
            if part.isdigit() and 1 <= int(part) <= len(options):
                picked.append(options[int(part) - 1])
            elif part:
                picked.append(part)
        if question.is_multi_select:
            return picked
        return picked[0] if picked else ""
    if question.type == MATCHING and question.headings:
        labels = question.paragraph_labels
        matches = {}
        for heading, part in zip(question.headings, text.split(",")):
            part = part.strip()
            if part.isdigit() and 1 <= int(part) <= len(labels):
                matches[heading] = labels[int(part) - 1]
            elif part:
                matches[heading] = part
        return matches
    return text


def format_answer(value) -> str:
    if isinstance(value, Mapping):
        return "; ".join(f"{key} -> {item}" for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return ", ".join(value)
    return str(value)


def render_question(session: QuizSession, write: Callable[[str], None]) -> None:
    question = session.current_question
    if question is None:
        write("No questions in this quiz.")
        return
    write("")
    write(
        f"Question {session.current_index + 1} of {len(session.quiz)} "
        f"[{question.type}]  answered {session.answered_count}/{len(session.quiz)}"
    )
    if question.instruction:
        write(question.instruction)
    if question.prompt:
        write(question.prompt)
    for number, option in enumerate(session.current_options, start=1):
        write(f"  {number}. {option}")
    if question.type == MATCHING:
        for paragraph in question.paragraphs or []:
            write(f"  {paragraph}")
        for number, heading in enumerate(question.headings or [], start=1):
            write(f"  [{number}] {heading}")
        for number, label in enumerate(question.paragraph_labels, start=1):
            write(f"  {number}) {label}")
    elif question.choices():
        write("  Choices: " + " / ".join(question.choices()))
    if session.current_answer is not None:
        write(f"Your answer: {format_answer(session.current_answer)}")
    if session.show_answer:
        write(f"Correct answer: {format_answer(question.answer)}")
        if question.explanation:
            write(f"Explanation: {question.explanation}")


def render_report(report: ScoreReport, write: Callable[[str], None]) -> None:
    write("")
    write(
        f"Score: {report.correct_count}/{report.total_count} ({report.percentage}%), "
        f"answered {report.answered_count}, skipped {report.skipped_count}"
    )
    for item in report.per_question:
        write(f"  {item.question_number}. {item.status}")


def run_practice(
    session: QuizSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> ScoreReport:
    """Interactive attempt; returns the report once the user submits."""
    write(HELP_TEXT)
    while not session.submitted:
        render_question(session, write)
        try:
            line = read("> ")
        except EOFError:
            session.submit()
            break
        command = line.strip()
        if command == "q":
            session.submit()
        elif command == "n":
            session.next()
        elif command == "p":
            session.previous()
        elif command.startswith("g ") and command[2:].strip().isdigit():
            session.go_to_number(int(command[2:].strip()))
        elif command == "s":
            session.toggle_answer()
        elif command == "c":
            write("Correct!" if session.check_current() else "Incorrect")
        elif command == "x":
            question = session.current_question
            if question is not None:
                session.clear_answer(question.id)
        elif command == "h":
            write(HELP_TEXT)
        elif command and session.current_question is not None:
            session.answer_current(
                parse_answer(session.current_question, session.current_options, command)
            )

    report = compute_report(session.quiz, session)
    render_report(report, write)
    return report


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging()

    if args.command == "serve":
        data_dir = Path(args.data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        os.environ["QUIZ_DATA_DIR"] = str(data_dir)

        uvicorn.run("api.app:app", host=args.host, port=args.port, log_level="info")
        return 0

    try:
        quiz = load_quiz_file(args.file)
    except QuizValidationError as exc:
        print(f"Invalid quiz: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    if args.command == "check":
        print(f"{args.file}: {len(quiz)} questions")
        for question_type, count in quiz.count_by_type().items():
            print(f"  {question_type}: {count}")
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    session = QuizSession(rng=rng)
    session.load_quiz(quiz)
    log.debug(f"Starting practice of {args.file}")
    run_practice(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
