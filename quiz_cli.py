"""
Terminal front end for the quiz API.

Lets a respondent fill in a quiz step by step and lets an admin glance at
quizzes and their responses.
"""

import argparse
import asyncio
import json
import sys

from classes.quiz_form import FormPrompt, FormState, QuizForm
from model.question_model import CHOICE_TYPES
from utils.quiz_api import QuizAPI, QuizApiError


def render_question(form: QuizForm):
    question = form.current_question
    marker = " *" if question.required else ""
    print(f"\n{form.current_step + 1}. {question.question}{marker}")
    if question.description:
        print(f"   {question.description}")
    if question.type in CHOICE_TYPES:
        for idx, option in enumerate(question.options, start=1):
            print(f"   [{idx}] {option}")
    elif question.type == "scale":
        left = question.scale_labels.left or "1"
        right = question.scale_labels.right or "10"
        print(f"   1 ({left}) ... 10 ({right})")


def read_answer(form: QuizForm, raw: str):
    question = form.current_question
    if question.type in ("radio", "select") and raw.isdigit():
        index = int(raw) - 1
        raw = question.options[index] if 0 <= index < len(question.options) else raw
    if question.type == "checkbox":
        chosen = []
        for part in filter(None, (p.strip() for p in raw.split(","))):
            index = int(part) - 1 if part.isdigit() else -1
            chosen.append(question.options[index] if 0 <= index < len(question.options) else part)
        return chosen
    return raw


async def take_quiz(api: QuizAPI, slug: str) -> int:
    form = QuizForm(api, slug)
    await form.load()
    if form.state == FormState.ERROR:
        print(form.error)
        return 1

    print(form.quiz["title"])
    if form.quiz.get("description"):
        print(form.quiz["description"])
    print("Type '<' to go back.")

    while form.state in (FormState.QUESTION, FormState.CONTACT):
        try:
            if form.state == FormState.QUESTION and form.current_question is None:
                await form.next()
            elif form.state == FormState.QUESTION:
                if form.settings.show_progress_bar:
                    print(f"\nProgress: {form.progress:.0%}")
                render_question(form)
                raw = input("> ").strip()
                if raw == "<":
                    form.previous()
                    continue
                form.set_answer(read_answer(form, raw))
                await form.next()
            else:
                print("\nContact Information")
                for field in form.settings.contact_fields:
                    form.set_contact(field, input(f"{field.capitalize()}: ").strip())
                await form.submit()
        except FormPrompt as e:
            print(e)

    if form.state == FormState.ERROR:
        print(form.error)
        return 1

    print("\nThank You! Your response has been submitted successfully.")
    if form.confirmation_email:
        print(f"A confirmation email has been sent to {form.confirmation_email}")
    return 0


async def run(args) -> int:
    api = QuizAPI(base_url=args.api_url)
    await api.setup()
    try:
        if args.command == "take":
            return await take_quiz(api, args.slug)
        if args.command == "quizzes":
            data = await (api.get_all_quizzes_admin() if args.all else api.get_all_quizzes())
        elif args.command == "responses":
            data = await api.get_quiz_responses(args.quiz_id)
        else:
            data = await api.get_response_stats(args.quiz_id)
        print(json.dumps(data, indent=2))
        return 0
    except QuizApiError as e:
        print(f"Error ({e.status}): {e.message}", file=sys.stderr)
        return 1
    finally:
        await api.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Quiz platform terminal client")
    parser.add_argument("--api-url", default=None, help="Base URL of the quiz API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    take = subparsers.add_parser("take", help="Fill in a quiz")
    take.add_argument("slug")

    quizzes = subparsers.add_parser("quizzes", help="List quizzes")
    quizzes.add_argument("--all", action="store_true", help="Include inactive quizzes")

    responses = subparsers.add_parser("responses", help="List responses for a quiz")
    responses.add_argument("quiz_id")

    stats = subparsers.add_parser("stats", help="Response count and the latest responses")
    stats.add_argument("quiz_id")

    args = parser.parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
