"""
Command line interface for katsuyo.

Usage:
    katsuyo verb 食べる           # class and all ten forms
    katsuyo --json verb 食べる    # same, as JSON
    katsuyo kana あいうえお        # kana conversion
    katsuyo                       # interactive session
"""

import argparse
import json
import logging
import sys
from typing import Optional

from logger import setup_logging
from services import __version__
from services.errors import ConjugationError
from services.kana import KanaConversion, convert_kana
from services.verb import classify, conjugate_all

PROMPT = "> "

HELP_TEXT = """
katsuyo - Japanese verb conjugation shell

Commands:
  help, h              - show this help
  verb <verb>          - show all conjugations of a verb (e.g. verb 食べる)
  kana <text>          - convert between hiragana and katakana (e.g. kana あいうえお)
  exit, quit, q        - leave the session

Examples:
  > verb たべる
  > verb 行く
  > kana カタカナ
"""


def format_verb(verb: str) -> str:
    """Render class and all forms of a verb as text.

    Raises:
        ConjugationError: If the verb cannot be classified or conjugated
    """
    verb_class = classify(verb)
    forms = conjugate_all(verb)

    lines = [
        f"Verb: {verb}",
        f"Class: {verb_class.label} ({verb_class.english})",
        "",
        "Forms:",
    ]
    for form, surface in forms.items():
        lines.append(f"  {form.label}: {surface}")
    return "\n".join(lines)


def format_verb_json(verb: str) -> str:
    verb_class = classify(verb)
    forms = conjugate_all(verb)
    payload = {
        "verb": verb,
        "verb_class": str(verb_class),
        "label": verb_class.label,
        "conjugations": {str(form): surface for form, surface in forms.items()},
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def format_kana(result: KanaConversion) -> str:
    lines = [f"Text: {result.text}"]
    if result.script == "none":
        lines.append("No kana found")
        return "\n".join(lines)
    if result.katakana is not None:
        lines.append(f"Katakana: {result.katakana}")
    if result.hiragana is not None:
        lines.append(f"Hiragana: {result.hiragana}")
    return "\n".join(lines)


def run_command(line: str) -> bool:
    """Execute one interactive command. Returns False when the session should end."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return True

    command = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""

    match command:
        case "help" | "h":
            print(HELP_TEXT)
        case "verb":
            if not arg:
                print("Please give a verb, e.g.: verb 食べる\n")
            else:
                try:
                    print(f"\n{format_verb(arg)}\n")
                except ConjugationError as e:
                    print(f"Error: {e}\n")
        case "kana":
            if not arg:
                print("Please give some kana, e.g.: kana あいうえお\n")
            else:
                print(f"\n{format_kana(convert_kana(arg))}\n")
        case "exit" | "quit" | "q":
            print("Bye!")
            return False
        case _:
            print(f"Unknown command: {command}")
            print("Type help to list commands\n")
    return True


def interactive() -> int:
    """Read commands from stdin until exit or EOF."""
    print("Welcome to katsuyo!")
    print("Type help to list commands\n")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("\nBye!")
            return 0
        if not run_command(line):
            return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="katsuyo",
        description="Katsuyo - Japanese verb classification and conjugation",
    )
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.add_argument("--json", action="store_true", help="print verb output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log classification decisions")

    subparsers = parser.add_subparsers(dest="command")
    verb_parser = subparsers.add_parser("verb", help="show all conjugations of a verb")
    verb_parser.add_argument("verb", help="dictionary form, e.g. 食べる")
    kana_parser = subparsers.add_parser("kana", help="convert between hiragana and katakana")
    kana_parser.add_argument("text")

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.version:
        print(f"katsuyo {__version__}")
        return 0

    if args.command is None:
        return interactive()

    if args.command == "kana":
        print(format_kana(convert_kana(args.text)))
        return 0

    try:
        output = format_verb_json(args.verb) if args.json else format_verb(args.verb)
    except ConjugationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
