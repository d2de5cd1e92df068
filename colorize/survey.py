"""
Interactive demo: ask for a few fields, validate them and show a summary.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Union

from colorize.formatter import Colorizer

Validator = Callable[[str], Union[bool, str]]

BANNER_RULE = "=============================="
BANNER_TITLE = "  User Information Collection  "
SUMMARY_TITLE = "Summary of information:"


def not_empty(name: str) -> Validator:
    def validate(value: str) -> Union[bool, str]:
        if not value:
            return f"{name} cannot be empty."
        return True
    return validate


def positive_integer(name: str) -> Validator:
    """
    Accept whole numbers above zero written as plain ASCII decimals.

    "36", "3.0" and "1e2" pass; "1_000", "2.5" and "-4" do not.
    """
    def validate(value: str) -> Union[bool, str]:
        if not value:
            return f"{name} cannot be empty."
        number = 0.0
        if value.isascii() and "_" not in value:
            try:
                number = float(value)
            except ValueError:
                pass
        if not (number > 0 and number.is_integer()):
            return f"{name} must be a positive integer."
        return True
    return validate


@dataclass
class Field:
    """One question of the survey."""
    name: str
    prompt: str
    validate: Validator
    reply: Optional[str] = None  # success message, "{value}" is substituted


DEFAULT_FIELDS = [
    Field("Name", "What's your name?\n", not_empty("Name"), "Hi {value}!"),
    Field("Age", "What's your age?\n", positive_integer("Age"), "Nice! {value} is a great age."),
    Field("Major", "What's your major?\n", not_empty("Major"), "{value} sounds interesting!"),
]


def collect_field(out: Colorizer, field: Field, ask: Callable[[str], str] = input) -> str:
    """
    Ask until the answer validates.

    Validation failures are reported with out.error and the question is
    asked again. EOFError/KeyboardInterrupt from ask propagate.
    """
    while True:
        value = ask(out.format_prompt(field.prompt)).strip()
        result = field.validate(value)
        if result is True:
            return value
        out.error(result if isinstance(result, str) else f"Invalid {field.name}.")


def run_survey(
    out: Colorizer,
    fields: list[Field] = None,
    ask: Callable[[str], str] = input,
    debug: bool = False,
) -> dict[str, str]:
    """
    Run the whole survey and print a summary table.

    With debug set, each accepted answer is echoed as a debug message.

    Returns:
        Answers keyed by field name, in question order
    """
    fields = DEFAULT_FIELDS if fields is None else fields
    answers: dict[str, str] = {}

    (out
        .info(BANNER_RULE)
        .info(BANNER_TITLE, "bright")
        .info(BANNER_RULE))

    for field in fields:
        value = collect_field(out, field, ask)
        answers[field.name] = value
        if debug:
            out.debug(f"{field.name} accepted: {value!r}")
        if field.reply:
            out.success(field.reply.format(value=value))

    out.table(answers, SUMMARY_TITLE)
    return answers
