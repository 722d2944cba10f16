"""Shepherd CLI - weekly planner."""

import json
import logging
import sys
from dataclasses import replace
from datetime import date, datetime, time

import click

from .config import CONFIG_FILE, Config, load_config
from .core.activities import (
    Category,
    SubType,
    Task,
    category_color,
    category_label,
    default_sub_type,
    parse_category,
    parse_sub_type,
    sub_type_label,
    sub_types_for,
)
from .core.balance import BalanceReport, format_hours
from .core.calendar import DayBucket
from .core.profile import DAYS_OF_WEEK, UserProfile, parse_day
from .core.validation import TaskDraft, ValidationResult
from .workflows import IncompleteDraftError, PlannerSession, SubmissionBlockedError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


@click.group()
@click.version_option(package_name="shepherd")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Shepherd - balance ministry, family and personal growth."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING),
    )
    ctx.obj = config


# ============== Rendering ==============


def _task_line(task: Task) -> str:
    line = f"  {task.format_time():11} {task.title}"
    if task.bible_reference:
        line += f" [{task.bible_reference}]"
    if task.is_recurring:
        line += " (recurring)"
    return click.style(line, fg=category_color(task.category))


def _show_week(days: list[DayBucket], as_json: bool) -> None:
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": day.date.isoformat(),
                        "day": day.day_name,
                        "is_rest_day": day.is_rest_day,
                        "tasks": [t.to_dict() for t in day.tasks],
                    }
                    for day in days
                ],
                indent=2,
            )
        )
        return

    today = date.today()
    for i, day in enumerate(days):
        if i:
            click.echo()
        header = f"### {day.day_name}, {day.date.strftime('%B %d')}"
        if day.is_rest_day:
            header += " (rest day)"
        click.echo(click.style(header, bold=day.date == today))
        if day.is_free:
            click.echo("  Free")
        for task in day.tasks:
            click.echo(_task_line(task))


def _show_report(report: BalanceReport, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    if report.grand_total == 0:
        click.echo("No data to display.")
        return

    click.echo("Balance report\n")
    for category in Category:
        label = f"{category_label(category):16}"
        share = f"{report.percentage(category):5.1f}%"
        hours = format_hours(report.total(category))
        click.echo(click.style(f"  {label} {share}  {hours}", fg=category_color(category)))
    click.echo(f"\n  {'Total':16} {format_hours(report.grand_total)}")


def _show_profile(profile: UserProfile) -> None:
    click.echo(f"Name:     {profile.name}")
    click.echo(f"Rest day: {profile.rest_day_name}")


def _show_validation(result: ValidationResult) -> None:
    if result.rest_day_warning:
        click.echo(click.style(f"  ! {result.rest_day_warning}", fg="yellow"))
    if result.duration_error:
        click.echo(click.style(f"  x {result.duration_error}", fg="red"))


# ============== Commands ==============


@main.command()
@click.option("--date", "-d", "target_date", type=click.DateTime([DATE_FORMAT]), default=None,
              help="Any date in the week to show (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def week(config: Config, target_date: datetime | None, as_json: bool):
    """Show the weekly calendar."""
    session = PlannerSession.from_config(config)
    reference = target_date.date() if target_date else date.today()
    _show_week(session.week(reference), as_json)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def report(config: Config, as_json: bool):
    """Show the time-balance report."""
    session = PlannerSession.from_config(config)
    _show_report(session.balance(), as_json)


@main.command()
@click.pass_obj
def settings(config: Config):
    """Show the profile settings."""
    _show_profile(config.profile())
    click.echo(f"\nConfigured in {CONFIG_FILE}")


@main.command()
@click.option("--title", default="Untitled", help="Activity title")
@click.option("--category", "-c", required=True,
              type=click.Choice([c.name for c in Category], case_sensitive=False))
@click.option("--sub-type", "-t", default=None,
              type=click.Choice([s.name for s in SubType], case_sensitive=False),
              help="Activity type, defaults to the category's usual one")
@click.option("--date", "-d", "target_date", type=click.DateTime([DATE_FORMAT]), default=None,
              help="Date (YYYY-MM-DD), defaults to today")
@click.option("--start", type=click.DateTime([TIME_FORMAT]), default="09:00", help="Start time (HH:MM)")
@click.option("--end", type=click.DateTime([TIME_FORMAT]), default="10:00", help="End time (HH:MM)")
@click.pass_obj
def check(
    config: Config,
    title: str,
    category: str,
    sub_type: str | None,
    target_date: datetime | None,
    start: datetime,
    end: datetime,
):
    """Check an activity against the scheduling rules."""
    cat = parse_category(category)
    draft = TaskDraft(
        title=title,
        category=cat,
        sub_type=parse_sub_type(sub_type) if sub_type else default_sub_type(cat),
        date=target_date.date() if target_date else date.today(),
        start=start.time(),
        end=end.time(),
    )
    result = PlannerSession.from_config(config).check(draft)

    if not result.messages:
        click.echo("OK")
        return
    _show_validation(result)
    if result.blocked:
        sys.exit(1)


@main.command()
@click.pass_obj
def session(config: Config):
    """Interactive planning session (state is kept until you quit)."""
    planner = PlannerSession.from_config(config)
    click.echo(f"Welcome, {planner.profile.name}. Commands: add, week, report, settings, quit")

    while True:
        command = click.prompt(">", default="", show_default=False).strip().lower()
        match command:
            case "add" | "a":
                _add_task(planner)
            case "week" | "w":
                _show_week(planner.week(), as_json=False)
            case "report" | "r":
                _show_report(planner.balance(), as_json=False)
            case "settings" | "s":
                _edit_settings(planner)
            case "quit" | "q" | "exit":
                click.echo("Goodbye. Nothing is saved between sessions.")
                return
            case "":
                continue
            case _:
                click.echo(f"Unknown command: {command}")


def _prompt_time(label: str, default: str) -> datetime:
    return click.prompt(label, type=click.DateTime([TIME_FORMAT]), default=default)


def _edit_draft(planner: PlannerSession) -> TaskDraft:
    """Fill in a draft field by field, re-checking the rules after each edit."""
    title = click.prompt("Title")
    category = parse_category(
        click.prompt(
            "Category",
            type=click.Choice([c.name for c in Category], case_sensitive=False),
            default=Category.MINISTRY.name,
        )
    )
    draft = TaskDraft(
        title=title,
        category=category,
        sub_type=default_sub_type(category),
        date=date.today(),
        start=time(9, 0),
        end=time(10, 0),
    )

    choices = sub_types_for(category)
    click.echo("Types: " + ", ".join(f"{s.name} ({sub_type_label(s)})" for s in choices))
    sub_type = click.prompt(
        "Type",
        type=click.Choice([s.name for s in choices], case_sensitive=False),
        default=draft.sub_type.name,
    )
    draft = replace(draft, sub_type=parse_sub_type(sub_type))
    _show_validation(planner.check(draft))

    day = click.prompt("Date", type=click.DateTime([DATE_FORMAT]), default=draft.date.isoformat())
    draft = replace(draft, date=day.date())
    _show_validation(planner.check(draft))

    draft = replace(draft, start=_prompt_time("Start", "09:00").time())
    draft = replace(draft, end=_prompt_time("End", "10:00").time())
    _show_validation(planner.check(draft))

    if draft.sub_type == SubType.SERMON_PREP:
        draft = replace(
            draft,
            bible_reference=click.prompt("Bible reference", default="", show_default=False),
            notes=click.prompt("Main ideas", default="", show_default=False),
        )
    return replace(draft, is_recurring=click.confirm("Recurring?", default=False))


def _add_task(planner: PlannerSession) -> None:
    draft = _edit_draft(planner)

    while planner.check(draft).blocked:
        click.echo("Please adjust the time before saving.")
        if not click.confirm("Change the times?", default=True):
            click.echo("Discarded.")
            return
        draft = replace(draft, start=_prompt_time("Start", draft.start.strftime(TIME_FORMAT)).time())
        draft = replace(draft, end=_prompt_time("End", draft.end.strftime(TIME_FORMAT)).time())
        _show_validation(planner.check(draft))

    try:
        task, _ = planner.create_task(draft)
    except (IncompleteDraftError, SubmissionBlockedError) as e:
        click.echo(f"Error: {e}", err=True)
        return
    click.echo(f"✓ Saved {task.title} on {task.start_time.strftime('%A, %b %d')}")


def _edit_settings(planner: PlannerSession) -> None:
    _show_profile(planner.profile)
    name = click.prompt("Name", default=planner.profile.name)
    click.echo("Days: " + ", ".join(f"{i}={d}" for i, d in enumerate(DAYS_OF_WEEK)))
    raw_day = click.prompt("Rest day", default=str(planner.profile.rest_day))
    try:
        planner.update_profile(name=name, rest_day=parse_day(raw_day))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        return
    click.echo(f"✓ Rest day is now {planner.profile.rest_day_name}")


if __name__ == "__main__":
    main()
