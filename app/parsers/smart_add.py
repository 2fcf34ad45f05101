"""Smart-Add parser - turns pasted free text into project and goal drafts.

The mini-language is line oriented::

    Project: Build a spam classifier
    Month: 2
    Type: Classification
    Task: Collect dataset
    Priority: High

    Goal: Finish course
    Target Value: 5

A block starts at a line beginning with ``Project:`` or ``Goal:`` (any case).
Inside a project block, ``Task:`` starts a task owned by that project. Every
other line is a ``key: value`` pair. Parsing is lenient: unknown keys, lines
without a colon and unparsable numbers are skipped and reported as warnings,
never raised.
"""
import logging
import re
from enum import Enum
from typing import Optional

from app.models.goal import GoalDraft
from app.models.project import ProjectDraft, TaskDraft
from app.models.smart_add import ParseResult, ParseWarning, WarningKind
from app.utils.normalize import normalize_token, parse_float, parse_int, split_field


logger = logging.getLogger(__name__)

PROJECT_MARKER = "project:"
GOAL_MARKER = "goal:"

_BLOCK_BOUNDARY = re.compile(r"\n\s*(?=project:|goal:)", re.IGNORECASE)
_TASK_BOUNDARY = re.compile(r"\n\s*task:", re.IGNORECASE)

DEFAULT_TARGET_VALUE = 1.0


class BlockKind(str, Enum):
    """Top-level block kinds."""

    PROJECT = "project"
    GOAL = "goal"


def split_blocks(text: str) -> list[str]:
    """
    Split raw text into trimmed blocks, in input order.

    The marker line starts the new block and is kept in it. Empty blocks
    are dropped.

    Examples:
        >>> split_blocks("Project: A\\n\\nGoal: B")
        ['Project: A', 'Goal: B']
    """
    blocks = (block.strip() for block in _BLOCK_BOUNDARY.split(text))
    return [block for block in blocks if block]


def classify_block(block: str) -> Optional[tuple[BlockKind, str]]:
    """
    Route a trimmed block by its leading marker.

    Returns:
        (kind, remainder after the marker) or None for unmarked blocks
    """
    lowered = block.lower()
    if lowered.startswith(PROJECT_MARKER):
        return BlockKind.PROJECT, block[len(PROJECT_MARKER):]
    if lowered.startswith(GOAL_MARKER):
        return BlockKind.GOAL, block[len(GOAL_MARKER):]
    return None


def _title_and_fields(segment: str) -> tuple[str, list[str]]:
    """First trimmed line is the title, the rest are field lines."""
    lines = segment.strip().split("\n")
    return lines[0].strip(), lines[1:]


def _iter_fields(lines: list[str], warnings: list[ParseWarning]):
    """Yield (key, value) pairs, recording lines without a colon."""
    for line in lines:
        if not line.strip():
            continue
        field = split_field(line)
        if field is None:
            warnings.append(ParseWarning(kind=WarningKind.MISSING_COLON, text=line.strip()))
            continue
        yield field


def _unknown(key: str, value: str, warnings: list[ParseWarning]) -> None:
    warnings.append(ParseWarning(kind=WarningKind.UNKNOWN_FIELD, text=f"{key}: {value}"))


def parse_task_segment(segment: str, warnings: list[ParseWarning]) -> TaskDraft:
    """Parse one ``Task:`` segment (marker already removed)."""
    title, lines = _title_and_fields(segment)
    task = TaskDraft(title=title)

    for key, value in _iter_fields(lines, warnings):
        if key == "description":
            task.description = value
        elif key == "priority":
            task.priority = value.lower()
        elif key == "due_date":
            task.due_date = value
        elif key == "status":
            task.status = normalize_token(value)
        else:
            _unknown(key, value, warnings)

    return task


def parse_project_block(remainder: str, warnings: list[ParseWarning]) -> ProjectDraft:
    """
    Parse a project block remainder into a project with its tasks.

    Args:
        remainder: Block text after the ``Project:`` marker
        warnings: List that collects skipped input

    Returns:
        ProjectDraft owning zero or more TaskDrafts
    """
    segments = _TASK_BOUNDARY.split(remainder)
    title, lines = _title_and_fields(segments[0])
    project = ProjectDraft(title=title)

    for key, value in _iter_fields(lines, warnings):
        if key == "description":
            project.description = value
        elif key in ("month", "month_id"):
            project.month_id = parse_int(value)
            if project.month_id is None:
                warnings.append(ParseWarning(kind=WarningKind.INVALID_NUMBER, text=f"{key}: {value}"))
        elif key == "type":
            project.type = normalize_token(value)
        elif key == "tech_stack":
            project.tech_stack = value
        elif key == "status":
            project.status = normalize_token(value)
        elif key == "documentation_status":
            project.documentation_status = normalize_token(value)
        elif key == "github_url":
            project.github_url = value
        elif key == "deployment_url":
            project.deployment_url = value
        else:
            _unknown(key, value, warnings)

    for segment in segments[1:]:
        project.add_task(parse_task_segment(segment, warnings))

    return project


def parse_goal_block(remainder: str, warnings: list[ParseWarning]) -> GoalDraft:
    """
    Parse a goal block remainder.

    Args:
        remainder: Block text after the ``Goal:`` marker
        warnings: List that collects skipped input

    Returns:
        GoalDraft with current_value 0
    """
    title, lines = _title_and_fields(remainder)
    goal = GoalDraft(title=title)

    for key, value in _iter_fields(lines, warnings):
        if key == "description":
            goal.description = value
        elif key == "type":
            goal.type = normalize_token(value)
        elif key == "target_value":
            target_value = parse_float(value)
            if target_value is None:
                warnings.append(ParseWarning(kind=WarningKind.INVALID_NUMBER, text=f"{key}: {value}"))
                target_value = DEFAULT_TARGET_VALUE
            goal.target_value = target_value
        elif key == "target_date":
            goal.target_date = value
        elif key == "status":
            goal.status = normalize_token(value)
        else:
            _unknown(key, value, warnings)

    return goal


def parse(text: str) -> ParseResult:
    """
    Parse Smart-Add text into drafts. Pure; performs no I/O.

    Args:
        text: Raw pasted text

    Returns:
        ParseResult with project and goal drafts in input order plus warnings
    """
    result = ParseResult()

    for block in split_blocks(text):
        classified = classify_block(block)
        if classified is None:
            result.warnings.append(
                ParseWarning(kind=WarningKind.UNRECOGNIZED_BLOCK, text=block.split("\n", 1)[0])
            )
            continue

        kind, remainder = classified
        if kind is BlockKind.PROJECT:
            result.items.append(parse_project_block(remainder, result.warnings))
        else:
            result.items.append(parse_goal_block(remainder, result.warnings))

    for warning in result.warnings:
        logger.debug("Smart-Add skipped %s: %r", warning.kind.value, warning.text)

    return result
