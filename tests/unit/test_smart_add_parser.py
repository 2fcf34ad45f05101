"""Tests for the Smart-Add parser."""
import pytest


class TestSplitBlocks:
    """Tests for splitting text into blocks."""

    def test_split_blocks_project_and_goal(self):
        """Test each marker line starts a new block."""
        from app.parsers.smart_add import split_blocks

        text = "Project: A\nType: nlp\n\nGoal: B\nTarget Value: 3"

        assert split_blocks(text) == ["Project: A\nType: nlp", "Goal: B\nTarget Value: 3"]

    def test_split_blocks_case_insensitive(self):
        """Test markers are matched in any case."""
        from app.parsers.smart_add import split_blocks

        text = "PROJECT: A\ngoal: B\nProject: C"

        assert split_blocks(text) == ["PROJECT: A", "goal: B", "Project: C"]

    def test_split_blocks_indented_marker(self):
        """Test whitespace before a marker line is tolerated."""
        from app.parsers.smart_add import split_blocks

        text = "Project: A\n\n   Goal: B"

        assert split_blocks(text) == ["Project: A", "Goal: B"]

    def test_split_blocks_marker_mid_line_not_a_boundary(self):
        """Test a marker inside a line does not split the block."""
        from app.parsers.smart_add import split_blocks

        text = "Project: A\nDescription: pick a Goal: later"

        assert split_blocks(text) == ["Project: A\nDescription: pick a Goal: later"]

    def test_split_blocks_drops_empty(self):
        """Test whitespace-only input yields no blocks."""
        from app.parsers.smart_add import split_blocks

        assert split_blocks("") == []
        assert split_blocks("  \n\n  ") == []


class TestClassifyBlock:
    """Tests for routing blocks by marker."""

    def test_classify_project(self):
        """Test project marker is stripped with its colon."""
        from app.parsers.smart_add import BlockKind, classify_block

        assert classify_block("Project: Test\nMonth: 2") == (BlockKind.PROJECT, " Test\nMonth: 2")

    def test_classify_goal_any_case(self):
        """Test goal marker is matched case-insensitively."""
        from app.parsers.smart_add import BlockKind, classify_block

        assert classify_block("GOAL:Finish") == (BlockKind.GOAL, "Finish")

    def test_classify_unmarked(self):
        """Test unmarked blocks are not routed."""
        from app.parsers.smart_add import classify_block

        assert classify_block("Random notes with no markers") is None
        assert classify_block("Task: orphan") is None


class TestParseProjectBlock:
    """Tests for project block parsing."""

    def test_parse_project_all_fields(self):
        """Test every recognized project field."""
        from app.parsers.smart_add import parse_project_block

        remainder = (
            " Spam Classifier\n"
            "Description: Naive Bayes baseline\n"
            "Month: 3\n"
            "Type: Text Classification\n"
            "Tech Stack: Python, scikit-learn\n"
            "Status: In Progress\n"
            "GitHub URL: https://github.com/me/spam\n"
            "Deployment URL: https://spam.example.com\n"
            "Documentation Status: Needs  Review"
        )
        warnings = []

        project = parse_project_block(remainder, warnings)

        assert project.title == "Spam Classifier"
        assert project.description == "Naive Bayes baseline"
        assert project.month_id == 3
        assert project.type == "text_classification"
        assert project.tech_stack == "Python, scikit-learn"
        assert project.status == "in_progress"
        assert project.github_url == "https://github.com/me/spam"
        assert project.deployment_url == "https://spam.example.com"
        assert project.documentation_status == "needs_review"
        assert project.tasks == []
        assert warnings == []

    def test_parse_project_defaults(self):
        """Test a title-only block keeps every default."""
        from app.parsers.smart_add import parse_project_block

        project = parse_project_block(" Bare", [])

        assert project.title == "Bare"
        assert project.description == ""
        assert project.month_id is None
        assert project.type == "uncategorized"
        assert project.status == "not_started"
        assert project.documentation_status == "not_started"
        assert project.progress_percentage == 0
        assert project.id

    def test_parse_project_month_id_key(self):
        """Test month_id is accepted as an alias of month."""
        from app.parsers.smart_add import parse_project_block

        project = parse_project_block(" P\nmonth_id: 4", [])

        assert project.month_id == 4

    def test_parse_project_invalid_month(self):
        """Test an unparsable month is left unset and reported."""
        from app.parsers.smart_add import parse_project_block
        from app.models.smart_add import WarningKind

        warnings = []
        project = parse_project_block(" P\nMonth: abc", warnings)

        assert project.month_id is None
        assert [w.kind for w in warnings] == [WarningKind.INVALID_NUMBER]

    def test_parse_project_value_keeps_colons_and_case(self):
        """Test values split on the first colon only and keep their case."""
        from app.parsers.smart_add import parse_project_block

        project = parse_project_block(" P\nDESCRIPTION: Note: Keep THIS", [])

        assert project.description == "Note: Keep THIS"

    def test_parse_project_skips_bad_lines(self):
        """Test lines without a colon and unknown keys are skipped."""
        from app.parsers.smart_add import parse_project_block
        from app.models.smart_add import WarningKind

        warnings = []
        project = parse_project_block(" P\njust a note\nColour: blue\nType: NLP", warnings)

        assert project.type == "nlp"
        assert [w.kind for w in warnings] == [WarningKind.MISSING_COLON, WarningKind.UNKNOWN_FIELD]

    def test_parse_project_with_tasks(self):
        """Test task sub-blocks are owned by the project."""
        from app.parsers.smart_add import parse_project_block

        remainder = (
            " Portfolio Site\n"
            "Type: portfolio\n"
            "Task: Design layout\n"
            "Priority: HIGH\n"
            "Due Date: next friday\n"
            "Status: In Progress\n"
            "Description: Figma first\n"
            "\n"
            "  task: Deploy\n"
        )

        project = parse_project_block(remainder, [])

        assert [t.title for t in project.tasks] == ["Design layout", "Deploy"]
        first, second = project.tasks
        assert first.priority == "high"
        assert first.due_date == "next friday"
        assert first.status == "in_progress"
        assert first.description == "Figma first"
        assert second.priority == "medium"
        assert second.status == "todo"
        assert second.due_date is None
        assert all(t.project_id == project.id for t in project.tasks)
        assert first.id != second.id


class TestParseGoalBlock:
    """Tests for goal block parsing."""

    def test_parse_goal_all_fields(self):
        """Test every recognized goal field."""
        from app.parsers.smart_add import parse_goal_block

        remainder = (
            " Ship three projects\n"
            "Description: End to end\n"
            "Type: Project Completion\n"
            "Target Value: 3.5\n"
            "Target Date: 2024-12-31\n"
            "Status: On Hold"
        )

        goal = parse_goal_block(remainder, [])

        assert goal.title == "Ship three projects"
        assert goal.description == "End to end"
        assert goal.type == "project_completion"
        assert goal.target_value == 3.5
        assert goal.target_date == "2024-12-31"
        assert goal.status == "on_hold"
        assert goal.current_value == 0

    def test_parse_goal_defaults(self):
        """Test a title-only goal keeps every default."""
        from app.parsers.smart_add import parse_goal_block

        goal = parse_goal_block(" Read more", [])

        assert goal.type == "learning"
        assert goal.target_value == 1
        assert goal.target_date is None
        assert goal.status == "active"

    def test_parse_goal_invalid_target_value(self):
        """Test an unparsable target value falls back to 1."""
        from app.parsers.smart_add import parse_goal_block
        from app.models.smart_add import WarningKind

        warnings = []
        goal = parse_goal_block(" G\nTarget Value: lots", warnings)

        assert goal.target_value == 1
        assert warnings[0].kind == WarningKind.INVALID_NUMBER


class TestParse:
    """Tests for the parse entry point."""

    def test_example_project_with_task(self):
        """Test a project with month and one task."""
        from app.parsers.smart_add import parse

        result = parse("Project: Test\nDescription: demo\nMonth: 2\n\nTask: Step one\nPriority: high")

        assert len(result.projects) == 1
        project = result.projects[0]
        assert project.title == "Test"
        assert project.description == "demo"
        assert project.month_id == 2
        assert project.type == "uncategorized"
        assert len(result.tasks) == 1
        assert result.tasks[0].title == "Step one"
        assert result.tasks[0].priority == "high"
        assert result.tasks[0].project_id == project.id

    def test_example_goal(self):
        """Test a goal with type, target value and date."""
        from app.parsers.smart_add import parse

        result = parse("Goal: Finish course\nType: learning\nTarget Value: 5\nTarget Date: 2024-09-01")

        assert len(result.goals) == 1
        goal = result.goals[0]
        assert goal.title == "Finish course"
        assert goal.target_value == 5
        assert goal.target_date == "2024-09-01"
        assert goal.current_value == 0

    def test_no_markers(self):
        """Test text without markers yields nothing."""
        from app.parsers.smart_add import parse
        from app.models.smart_add import WarningKind

        result = parse("Random notes with no markers")

        assert result.is_empty
        assert result.projects == []
        assert result.goals == []
        assert [w.kind for w in result.warnings] == [WarningKind.UNRECOGNIZED_BLOCK]

    def test_invalid_month_does_not_drop_project(self):
        """Test a bad month in the second project leaves both projects."""
        from app.parsers.smart_add import parse

        result = parse("Project: First\nMonth: 1\n\nProject: Second\nMonth: abc")

        assert [p.title for p in result.projects] == ["First", "Second"]
        assert result.projects[0].month_id == 1
        assert result.projects[1].month_id is None

    def test_items_keep_input_order(self):
        """Test projects and goals keep their relative order."""
        from app.parsers.smart_add import parse
        from app.models.goal import GoalDraft
        from app.models.project import ProjectDraft

        result = parse("Goal: G1\nProject: P1\nGoal: G2")

        assert [type(item) for item in result.items] == [GoalDraft, ProjectDraft, GoalDraft]
        assert [item.title for item in result.items] == ["G1", "P1", "G2"]

    def test_preamble_before_first_marker_is_dropped(self):
        """Test text before the first marker is ignored."""
        from app.parsers.smart_add import parse

        result = parse("Ideas for this month\n\nProject: Real One")

        assert [p.title for p in result.projects] == ["Real One"]

    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_project_with_n_tasks(self, count):
        """Test N task sub-blocks yield N owned tasks."""
        from app.parsers.smart_add import parse

        text = "Project: P\n" + "".join(f"Task: T{i}\n" for i in range(count))

        result = parse(text)

        assert len(result.projects) == 1
        assert len(result.tasks) == count
        assert all(t.project_id == result.projects[0].id for t in result.tasks)

    def test_oversized_month_is_left_unset(self):
        """Test a month too large to store is treated as invalid."""
        from app.parsers.smart_add import parse
        from app.models.smart_add import WarningKind

        result = parse("Project: P\nMonth: 99999999999999999999999")

        assert result.projects[0].month_id is None
        assert [w.kind for w in result.warnings] == [WarningKind.INVALID_NUMBER]

    def test_infinite_target_value_uses_default(self):
        """Test a target value overflowing to infinity falls back to 1."""
        from app.parsers.smart_add import parse
        from app.models.smart_add import WarningKind

        result = parse("Goal: G\nTarget Value: 1e999")

        assert result.goals[0].target_value == 1
        assert [w.kind for w in result.warnings] == [WarningKind.INVALID_NUMBER]
