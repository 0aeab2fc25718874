"""CLI command group for Jira Fields.

This module exposes the root Click command group `jira_fields` which
aggregates subcommands implemented in sibling modules.

Example usage:

        jira-fields project issue.json -f status.name -f assignee.displayName
        jira-fields suggest issue summry
        jira-fields validate issue status.name assignee.nmae
"""

from __future__ import annotations

import click

from .describe import describe_cmd
from .project import project_cmd
from .suggest import suggest_cmd
from .validate import validate_cmd


@click.group()
def jira_fields():  # pragma: no cover - thin group wrapper
    """Jira field projection and suggestion commands."""


# Register subcommands
jira_fields.add_command(project_cmd)
jira_fields.add_command(suggest_cmd)
jira_fields.add_command(validate_cmd)
jira_fields.add_command(describe_cmd)

__all__ = ["jira_fields"]
