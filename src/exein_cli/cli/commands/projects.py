"""CLI commands for managing firmware analysis projects."""

import click

from ..utils import echo_json, run_operation


@click.group()
def projects():
    """Manage firmware analysis projects."""
    pass


@projects.command("create")
@click.argument("fw_filepath", type=click.Path())
@click.option("--name", required=True, help="Project name")
@click.option("--type", "fw_type", required=True, help="Firmware type")
@click.option("--subtype", "fw_subtype", required=True, help="Firmware subtype")
@click.option("--description", default=None, help="Project description")
@click.pass_obj
def create_project(
    settings: dict,
    fw_filepath: str,
    name: str,
    fw_type: str,
    fw_subtype: str,
    description: str | None,
):
    """Upload a firmware image as a new project."""
    project_id = run_operation(
        settings,
        lambda api: api.create(fw_filepath, fw_type, fw_subtype, name, description),
    )
    click.echo(f"Project created: {project_id}")


@projects.command("list")
@click.pass_obj
def list_projects(settings: dict):
    """List all projects."""
    project_list = run_operation(settings, lambda api: api.list_projects())

    if not project_list:
        click.echo("No projects found. Create one with: exein projects create <file>")
        return

    click.echo(f"{'ID':<38} {'NAME':<30} {'CREATED':<20}")
    click.echo("-" * 88)
    for project in project_list:
        created = (project.creation_date or "")[:10]
        click.echo(f"{str(project.id):<38} {project.name:<30} {created:<20}")


@projects.command("overview")
@click.argument("project_id", type=click.UUID)
@click.pass_obj
def project_overview(settings: dict, project_id):
    """Show the overview of a project."""
    echo_json(run_operation(settings, lambda api: api.overview(project_id)))


@projects.command("analysis")
@click.argument("project_id", type=click.UUID)
@click.argument("kind")
@click.pass_obj
def project_analysis(settings: dict, project_id, kind: str):
    """Show one kind of analysis (e.g. cve, hardening, password-hash)."""
    result = run_operation(settings, lambda api: api.analysis(project_id, kind))
    echo_json(result.model_dump(mode="json"))


@projects.command("delete")
@click.argument("project_id", type=click.UUID)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt")
@click.pass_obj
def delete_project(settings: dict, project_id, force: bool):
    """Delete a project. This action cannot be undone."""
    if not force:
        click.confirm(
            f"Are you sure you want to delete project '{project_id}'?", abort=True
        )
    run_operation(settings, lambda api: api.delete(project_id))
    click.echo(f"Project '{project_id}' deleted.")
