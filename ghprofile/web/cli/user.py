"""Defines the CLI for getting information about the authenticated user."""

import logging

import click
from tabulate import tabulate

from ghprofile.web.clients.user import UserClient

logger = logging.getLogger(__name__)

token_option = click.option(
    "--token",
    envvar="GITHUB_ACCESS_TOKEN",
    required=True,
    help="OAuth access token. Defaults to $GITHUB_ACCESS_TOKEN.",
)


@click.group()
def cli() -> None:
    """Get information about the currently-authenticated GitHub user."""
    pass


@cli.command()
@token_option
def me(token: str) -> None:
    """Show the profile of the currently-authenticated user."""
    with UserClient(token) as client:
        profile = client.get_user_profile()
    click.echo(
        tabulate(
            [
                ["ID", profile.id],
                ["Username", profile.username],
                ["Name", profile.display_name],
                ["Location", profile.location],
                ["Company", profile.company],
                ["Blog", profile.blog_url],
                ["Email", profile.email],
                ["Created", profile.created_at],
            ],
            headers=["Key", "Value"],
            tablefmt="simple",
        )
    )


@cli.command("id")
@token_option
def profile_id(token: str) -> None:
    """Print the profile id (the username) of the current user."""
    with UserClient(token) as client:
        click.echo(client.get_profile_id())


@cli.command()
@token_option
def url(token: str) -> None:
    """Print the profile URL of the current user."""
    with UserClient(token) as client:
        click.echo(client.get_profile_url())


if __name__ == "__main__":
    cli()
