# ABOUTME: Admin CLI for the KontactShare profile service using Typer.
# ABOUTME: Provides login, logout, stats, list, view, ban, unban, delete, bulk and create commands.

from collections.abc import Callable
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from kontactshare_admin.api.client import GatewayClient
from kontactshare_admin.api.exceptions import NetworkFailure, UnauthenticatedError
from kontactshare_admin.auth import AdminSession, KeyringTokenStore
from kontactshare_admin.config import Settings, StoreBackend, get_settings
from kontactshare_admin.controllers import (
    ProfileActions,
    ProfileCreationWorkflow,
    ProfileListController,
    SelectionController,
)
from kontactshare_admin.display import (
    ProfileTable,
    display_error,
    display_login_help,
    display_network_error,
    pagination_footer,
    render_created_panel,
    render_profile_panel,
    render_stats_panel,
)
from kontactshare_admin.errors import KontactShareError
from kontactshare_admin.logging import configure_logging
from kontactshare_admin.models.profile import BulkAction, ProfileStatus
from kontactshare_admin.models.query import QueryState
from kontactshare_admin.stores import create_store

app = typer.Typer(
    name="kontactshare-admin",
    help="Manage KontactShare contact-sharing profiles.",
    add_completion=False,
)

console = Console()


def _settings(ctx: typer.Context) -> Settings:
    """Return settings with the --backend override applied."""
    settings = get_settings()
    backend = (ctx.obj or {}).get("backend")
    if backend is not None:
        settings = settings.model_copy(update={"backend": backend})
    return settings


def _token_store(settings: Settings) -> KeyringTokenStore:
    return KeyringTokenStore(key=settings.token_key)


def _confirmer(assume_yes: bool) -> Callable[[str], bool]:
    if assume_yes:
        return lambda _message: True
    return lambda message: Confirm.ask(f"[bold red]{message}[/bold red]")


def _exit_with_error(error: Exception) -> NoReturn:
    """Print an error panel suited to the error type and exit with code 1."""
    if isinstance(error, UnauthenticatedError):
        console.print(display_login_help(str(error)))
    elif isinstance(error, NetworkFailure):
        console.print(display_network_error(error))
    else:
        console.print(display_error(error))
    raise typer.Exit(code=1) from None


def _print_profile_list(profile_list: ProfileListController, selected: list[str] | None = None) -> None:
    if not profile_list.profiles:
        console.print("[yellow]No profiles found.[/yellow]")
        return
    console.print(
        ProfileTable().render(
            profile_list.profiles,
            pagination=profile_list.pagination,
            selected=selected,
            title="Profiles",
        )
    )
    footer = pagination_footer(profile_list.pagination)
    if footer:
        console.print(f"[dim]{footer}[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    backend: Annotated[
        StoreBackend | None,
        typer.Option(
            "--backend",
            "-b",
            help="Profile store to use (overrides KONTACTSHARE_BACKEND).",
        ),
    ] = None,
) -> None:
    """KontactShare admin CLI.

    Create, search, ban, unban and delete contact-sharing profiles.
    """
    ctx.obj = {"backend": backend}
    configure_logging(get_settings())
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def login(
    ctx: typer.Context,
    email: Annotated[
        str | None,
        typer.Option("--email", "-e", help="Admin email address."),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option("--password", "-p", help="Admin password (prompted if omitted)."),
    ] = None,
) -> None:
    """Sign in as an administrator and keep the session token in the OS keyring."""
    settings = _settings(ctx)
    if settings.backend == StoreBackend.LOCAL:
        console.print("[yellow]The local backend does not require a login.[/yellow]")
        return

    if email is None:
        email = Prompt.ask("[bold]Admin email[/bold]")
    if password is None:
        password = Prompt.ask("[bold]Password[/bold]", password=True)

    token_store = _token_store(settings)
    with GatewayClient.from_settings(settings, token_store) as client:
        session = AdminSession(client, token_store)
        try:
            session.login(email, password)
        except KontactShareError as e:
            _exit_with_error(e)

    console.print(f"[green]Success! Signed in as '[bold]{email}[/bold]'.[/green]")


@app.command()
def logout(ctx: typer.Context) -> None:
    """Forget the stored session token."""
    settings = _settings(ctx)
    token_store = _token_store(settings)
    with GatewayClient.from_settings(settings, token_store) as client:
        AdminSession(client, token_store).logout()
    console.print("[green]Signed out.[/green]")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show dashboard statistics."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        try:
            dashboard = store.stats()
        except KontactShareError as e:
            _exit_with_error(e)
    console.print(render_stats_panel(dashboard))


@app.command(name="list")
def list_profiles(
    ctx: typer.Context,
    page: Annotated[int, typer.Option("--page", help="Page number.", min=1)] = 1,
    limit: Annotated[
        int | None,
        typer.Option("--limit", help="Profiles per page.", min=1, max=100),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Search by name, email or company."),
    ] = None,
    status: Annotated[
        ProfileStatus | None,
        typer.Option("--status", help="Only show profiles with this status."),
    ] = None,
) -> None:
    """List profiles page by page."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        profile_list = ProfileListController(store, limit=limit or settings.page_size)
        profile_list.query = QueryState(
            limit=limit or settings.page_size, search=search or None, status=status
        )
        try:
            profile_list.load(page)
        except KontactShareError as e:
            _exit_with_error(e)
    _print_profile_list(profile_list)


@app.command()
def view(
    ctx: typer.Context,
    unique_code: Annotated[str, typer.Argument(help="Unique code of the profile.")],
) -> None:
    """Show the public view of one profile."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        actions = ProfileActions(store, confirm=_confirmer(False))
        try:
            profile = actions.view(unique_code)
        except KontactShareError as e:
            _exit_with_error(e)
    console.print(render_profile_panel(profile))


@app.command()
def ban(
    ctx: typer.Context,
    unique_code: Annotated[str, typer.Argument(help="Unique code of the profile.")],
) -> None:
    """Ban a profile."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        try:
            ProfileActions(store, confirm=_confirmer(False)).ban(unique_code)
        except KontactShareError as e:
            _exit_with_error(e)
    console.print("[green]Profile banned successfully.[/green]")


@app.command()
def unban(
    ctx: typer.Context,
    unique_code: Annotated[str, typer.Argument(help="Unique code of the profile.")],
) -> None:
    """Lift the ban on a profile."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        try:
            ProfileActions(store, confirm=_confirmer(False)).unban(unique_code)
        except KontactShareError as e:
            _exit_with_error(e)
    console.print("[green]Profile unbanned successfully.[/green]")


@app.command()
def delete(
    ctx: typer.Context,
    unique_code: Annotated[str, typer.Argument(help="Unique code of the profile.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation."),
    ] = False,
) -> None:
    """Permanently delete a profile."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        try:
            deleted = ProfileActions(store, confirm=_confirmer(yes)).delete(unique_code)
        except KontactShareError as e:
            _exit_with_error(e)

    if deleted:
        console.print("[green]Profile deleted successfully.[/green]")
    else:
        console.print("[yellow]Deletion cancelled.[/yellow]")


@app.command()
def bulk(
    ctx: typer.Context,
    action: Annotated[BulkAction, typer.Argument(help="Action to apply.")],
    unique_codes: Annotated[
        list[str] | None,
        typer.Argument(help="Unique codes to act on."),
    ] = None,
    select_all: Annotated[
        bool,
        typer.Option("--all", help="Act on every profile of the selected page."),
    ] = False,
    page: Annotated[int, typer.Option("--page", help="Page to select from.", min=1)] = 1,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Search filter for the page."),
    ] = None,
    status: Annotated[
        ProfileStatus | None,
        typer.Option("--status", help="Status filter for the page."),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation."),
    ] = False,
) -> None:
    """Ban, unban or delete several profiles in one request."""
    settings = _settings(ctx)
    with create_store(settings, _token_store(settings)) as store:
        profile_list = ProfileListController(store, limit=settings.page_size)
        profile_list.query = QueryState(
            limit=settings.page_size, search=search or None, status=status
        )
        selection = SelectionController(store, profile_list, confirm=_confirmer(yes))
        try:
            profile_list.load(page)
            if select_all:
                selection.select_all(True)
            for code in unique_codes or []:
                if not selection.is_selected(code):
                    selection.toggle(code)
            result = selection.bulk_action(action)
        except KontactShareError as e:
            _exit_with_error(e)

    if result is None:
        if not selection.selected:
            console.print("[yellow]No profiles selected.[/yellow]")
        else:
            console.print("[yellow]Bulk action cancelled.[/yellow]")
        return

    style = "yellow" if result.failed else "green"
    console.print(f"[{style}]{SelectionController.summary(result)}.[/{style}]")
    for item in result.failed:
        console.print(f"  [red]{item.unique_code}: {item.error or 'failed'}[/red]")
    if profile_list.error:
        console.print(f"[yellow]Could not reload the page: {profile_list.error}[/yellow]")
        return
    _print_profile_list(profile_list)


@app.command()
def create(
    ctx: typer.Context,
    full_name: Annotated[str | None, typer.Option("--full-name", help="Full name.")] = None,
    email: Annotated[str | None, typer.Option("--email", help="Email address.")] = None,
    job_title: Annotated[str | None, typer.Option("--job-title", help="Job title.")] = None,
    company_name: Annotated[str | None, typer.Option("--company", help="Company name.")] = None,
    mobile_primary: Annotated[str | None, typer.Option("--mobile", help="Mobile number.")] = None,
    landline_number: Annotated[
        str | None, typer.Option("--landline", help="Landline number.")
    ] = None,
    address: Annotated[str | None, typer.Option("--address", help="Postal address.")] = None,
    profile_photo: Annotated[
        str | None, typer.Option("--photo", help="Profile photo URL.")
    ] = None,
    facebook_link: Annotated[str | None, typer.Option("--facebook", help="Facebook link.")] = None,
    instagram_link: Annotated[
        str | None, typer.Option("--instagram", help="Instagram link.")
    ] = None,
    tiktok_link: Annotated[str | None, typer.Option("--tiktok", help="TikTok link.")] = None,
    whatsapp_number: Annotated[
        str | None, typer.Option("--whatsapp", help="WhatsApp number.")
    ] = None,
    website_link: Annotated[str | None, typer.Option("--website", help="Website link.")] = None,
    id_card: Annotated[
        str | None, typer.Option("--id-card", help="ID card (generated if omitted).")
    ] = None,
    pin: Annotated[str | None, typer.Option("--pin", help="5-digit PIN (generated if omitted).")] = None,
    unique_code: Annotated[
        str | None, typer.Option("--unique-code", help="Unique code (generated if omitted).")
    ] = None,
    generate: Annotated[
        bool,
        typer.Option(
            "--generate/--no-generate",
            help="Generate the ID card, PIN and unique code before applying overrides.",
        ),
    ] = True,
) -> None:
    """Create a profile from placeholder defaults plus the given fields.

    Fields left out keep their placeholder values and can be updated
    later by the profile owner.
    """
    settings = _settings(ctx)
    overrides = {
        "full_name": full_name,
        "email": email,
        "job_title": job_title,
        "company_name": company_name,
        "mobile_primary": mobile_primary,
        "landline_number": landline_number,
        "address": address,
        "profile_photo": profile_photo,
        "facebook_link": facebook_link,
        "instagram_link": instagram_link,
        "tiktok_link": tiktok_link,
        "whatsapp_number": whatsapp_number,
        "website_link": website_link,
        "id": id_card,
        "pin": pin,
        "unique_code": unique_code,
    }

    with create_store(settings, _token_store(settings)) as store:
        workflow = ProfileCreationWorkflow(store)
        if generate:
            workflow.generate_all()
        workflow.update(**{key: value for key, value in overrides.items() if value is not None})
        try:
            created = workflow.submit()
        except KontactShareError as e:
            _exit_with_error(e)

    console.print(render_created_panel(created))


if __name__ == "__main__":
    app()
