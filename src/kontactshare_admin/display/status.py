# ABOUTME: Panels for dashboard statistics, created-profile credentials and profile details.
# ABOUTME: Placeholder values left over from the creation form are shown dimmed.

from rich.panel import Panel
from rich.table import Table

from kontactshare_admin.controllers.creation import is_default_value
from kontactshare_admin.models.profile import CreatedProfile, DashboardStats, Profile

PROFILE_DETAIL_FIELDS: list[tuple[str, str]] = [
    ("ID Card", "id"),
    ("Unique Code", "unique_code"),
    ("Email", "email"),
    ("Job Title", "job_title"),
    ("Company", "company_name"),
    ("Mobile", "mobile_primary"),
    ("Landline", "landline_number"),
    ("Address", "address"),
    ("Facebook", "facebook_link"),
    ("Instagram", "instagram_link"),
    ("TikTok", "tiktok_link"),
    ("WhatsApp", "whatsapp_number"),
    ("Website", "website_link"),
]


def _key_value_table() -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")
    return table


def render_stats_panel(stats: DashboardStats) -> Panel:
    """Render dashboard statistics as a Rich Panel."""
    table = _key_value_table()
    table.add_row("Total Profiles:", f"[cyan]{stats.total_profiles:,}[/cyan]")
    table.add_row("Active:", f"[green]{stats.active_profiles:,}[/green]")
    table.add_row("Banned:", f"[red]{stats.banned_profiles:,}[/red]")
    table.add_row("Created Today:", f"[cyan]{stats.today_profiles:,}[/cyan]")
    table.add_row("Created This Week:", f"[cyan]{stats.week_profiles:,}[/cyan]")

    return Panel(
        table,
        title="Dashboard Statistics",
        border_style="blue",
        padding=(1, 2),
    )


def render_created_panel(created: CreatedProfile) -> Panel:
    """Render the credentials and share link of a newly created profile."""
    table = _key_value_table()
    table.add_row("ID Card:", created.id)
    table.add_row("PIN:", f"[bold]{created.pin}[/bold]")
    table.add_row("Unique Code:", created.unique_code)
    table.add_row("Profile Link:", f"[link={created.profile_link}]{created.profile_link}[/link]")

    return Panel(
        table,
        title="Profile Created Successfully",
        border_style="green",
        padding=(1, 2),
    )


def render_profile_panel(profile: Profile) -> Panel:
    """Render every field of a profile, dimming placeholder values."""
    table = _key_value_table()
    if profile.status is not None:
        color = "red" if profile.is_banned else "green"
        table.add_row("Status:", f"[{color}]{profile.status.value}[/{color}]")

    for label, field in PROFILE_DETAIL_FIELDS:
        value = getattr(profile, field) or ""
        if not value:
            table.add_row(f"{label}:", "[dim]-[/dim]")
        elif is_default_value(value):
            table.add_row(f"{label}:", f"[dim italic]{value}[/dim italic]")
        else:
            table.add_row(f"{label}:", value)

    if profile.created_at is not None:
        table.add_row("Created:", profile.created_at.strftime("%B %d, %Y %H:%M"))
    if profile.updated_at is not None:
        table.add_row("Updated:", profile.updated_at.strftime("%B %d, %Y %H:%M"))

    return Panel(
        table,
        title=profile.full_name or profile.unique_code,
        border_style="red" if profile.is_banned else "cyan",
        padding=(1, 2),
    )
