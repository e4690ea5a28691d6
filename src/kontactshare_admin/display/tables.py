# ABOUTME: Rich table rendering for profile listings.
# ABOUTME: Provides ProfileTable with status colouring, truncation and selection marks.

from rich.table import Table

from kontactshare_admin.models.profile import Pagination, Profile, ProfileStatus


class ProfileTable:
    """Renders Profile data as Rich tables.

    Creates formatted tables with color-coded status, truncated long
    text, and row numbers offset by the page position.
    """

    MAX_NAME_LENGTH = 30
    MAX_EMAIL_LENGTH = 30
    MAX_COMPANY_LENGTH = 25

    STATUS_COLORS: dict[ProfileStatus, str] = {
        ProfileStatus.ACTIVE: "green",
        ProfileStatus.BANNED: "red",
    }

    def _truncate(self, text: str | None, max_length: int) -> str:
        """Truncate text to max length with ellipsis.

        Args:
            text: The text to truncate, or None.
            max_length: Maximum length before truncation.

        Returns:
            Truncated text with ellipsis, or empty string if None.
        """
        if text is None:
            return ""
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."

    def _get_status_styled(self, status: ProfileStatus | None) -> str:
        if status is None:
            return "[dim]-[/dim]"
        color = self.STATUS_COLORS.get(status, "white")
        return f"[{color}]{status.value}[/{color}]"

    def render(
        self,
        profiles: list[Profile],
        pagination: Pagination | None = None,
        selected: list[str] | None = None,
        title: str | None = None,
    ) -> Table:
        """Render profiles as a Rich Table.

        Args:
            profiles: Profiles on the current page.
            pagination: Used to number rows by their overall position.
            selected: Unique codes to mark as selected.
            title: Optional title for the table.

        Returns:
            Rich Table with formatted profile data.
        """
        selected_codes = set(selected or [])
        offset = (pagination.page - 1) * pagination.limit if pagination else 0

        table = Table(title=title, show_lines=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("", width=1)
        table.add_column("Name", style="cyan", no_wrap=True, max_width=self.MAX_NAME_LENGTH)
        table.add_column("Unique Code", style="magenta", no_wrap=True)
        table.add_column("Email", style="white", max_width=self.MAX_EMAIL_LENGTH)
        table.add_column("Company", style="white", max_width=self.MAX_COMPANY_LENGTH)
        table.add_column("Status", width=8)
        table.add_column("Created", style="dim", no_wrap=True)

        for idx, profile in enumerate(profiles, offset + 1):
            created = profile.created_at.strftime("%Y-%m-%d") if profile.created_at else ""
            table.add_row(
                str(idx),
                "[bold]*[/bold]" if profile.unique_code in selected_codes else "",
                self._truncate(profile.full_name, self.MAX_NAME_LENGTH),
                profile.unique_code,
                self._truncate(profile.email, self.MAX_EMAIL_LENGTH),
                self._truncate(profile.company_name, self.MAX_COMPANY_LENGTH),
                self._get_status_styled(profile.status),
                created,
            )

        return table


def pagination_footer(pagination: Pagination | None) -> str | None:
    """Describe the page position, or None when everything fits on one page."""
    if pagination is None or pagination.pages <= 1:
        return None
    return (
        f"Showing {pagination.first_index} to {pagination.last_index} "
        f"of {pagination.total} results · Page {pagination.page} of {pagination.pages}"
    )
