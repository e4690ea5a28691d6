# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports ProfileTable, status panels and error panels.

from kontactshare_admin.display.errors import (
    display_error,
    display_login_help,
    display_network_error,
)
from kontactshare_admin.display.status import (
    render_created_panel,
    render_profile_panel,
    render_stats_panel,
)
from kontactshare_admin.display.tables import ProfileTable, pagination_footer

__all__ = [
    "ProfileTable",
    "display_error",
    "display_login_help",
    "display_network_error",
    "pagination_footer",
    "render_created_panel",
    "render_profile_panel",
    "render_stats_panel",
]
