# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Provides user-friendly panels for login prompts, network failures and generic errors.

import traceback

from rich.panel import Panel
from rich.text import Text

from kontactshare_admin.errors import PayloadValidationError


def display_error(error: Exception, verbose: bool = False) -> Panel:
    """Format an error as a Rich Panel.

    Args:
        error: The exception to display.
        verbose: If True, include full traceback information.

    Returns:
        A Rich Panel containing formatted error information.
    """
    error_type = type(error).__name__
    error_message = str(error)

    content = Text()
    content.append(f"{error_type}: ", style="bold red")
    content.append(error_message, style="red")

    if isinstance(error, PayloadValidationError) and error.fields:
        content.append("\n\nFields: ", style="dim")
        content.append(", ".join(error.fields), style="yellow")

    if verbose:
        content.append("\n\n")
        content.append("Traceback:", style="dim")
        content.append("\n")
        tb_text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        content.append(tb_text, style="dim")

    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(1, 2),
    )


def display_login_help(message: str | None = None) -> Panel:
    """Display a prompt to log in after an authentication failure.

    Args:
        message: Optional reason reported by the service.

    Returns:
        A Rich Panel telling the operator how to sign in again.
    """
    text = Text()
    text.append("Authentication required\n\n", style="bold yellow")
    if message:
        text.append(f"{message}\n\n", style="yellow")
    text.append("Your session is missing or has expired. Sign in with:\n", style="dim")
    text.append("  kontactshare-admin login", style="bold cyan")

    return Panel(
        text,
        title="Login Required",
        border_style="yellow",
        padding=(1, 2),
    )


def display_network_error(error: Exception) -> Panel:
    """Display a user-friendly message for network errors.

    Args:
        error: The network-related exception.

    Returns:
        A Rich Panel with retry suggestions.
    """
    message = Text()
    message.append("Network Error\n\n", style="bold red")
    message.append(f"{error}\n\n", style="red")
    message.append("Suggestions:\n", style="bold")
    message.append("• Check that the profile service is running\n", style="dim")
    message.append("• Verify KONTACTSHARE_API_BASE_URL\n", style="dim")
    message.append("• Try again in a few moments", style="dim")

    return Panel(
        message,
        title="Connection Error",
        border_style="red",
        padding=(1, 2),
    )
