"""Display formatting for calculation results."""


def format_currency(value: float) -> str:
    """Format a dollar amount to cents (65.628689 -> '$65.63')."""
    return f"${value:.2f}"


def format_hours(value: float) -> str:
    """Format hours to one decimal place (1444 -> '1444.0')."""
    return f"{value:.1f}"


def format_percent(value: float) -> str:
    """Format a fraction as a percentage (0.115 -> '11.5%')."""
    return f"{value * 100:.1f}%"
