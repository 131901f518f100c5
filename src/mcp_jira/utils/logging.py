"""Logging helpers for MCP Jira."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a token or API key for logging, keeping only its last characters.

    Args:
        value: Secret to mask
        keep_chars: Number of trailing characters left visible

    Returns:
        Masked string, or ``"None"`` when there is nothing to mask
    """
    if not value:
        return "None"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
