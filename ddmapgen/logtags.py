"""Coloured tags that prefix bridge log messages."""

LIGHT_BLUE = "\x1b[38;5;12m"
LAVANDA = "\x1b[38;5;146m"
MAYFLOWER = "\x1b[38;5;11m"
GRAY = "\x1b[38;5;8m"
DEFAULT = "\x1b[0m"


def auth(text: str) -> str:
    """Tag a message about authentication."""
    return f"{MAYFLOWER}AUTH{DEFAULT} {text}"


def recv(text: str) -> str:
    """Tag a message received from the server."""
    return f"{LIGHT_BLUE}RECV{GRAY} {text}{DEFAULT}"


def gen(text: str) -> str:
    """Tag a message about map generation."""
    return f"{LAVANDA}GEN {DEFAULT} {text}"