"""Console output helpers for the room302-template wizard.

Every message carries its own emoji; these helpers only add color.
"""


class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'


def print_info(msg: str) -> None:
    """Print a progress message."""
    print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    print(f"{Colors.GREEN}{msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print an advisory failure; the run continues."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print a fatal failure."""
    print(f"{Colors.RED}🚨 {msg}{Colors.RESET}")
