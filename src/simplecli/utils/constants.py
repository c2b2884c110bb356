"""Constants used throughout simplecli."""

# Pagination
DEFAULT_PAGE_SIZE = 10

# Messages written to the user
NO_ITEMS_MESSAGE = "No items."
CONTINUE_PROMPT = "Continue? (y/n)"
BROWSE_PROMPT = (
    "Press N to view the next page, P for previous, "
    "S for a specific page, or E to exit."
)
PAGE_NUMBER_PROMPT = "Enter the page you would like to view."
CONFIRM_RETRY_HINT = "Please enter 'y' or 'n'."

# Accepted answers for yes/no questions (compared lowercased)
YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class NavCommand:
    """Pager navigation commands."""

    NEXT = "N"
    PREVIOUS = "P"
    SELECT = "S"
    EXIT = "E"

    ALL = (NEXT, PREVIOUS, SELECT, EXIT)
