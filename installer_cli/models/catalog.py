"""
Static product catalog and menu resolution.

The catalog is an ordered tuple rather than a mapping so that the compound
menu choices ("4" and "5") resolve to a well-defined, testable order.
"""

from enum import Enum
from pathlib import PurePath
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

from installer_cli.exceptions import InvalidSelectionError


class Action(Enum):
    """What to do with every product in the selection set."""

    DOWNLOAD_AND_INSTALL = "1"
    DOWNLOAD_ONLY = "2"
    INSTALL_ONLY = "3"

    @property
    def label(self) -> str:
        return ACTION_LABELS[self]


ACTION_LABELS = {
    Action.DOWNLOAD_AND_INSTALL: "Download and Install",
    Action.DOWNLOAD_ONLY: "Download Only",
    Action.INSTALL_ONLY: "Install Only",
}


class Product(BaseModel):
    """A single installable package with a fixed source URL."""

    key: int
    name: str
    url: str
    output_file_name: str
    search_pattern: str
    is_server: bool = False

    class Config:
        """Pydantic model configuration."""

        frozen = True
        str_strip_whitespace = True

    @field_validator("name", "search_pattern")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Value cannot be empty.")
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Only absolute HTTPS URLs are accepted."""
        parsed = urlparse(v)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError(f"Product URL must be an absolute https:// URL: {v}")
        return v

    @field_validator("output_file_name")
    @classmethod
    def validate_output_file_name(cls, v: str) -> str:
        """The output file always lands directly in the working directory."""
        if not v:
            raise ValueError("Output file name cannot be empty.")
        if PurePath(v).name != v or v in (".", ".."):
            raise ValueError(f"Output file name must not contain directories: {v}")
        return v


CATALOG: tuple[Product, ...] = (
    Product(
        key=1,
        name="EzDent-i",
        url="https://downloads.ewoosoft.com/EzDent-i/EzDent-i_Setup.exe",
        output_file_name="EzDent-i_Setup.exe",
        search_pattern="EzDent",
    ),
    Product(
        key=2,
        name="Ez3D-i",
        url="https://downloads.ewoosoft.com/Ez3D-i/Ez3D-i_Setup.exe",
        output_file_name="Ez3D-i_Setup.exe",
        search_pattern="Ez3D",
    ),
    Product(
        key=3,
        name="EzServer",
        url="https://downloads.ewoosoft.com/EzServer/EzServer_Setup.exe",
        output_file_name="EzServer_Setup.exe",
        search_pattern="EzServer",
        is_server=True,
    ),
)

# Compound menu choices. The server goes first in "all" so that clients are
# installed after the server they connect to.
CLIENTS_ONLY_CHOICE = "4"
ALL_CHOICE = "5"
ALL_ORDER = (3, 1, 2)


def all_products() -> tuple[Product, ...]:
    """Returns every catalog entry in declared order."""
    return CATALOG


def get_product(key: int) -> Product:
    """Looks up a single catalog entry by its menu key."""
    for product in CATALOG:
        if product.key == key:
            return product
    raise InvalidSelectionError(f"No product with key {key}.")


def parse_action(choice: str) -> Action:
    """Maps an action menu answer to an Action."""
    try:
        return Action(choice.strip())
    except ValueError:
        raise InvalidSelectionError(
            f"Invalid action selection: '{choice.strip()}'."
        ) from None


def resolve_selection(choice: str) -> tuple[Product, ...]:
    """
    Resolves a product menu answer into an ordered selection set.

    Args:
        choice: The raw menu answer ("1".."5").

    Returns:
        The selected products in processing order.

    Raises:
        InvalidSelectionError: If the answer is not one of the offered choices.
    """
    choice = choice.strip()
    if choice == CLIENTS_ONLY_CHOICE:
        return tuple(p for p in CATALOG if not p.is_server)
    if choice == ALL_CHOICE:
        return tuple(get_product(key) for key in ALL_ORDER)
    if choice in {str(p.key) for p in CATALOG}:
        return (get_product(int(choice)),)
    raise InvalidSelectionError(f"Invalid product selection: '{choice}'.")


def product_menu_labels() -> list[tuple[str, str]]:
    """Returns (choice, label) pairs for the product menu, in menu order."""
    clients = " & ".join(p.name for p in CATALOG if not p.is_server)
    labels = [(str(p.key), p.name) for p in CATALOG]
    labels.append((CLIENTS_ONLY_CHOICE, f"{clients} only"))
    labels.append((ALL_CHOICE, "All"))
    return labels
