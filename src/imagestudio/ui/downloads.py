"""Download filename derivation and asset export."""

import logging
import re
from pathlib import Path

from imagestudio.core.assets import ImageAsset

logger = logging.getLogger(__name__)

SLUG_MAX_CHARS = 40
FALLBACK_SLUG = "generated_image"

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def slug_from_prompt(prompt: str | None) -> str:
    """Derive a filename-safe slug from a prompt.

    Takes the first 40 characters, removes anything that is not an ASCII
    letter, digit, whitespace or hyphen, and joins the remaining words with
    single underscores.

    Args:
        prompt: Prompt text

    Returns:
        Slug, or FALLBACK_SLUG when nothing usable remains

    Examples:
        >>> slug_from_prompt("A futuristic cityscape@@@ at sunset!!")
        'A_futuristic_cityscape_at_sunset'
        >>> slug_from_prompt("@@@!!!")
        'generated_image'
    """
    text = (prompt or "")[:SLUG_MAX_CHARS]
    text = _DISALLOWED_CHARS.sub("", text).strip()
    slug = _WHITESPACE.sub("_", text)
    return slug or FALLBACK_SLUG


def download_filename(prompt: str | None, asset: ImageAsset) -> str:
    """Build the download filename for an asset.

    Args:
        prompt: Prompt the asset was generated from
        asset: The asset being downloaded

    Returns:
        ``<slug>_<n>.<ext>`` with a 1-based image number
    """
    return f"{slug_from_prompt(prompt)}_{asset.index + 1}.{asset.extension}"


def save_asset_for_download(asset: ImageAsset, prompt: str | None, directory: Path) -> Path:
    """Write an asset to disk so the browser can download it.

    Existing files with the same name are overwritten.

    Args:
        asset: Asset to export
        prompt: Prompt used for the filename slug
        directory: Target directory (created if missing)

    Returns:
        Path of the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / download_filename(prompt, asset)
    path.write_bytes(asset.to_bytes())
    logger.info(f"Saved download: {path}")
    return path
