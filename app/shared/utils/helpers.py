# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# This file contains small helpful tools used in several places, like turning a plant name
# into a web-address-friendly "slug" and working out an uploaded file's extension.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions: unicode-aware slug generation, upload file extension
# extraction, numeric display formatting, and timestamp helpers for storage paths.

# 🔗 Dependencies:
# - unicodedata: NFKD normalization for slugs
# - re: Pattern substitution
# - time: Millisecond timestamps

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.catalog.domain.models (slug rule, price label),
# app.shared.infrastructure.storage.supabase_storage (storage paths)

import re
import time
import unicodedata
from decimal import Decimal
from typing import Optional, Union

_COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')
_NON_ALNUM_RUN = re.compile(r'[^a-z0-9]+')

DEFAULT_FILE_EXTENSION = "jpg"


def generate_slug(text: Optional[str]) -> str:
    """
    Generate URL-friendly slug from text.

    Accented letters are folded to their ASCII base ("Ñ" -> "n"), every run of
    characters outside [a-z0-9] becomes a single hyphen, and hyphens at
    either end are dropped.

    Args:
        text: Text to convert to slug

    Returns:
        URL-friendly slug, possibly empty
    """
    if not text:
        return ""

    slug = unicodedata.normalize("NFKD", text)
    slug = _COMBINING_MARKS.sub("", slug)
    slug = slug.lower().strip()
    slug = _NON_ALNUM_RUN.sub("-", slug)

    return slug.strip("-")


def get_file_extension(filename: Optional[str], default: str = DEFAULT_FILE_EXTENSION) -> str:
    """
    Get the text after the last dot of a filename.

    "cover.JPG" -> "JPG", "photo" -> default, "archive." -> default.
    """
    if not filename or "." not in filename:
        return default
    extension = filename.rsplit(".", 1)[-1]
    return extension or default


def format_number(value: Union[int, float, Decimal]) -> str:
    """Render integral numbers without a trailing ".0"."""
    if isinstance(value, (float, Decimal)) and value == int(value):
        return str(int(value))
    return str(value)


def current_millis() -> int:
    """Milliseconds since the epoch, used to keep upload paths unique."""
    return int(time.time() * 1000)
