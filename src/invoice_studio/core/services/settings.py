from __future__ import annotations

import base64
import json
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from invoice_studio.core import config
from invoice_studio.core.errors import ValidationError
from invoice_studio.core.models.business import BusinessProfile
from invoice_studio.core.models.settings import AppSettings

log = logging.getLogger(__name__)

MAX_LOGO_BYTES = 2 * 1024 * 1024

DEFAULT_BUSINESS = BusinessProfile(
    name="Business name",
    tax_number="123456789012345",
    commercial_register="1234567890",
    phone="0500000000",
    website="www.example.com",
    address="Riyadh, Saudi Arabia",
)

DEFAULT_SETTINGS = AppSettings()


def load_settings(path: Path | None = None) -> tuple[BusinessProfile, AppSettings]:
    target = path or config.settings_path()
    if not target.exists():
        return DEFAULT_BUSINESS, DEFAULT_SETTINGS
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
        business = BusinessProfile.from_dict(data.get("business") or {})
        settings = AppSettings.from_dict(data.get("settings") or {})
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Unreadable settings file %s, using defaults: %s", target, exc)
        return DEFAULT_BUSINESS, DEFAULT_SETTINGS
    return business, settings


def save_settings(business: BusinessProfile, settings: AppSettings, path: Path | None = None) -> Path:
    target = path or config.settings_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = {"business": business.to_dict(), "settings": settings.to_dict()}
    target.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return target


def load_logo_file(path: Path) -> str:
    """
    Read an image file and return it as a data URI for the business profile.
    Files above 2 MB or not recognised as images are rejected.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ValidationError("business.logo", f"cannot read {path.name}") from exc
    if len(data) > MAX_LOGO_BYTES:
        raise ValidationError("business.logo", "logo must be smaller than 2 MB")
    try:
        with Image.open(path) as img:
            fmt = (img.format or "PNG").lower()
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValidationError("business.logo", f"{path.name} is not a supported image") from exc
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:image/{fmt};base64,{encoded}"
