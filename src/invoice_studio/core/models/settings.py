from dataclasses import asdict, dataclass, field

RTL_LANGUAGES = {"ar", "fa", "he", "ur"}


@dataclass(frozen=True)
class DisplayFlags:
    """Switches deciding which optional fields are computed and printed."""

    show_tax: bool = True
    show_discount: bool = True
    show_commercial_register: bool = True
    show_website: bool = True
    show_business_address: bool = True
    show_client_address: bool = True
    show_qr_code: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "DisplayFlags":
        return cls(**{k: bool(data[k]) for k in cls.__dataclass_fields__ if k in data})


@dataclass(frozen=True)
class AppSettings:
    flags: DisplayFlags = field(default_factory=DisplayFlags)
    default_tax_percent: float = 15.0
    default_discount_percent: float = 0.0
    currency: str = "SAR"
    language: str = "en"

    @property
    def is_rtl(self) -> bool:
        return self.language in RTL_LANGUAGES

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        defaults = cls()
        return cls(
            flags=DisplayFlags.from_dict(data.get("flags") or {}),
            default_tax_percent=float(data.get("default_tax_percent", defaults.default_tax_percent)),
            default_discount_percent=float(data.get("default_discount_percent", defaults.default_discount_percent)),
            currency=str(data.get("currency") or defaults.currency),
            language=str(data.get("language") or defaults.language),
        )
