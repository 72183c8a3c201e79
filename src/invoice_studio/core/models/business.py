from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BusinessProfile:
    """Issuer identity printed at the top of every invoice."""

    name: str = ""
    tax_number: str = ""
    commercial_register: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""
    logo: str | None = None  # base64 or data URI

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BusinessProfile":
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        for key, value in known.items():
            if key != "logo":
                known[key] = str(value or "")
        return cls(**known)


@dataclass(frozen=True)
class ClientDetails:
    name: str = ""
    phone: str = ""
    address: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ClientDetails":
        return cls(
            name=str(data.get("name") or ""),
            phone=str(data.get("phone") or ""),
            address=str(data.get("address") or ""),
        )
