from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    """One product/service row as entered by the user."""

    name: str
    quantity: float = 1.0
    unit_price: float = 0.0
    discount_percent: float = 0.0  # 0-100
    tax_percent: float = 0.0  # 0-100

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "discount_percent": self.discount_percent,
            "tax_percent": self.tax_percent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        return cls(
            name=str(data.get("name", "")),
            quantity=float(data.get("quantity", 1.0)),
            unit_price=float(data.get("unit_price", 0.0)),
            discount_percent=float(data.get("discount_percent", 0.0)),
            tax_percent=float(data.get("tax_percent", 0.0)),
        )


@dataclass(frozen=True)
class ComputedLineItem:
    """Line item with the amounts derived by the calculator."""

    item: LineItem
    line_subtotal: float
    discount_amount: float
    price_after_discount: float
    tax_amount: float
    total: float

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def quantity(self) -> float:
        return self.item.quantity

    @property
    def unit_price(self) -> float:
        return self.item.unit_price

    @property
    def discount_percent(self) -> float:
        return self.item.discount_percent

    @property
    def tax_percent(self) -> float:
        return self.item.tax_percent
