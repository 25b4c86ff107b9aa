"""Domain type definitions for sft.

These NewTypes provide semantic clarity and help with type checking:
- Amount: Money amount in rupiah (positive for stored transactions)
- CategoryName: Name of a transaction category
- TransactionId: Opaque unique transaction identifier
- IsoDate: Calendar date in YYYY-MM-DD format
"""

from typing import Literal, NewType

# Amounts are kept as entered (int or float); rupiah has no minor unit in practice
Amount = NewType("Amount", float)

CategoryName = NewType("CategoryName", str)

TransactionId = NewType("TransactionId", str)

# Date is always in YYYY-MM-DD format (e.g., "2024-01-02")
IsoDate = NewType("IsoDate", str)

TransactionType = Literal["income", "expense"]

TRANSACTION_TYPES: tuple[TransactionType, ...] = ("income", "expense")

CATEGORIES: dict[str, tuple[CategoryName, ...]] = {
    "income": tuple(
        CategoryName(name)
        for name in (
            "Gaji",
            "Freelance",
            "Beasiswa",
            "Hadiah",
            "Investasi",
            "Bonus",
            "Bisnis",
            "Part-time",
            "Komisi",
            "Transfer Masuk",
            "Lainnya",
        )
    ),
    "expense": tuple(
        CategoryName(name)
        for name in (
            "Makanan",
            "Minuman",
            "Transportasi",
            "Pendidikan",
            "Hiburan",
            "Kos/Sewa",
            "Listrik & Air",
            "Internet & Pulsa",
            "Kesehatan",
            "Belanja",
            "Langganan",
            "Laundry",
            "Parkir",
            "Bensin",
            "Pakaian",
            "Perawatan Diri",
            "Donasi",
            "Cicilan",
            "Tabungan",
            "Lainnya",
        )
    ),
}

# Category chart slice colours, cycled when categories outnumber them
PIE_COLORS: tuple[str, ...] = (
    "#6366f1",
    "#818cf8",
    "#a78bfa",
    "#c084fc",
    "#f472b6",
    "#fb7185",
    "#f87171",
    "#fbbf24",
    "#34d399",
    "#2dd4bf",
)


def categories_for(txn_type: str) -> tuple[CategoryName, ...]:
    """Get the category vocabulary for a transaction type.

    Args:
        txn_type: "income" or "expense".

    Returns:
        Tuple of category names, empty for an unknown type.
    """
    return CATEGORIES.get(txn_type, ())
