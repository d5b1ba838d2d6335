"""Sample catalog used by ``ims demo``."""

from __future__ import annotations

SAMPLE_RECORDS = [
    {
        "kind": "physical",
        "id": "PROD-001",
        "name": "Laptop Dell XPS 15",
        "price": "1299.99",
        "stock": 15,
        "weight_kg": 2.5,
        "dimensions": "35x25x2 cm",
    },
    {
        "kind": "physical",
        "id": "PROD-002",
        "name": "Mouse Logitech MX Master 3",
        "price": "99.99",
        "stock": 50,
        "weight_kg": 0.3,
        "dimensions": "12x8x4 cm",
    },
    {
        "kind": "physical",
        "id": "PROD-003",
        "name": "Keychron K2 Mechanical Keyboard",
        "price": "79.99",
        "stock": 30,
        "weight_kg": 0.8,
        "dimensions": "35x12x3 cm",
    },
    {
        "kind": "physical",
        "id": "PROD-007",
        "name": "Standing Desk Frame",
        "price": "349.00",
        "stock": 4,
        "weight_kg": 24.0,
        "dimensions": "120x60x10 cm",
    },
    {
        "kind": "digital",
        "id": "PROD-004",
        "name": "Microsoft Office 365 License",
        "price": "69.99",
        "stock": 1000,
        "file_size_mb": 150.5,
        "format": "EXE",
    },
    {
        "kind": "digital",
        "id": "PROD-005",
        "name": "Complete Java Course",
        "price": "49.99",
        "stock": 5000,
        "file_size_mb": 2500.0,
        "format": "MP4",
    },
    {
        "kind": "digital",
        "id": "PROD-006",
        "name": "Digital Album - Jazz Collection",
        "price": "9.99",
        "stock": 10000,
        "file_size_mb": 120.0,
        "format": "MP3",
    },
]
