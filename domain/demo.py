"""Seed data for a fresh dashboard session."""

from __future__ import annotations

from typing import List

from .records import InventoryItem, LicenseDoc, Requisition

DEMO_INVENTORY: List[InventoryItem] = [
    {"id": "inv-1", "name": "Amoxicillin 500mg", "category": "Antibiotics", "unitPrice": 1200, "quantity": 5000, "unit": "capsules", "expiryDate": "2027-06-15"},
    {"id": "inv-2", "name": "Paracetamol 500mg", "category": "Analgesics", "unitPrice": 300, "quantity": 15000, "unit": "tablets", "expiryDate": "2027-12-01"},
    {"id": "inv-3", "name": "Metformin 850mg", "category": "Antidiabetics", "unitPrice": 800, "quantity": 3000, "unit": "tablets", "expiryDate": "2027-03-20"},
    {"id": "inv-4", "name": "Ibuprofen 400mg", "category": "Analgesics", "unitPrice": 450, "quantity": 8000, "unit": "tablets", "expiryDate": "2027-09-10"},
    {"id": "inv-5", "name": "Omeprazole 20mg", "category": "Gastrointestinal", "unitPrice": 950, "quantity": 2500, "unit": "capsules", "expiryDate": "2026-11-30"},
    {"id": "inv-6", "name": "Azithromycin 250mg", "category": "Antibiotics", "unitPrice": 2500, "quantity": 1200, "unit": "tablets", "expiryDate": "2027-08-15"},
    {"id": "inv-7", "name": "Ciprofloxacin 500mg", "category": "Antibiotics", "unitPrice": 1800, "quantity": 2000, "unit": "tablets", "expiryDate": "2027-04-22"},
    {"id": "inv-8", "name": "Diclofenac 50mg", "category": "Analgesics", "unitPrice": 500, "quantity": 6000, "unit": "tablets", "expiryDate": "2027-07-18"},
    {"id": "inv-9", "name": "Amlodipine 5mg", "category": "Cardiovascular", "unitPrice": 700, "quantity": 4000, "unit": "tablets", "expiryDate": "2027-10-05"},
    {"id": "inv-10", "name": "Cetirizine 10mg", "category": "Antihistamines", "unitPrice": 350, "quantity": 7000, "unit": "tablets", "expiryDate": "2027-05-12"},
]

DEMO_REQUISITIONS: List[Requisition] = [
    {
        "id": "req-001",
        "pharmacyName": "Pharmacie de la Paix",
        "pharmacyContact": "+250 788 123 456",
        "requestDate": "2026-02-15",
        "items": [
            {"name": "Amoxicillin 500mg", "quantity": 100, "unitPrice": 1200},
            {"name": "Paracetamol 500mg", "quantity": 120, "unitPrice": 300},
        ],
        "status": "pending",
        "momoCode": None,
        "totalAmount": 156000,
    },
    {
        "id": "req-002",
        "pharmacyName": "Green Cross Pharmacy",
        "pharmacyContact": "+250 788 234 567",
        "requestDate": "2026-02-14",
        "items": [
            {"name": "Metformin 850mg", "quantity": 200, "unitPrice": 800},
            {"name": "Amlodipine 5mg", "quantity": 100, "unitPrice": 700},
            {"name": "Omeprazole 20mg", "quantity": 10, "unitPrice": 950},
        ],
        "status": "pending",
        "momoCode": None,
        "totalAmount": 240000,
    },
    {
        "id": "req-003",
        "pharmacyName": "Pharmacy Vita",
        "pharmacyContact": "+250 788 345 678",
        "requestDate": "2026-02-13",
        "items": [
            {"name": "Azithromycin 250mg", "quantity": 25, "unitPrice": 2500},
        ],
        "status": "accepted",
        "momoCode": "MP-2026-7821",
        "totalAmount": 62500,
    },
    {
        "id": "req-004",
        "pharmacyName": "MedPlus Kigali",
        "pharmacyContact": "+250 788 456 789",
        "requestDate": "2026-02-12",
        "items": [
            {"name": "Ciprofloxacin 500mg", "quantity": 50, "unitPrice": 1800},
        ],
        "status": "rejected",
        "momoCode": None,
        "totalAmount": 90000,
    },
    {
        "id": "req-005",
        "pharmacyName": "Ubuzima Pharmacy",
        "pharmacyContact": "+250 788 567 890",
        "requestDate": "2026-02-16",
        "items": [
            {"name": "Paracetamol 500mg", "quantity": 500, "unitPrice": 300},
            {"name": "Ibuprofen 400mg", "quantity": 200, "unitPrice": 450},
            {"name": "Diclofenac 50mg", "quantity": 100, "unitPrice": 500},
        ],
        "status": "pending",
        "momoCode": None,
        "totalAmount": 315000,
    },
]

DEMO_LICENSES: List[LicenseDoc] = [
    {"id": "lic-1", "name": "Pharmacy Operating License 2026.pdf", "uploadDate": "2026-01-05", "type": "Operating License"},
    {"id": "lic-2", "name": "FDA Import Permit.pdf", "uploadDate": "2025-11-20", "type": "Import Permit"},
]
