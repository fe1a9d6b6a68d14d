"""stockpot — in-memory inventory for a small book and electronics shop.

Tracks products, sells them with optional discounts (student, bulk) and
reports stock value and low-stock items. Nothing is persisted; the inventory
lives as long as the process does.

Usage:
    python -m stockpot demo                          # Sample catalog + sales
    python -m stockpot shell                         # Interactive session
    python -m stockpot discounts                     # Show discount rules
"""
