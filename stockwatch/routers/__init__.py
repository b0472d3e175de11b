# Routers package — Thin Controllers (SRP / DIP)
from stockwatch.routers import products, alerts

__all__ = [
    "products",
    "alerts",
]
