# src/services/orders_service/__init__.py
"""
Orders Service — HTTP-граница домена заказов.
"""
