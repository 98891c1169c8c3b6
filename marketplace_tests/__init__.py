"""
marketplace_tests package

Tests for the marketplace services and client flows:

- Auth Service registration, login and token handling (`test_auth.py`, `test_tokens.py`)
- Vendor Service profiles, stores and ownership (`test_vendor.py`, `test_stores.py`)
- Gateway forwarding (`test_gateway.py`)
- Storefront and vendor portal flows (`test_client_flows.py`)
"""
