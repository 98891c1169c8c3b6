"""
marketplace package

Backend services for the multi-vendor marketplace platform:

- Auth Service (`auth_service`): user registration, login and JWT issuance
- Vendor Service (`vendor_service`): vendor profiles and stores, gated by token ownership
- API Gateway (`api_gateway`): pass-through entry point in front of both services
- Client (`client`): the storefront and vendor-portal flows as a Python library

Shared configuration, database models and token handling live in `common`.
"""
