VENDOR_FIELDS = {
    "businessName": "Acme Goods",
    "businessType": "Retail",
    "description": "Household goods",
    "contactPhone": "+1 555 000 0000",
    "address": "123 Business St",
    "city": "Springfield",
    "state": "IL",
    "zipCode": "62701",
    "country": "US",
}


def register(auth_client, email, password="pw1"):
    """Register a user and return (user, token)."""
    response = auth_client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    data = response.json()
    return data["user"], data["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def create_vendor(vendor_client, token, **overrides):
    fields = dict(VENDOR_FIELDS, **overrides)
    response = vendor_client.post("/vendor/profile", headers=bearer(token), json=fields)
    assert response.status_code == 201, response.text
    return response.json()["vendor"]
