#!/usr/bin/env python3
"""Walk the booking workflow against a running server."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:3000"

BOOKING = {
    "service": "consult",
    "serviceName": "Strategy Session",
    "price": "50000 KRW",
    "priceUSD": 37,
    "name": "Smoke Test",
    "email": "smoke@example.com",
    "phone": "010-0000-0000",
    "date": "2030-01-15",
    "time": "10:00",
}


def step(path: str, payload: dict) -> dict:
    print("=" * 60)
    print(f"POST {path}")
    response = httpx.post(f"{BASE_URL}{path}", json=payload, timeout=30.0)
    if response.status_code >= 400:
        print(f"❌ HTTP {response.status_code}: {response.text}")
        sys.exit(1)
    data = response.json()
    print(f"✅ {data}")
    return data


def main():
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload --port 3000")
        sys.exit(1)

    booking_id = step("/api/create-booking", BOOKING)["bookingId"]
    step("/api/verify-payment", {"bookingId": booking_id})
    step("/api/create-calendar-event", {"bookingId": booking_id})
    step("/api/send-confirmation-emails", {"bookingId": booking_id})

    print("=" * 60)
    print(httpx.get(f"{BASE_URL}/api/booking/{booking_id}").json())


if __name__ == "__main__":
    main()
