"""
Order Flow Simulation Script

Fires a burst of concurrent requests at a running server and walks each
order through its lifecycle: create, read, move to preparing, and delete
the ones still pending. Also sends a handful of invalid requests and
checks they are rejected.

Run from project root (server started with `python -m grubdash.main`):
    python scripts/simulate.py --orders 50
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5001"
TOTAL_ORDERS = 50

# Sample data for random orders
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave"]
MENU = [
    {"name": "Pizza Margherita", "description": "Tomato, mozzarella, basil", "price": 14},
    {"name": "Caesar Salad", "description": "Romaine, parmesan, croutons", "price": 9},
    {"name": "Garlic Bread", "description": "Toasted with garlic butter", "price": 6},
    {"name": "Tiramisu", "description": "Coffee-soaked ladyfingers", "price": 8},
]

INVALID_REQUESTS = [
    ("POST", "/dishes", {"data": {"name": "Taco", "description": "x", "price": 0, "image_url": "u"}}, 400),
    ("POST", "/dishes", {"data": {"description": "x", "price": 5, "image_url": "u"}}, 400),
    ("GET", "/dishes/abc-123", None, 404),
    ("DELETE", "/dishes/abc-123", None, 405),
    ("POST", "/orders", {"data": {"deliverTo": "x", "mobileNumber": "y", "dishes": [{"dishId": 1, "quantity": 0}]}}, 400),
    ("POST", "/orders", {"data": {"deliverTo": "x", "mobileNumber": "y", "dishes": []}}, 400),
    ("GET", "/no-such-path", None, 404),
]


def generate_order_payload(dish_ids: list[str]) -> dict[str, Any]:
    """Generate a random valid order change-set."""
    lines = [
        {"dishId": dish_id, "quantity": random.randint(1, 3)}
        for dish_id in random.sample(dish_ids, k=random.randint(1, len(dish_ids)))
    ]
    return {
        "data": {
            "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
            "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "dishes": lines,
        }
    }


async def create_menu(client: httpx.AsyncClient) -> list[str]:
    """Create the sample menu and return the new dish ids."""
    dish_ids = []
    for dish in MENU:
        payload = {"data": {**dish, "image_url": f"https://example.com/{dish['name']}.jpg"}}
        response = await client.post(f"{API_BASE_URL}/dishes", json=payload)
        response.raise_for_status()
        dish_ids.append(response.json()["data"]["id"])
    return dish_ids


async def run_order_flow(
    client: httpx.AsyncClient,
    order_num: int,
    dish_ids: list[str],
) -> dict[str, Any]:
    """Create one order and walk it through its lifecycle."""
    start_time = time.time()

    try:
        response = await client.post(
            f"{API_BASE_URL}/orders",
            json=generate_order_payload(dish_ids),
            timeout=30.0,
        )
        if response.status_code != 201:
            raise RuntimeError(f"create -> {response.status_code}: {response.text[:100]}")
        order = response.json()["data"]
        order_url = f"{API_BASE_URL}/orders/{order['id']}"

        response = await client.get(order_url)
        if response.status_code != 200:
            raise RuntimeError(f"read -> {response.status_code}")

        # Half the orders start preparing and can no longer be deleted
        if order_num % 2 == 0:
            response = await client.put(order_url, json={"data": {**order, "status": "preparing"}})
            if response.status_code != 200:
                raise RuntimeError(f"update -> {response.status_code}: {response.text[:100]}")
            expected_delete = 400
        else:
            expected_delete = 204

        response = await client.delete(order_url)
        if response.status_code != expected_delete:
            raise RuntimeError(f"delete -> {response.status_code}, expected {expected_delete}")

        return {
            "order_num": order_num,
            "success": True,
            "order_id": order["id"],
            "deleted": expected_delete == 204,
            "time": round(time.time() - start_time, 3),
        }
    except (httpx.HTTPError, RuntimeError) as e:
        return {
            "order_num": order_num,
            "success": False,
            "error": str(e)[:100],
            "time": round(time.time() - start_time, 3),
        }


async def check_rejections(client: httpx.AsyncClient) -> bool:
    """Send invalid requests and confirm each is rejected with the expected status."""
    print("\nChecking invalid requests...")
    all_ok = True
    for method, path, body, expected in INVALID_REQUESTS:
        response = await client.request(method, f"{API_BASE_URL}{path}", json=body)
        ok = response.status_code == expected
        all_ok = all_ok and ok
        mark = "OK  " if ok else "FAIL"
        print(f"   {mark} {method:6} {path:20} -> {response.status_code} {response.json().get('error', '')}")
    return all_ok


async def run_simulation(num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Run the order flow simulation.

    Args:
        num_orders: Number of concurrent order flows
    """
    print("=" * 70)
    print("ORDER FLOW SIMULATION")
    print("=" * 70)
    print(f"Total Orders: {num_orders}")
    print(f"Target: {API_BASE_URL}")
    print(f"Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{API_BASE_URL}/health")
        response.raise_for_status()
        before = response.json()

        dish_ids = await create_menu(client)
        print(f"\nCreated {len(dish_ids)} dishes")

        tasks = [run_order_flow(client, i + 1, dish_ids) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)

        rejections_ok = await check_rejections(client)

        response = await client.get(f"{API_BASE_URL}/health")
        after = response.json()

    total_time = round(time.time() - start_time, 2)
    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]
    kept = len([r for r in successful if not r["deleted"]])

    print("\n" + "=" * 70)
    print("SIMULATION RESULTS")
    print("=" * 70)
    print(f"Successful flows: {len(successful)}/{num_orders}")
    print(f"Failed flows: {len(failed)}/{num_orders}")
    print(f"Total Time: {total_time}s")
    print(f"Orders before: {before['orders']}, after: {after['orders']} (expected +{kept})")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"Average flow time: {avg_time}s")

    if failed:
        print("\nFailed flow details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_orders,
        "successful": len(successful),
        "failed": len(failed),
        "rejections_ok": rejections_ok,
        "consistent": after["orders"] - before["orders"] == kept,
        "total_time": total_time,
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Flow Simulation Script")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    args = parser.parse_args()

    API_BASE_URL = args.url
    summary = asyncio.run(run_simulation(args.orders))
    ok = not summary["failed"] and summary["rejections_ok"] and summary["consistent"]
    sys.exit(0 if ok else 1)
